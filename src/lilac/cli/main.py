# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Lilac command-line interface."""

import argparse
import json
import sys
from pathlib import Path

from yachalk import chalk

from lilac.parser.document import parse_document
from lilac.validation.checks import Diagnostic, Severity, check_document
from lilac.workspace.config import SETTINGS_FILE_NAME, LilacSettings, SettingsError, find_sources, load_settings

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Lilac CLI."""
    parser = argparse.ArgumentParser(
        prog="lilac",
        description="Lilac - pattern-matching function definition checker",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check .lilac files for structural problems",
        description="Parse .lilac files and report syntax issues and header/case mismatches.",
    )
    check_parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to check (default: current directory)",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help=f"Settings file to use (default: {SETTINGS_FILE_NAME} in the current directory, if present)",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the parsed functions of a file as JSON",
        description="Parse a .lilac file and print its function syntax trees as JSON.",
    )
    dump_parser.add_argument("file", help="The .lilac file to parse")

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive function viewer",
        description="Launch a web-based UI listing the functions and diagnostics of a directory.",
    )
    serve_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing .lilac files (default: current directory)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "dump":
        return _cmd_dump(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _load_cli_settings(config: str | None) -> LilacSettings:
    """Load settings from --config, or from the current directory if present."""
    if config is not None:
        return load_settings(Path(config))
    default_path = Path.cwd() / SETTINGS_FILE_NAME
    if default_path.exists():
        return load_settings(default_path)
    return LilacSettings()


def _format_diagnostic(path: Path, item: Diagnostic) -> str:
    location = str(path)
    if item.span is not None:
        location = f"{path}:{item.span.line}:{item.span.column}"
    line = f"{location}: {item.severity.value}: {item.message}"
    if item.severity == Severity.ERROR:
        return chalk.red(line)
    if item.severity == Severity.WARNING:
        return chalk.yellow(line)
    return chalk.blue(line)


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        settings = _load_cli_settings(args.config)
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sources: list[Path] = []
    for raw in args.paths:
        path = Path(raw)
        if not path.exists():
            print(f"Error: path '{path}' does not exist.", file=sys.stderr)
            return 1
        sources.extend(find_sources(path, settings))

    if not sources:
        print("No .lilac files found.")
        return 0

    print(f"Checking {len(sources)} file(s)...")
    has_errors = False
    for source in sources:
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read '{source}': {exc}", file=sys.stderr)
            has_errors = True
            continue
        for item in check_document(parse_document(text), settings):
            if item.severity == Severity.ERROR:
                print(_format_diagnostic(source, item), file=sys.stderr)
                has_errors = True
            else:
                print(_format_diagnostic(source, item))

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    path = Path(args.file)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    document = parse_document(text)
    functions = [definition.function.model_dump(mode="json") for definition in document.functions]
    print(json.dumps(functions, indent=2))
    for issue in document.issues:
        print(f"{path}:{issue.span.line}:{issue.span.column}: {issue.message}", file=sys.stderr)
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.is_dir():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    from lilac.webui.app import create_app

    try:
        app = create_app(directory=directory)
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Serving function view at http://{args.host}:{args.port}/")
    app.run(host=args.host, port=args.port, debug=False)
    return 0
