# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI listing the functions and diagnostics of a directory."""

from pathlib import Path

import dash
from dash import html

from lilac.parser.document import parse_document
from lilac.parser.printer import format_function
from lilac.validation.checks import Diagnostic, Severity, check_document
from lilac.workspace.config import SETTINGS_FILE_NAME, LilacSettings, find_sources, load_settings

# ###############
# Public Interface
# ###############


def create_app(directory: Path) -> dash.Dash:
    """Create and configure the Lilac web UI application."""
    app = dash.Dash(
        __name__,
        title="Lilac Function Viewer",
    )
    app.layout = _build_layout(directory)
    return app


# ################
# Implementation
# ################

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "#b00020",
    Severity.WARNING: "#b26a00",
    Severity.INFORMATION: "#1a5fb4",
}


def _build_layout(directory: Path) -> html.Div:
    """Build the application layout."""
    settings_path = directory / SETTINGS_FILE_NAME
    settings = load_settings(settings_path) if settings_path.exists() else LilacSettings()
    sources = find_sources(directory, settings)

    children: list = [
        html.H1("Lilac Function Viewer"),
        html.P(f"Workspace: {directory}"),
        html.Hr(),
    ]
    if not sources:
        children.append(html.P("No .lilac files found.", style={"color": "#666"}))
    for source in sources:
        children.append(_build_source_section(directory, source, settings))
    return html.Div(children, style={"fontFamily": "sans-serif", "padding": "2rem"})


def _build_source_section(directory: Path, source: Path, settings: LilacSettings) -> html.Div:
    """Render one file: its functions in canonical form, then its diagnostics."""
    label = source.relative_to(directory) if source.is_relative_to(directory) else source
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return html.Div(
            [
                html.H2(str(label)),
                html.P(f"Cannot read file: {exc}", style={"color": _SEVERITY_COLORS[Severity.ERROR]}),
            ],
            className="lilac-source",
        )

    document = parse_document(text)
    diagnostics = check_document(document, settings)
    return html.Div(
        [
            html.H2(str(label)),
            html.Pre("\n".join(format_function(d.function) for d in document.functions)),
            html.Ul([_build_diagnostic_item(item) for item in diagnostics])
            if diagnostics
            else html.P("No issues found.", style={"color": "#2e7d32"}),
        ],
        className="lilac-source",
    )


def _build_diagnostic_item(item: Diagnostic) -> html.Li:
    location = f"line {item.span.line}: " if item.span is not None else ""
    return html.Li(
        f"{location}{item.message}",
        style={"color": _SEVERITY_COLORS[item.severity]},
    )
