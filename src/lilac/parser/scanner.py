# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line scanner for Lilac documents.

Slices raw source text into classified lines (headers, braces, cases) with
their source positions, for the line-level parsers to consume.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class LineKind(enum.Enum):
    """Classification of a scanned source line."""

    HEADER = "header"
    OPEN = "{"
    CLOSE = "}"
    CASE = "case"
    BLANK = "blank"


@dataclass(frozen=True)
class Span:
    """A single-line range of source text.

    Attributes:
        line: 1-based line number.
        column: 1-based column of the first character.
        end_column: 1-based column one past the last character.
    """

    line: int
    column: int
    end_column: int


@dataclass(frozen=True)
class SourceLine:
    """A trimmed, comment-free line of source and where it came from.

    Attributes:
        kind: How the line was classified.
        text: The line content with comments and surrounding whitespace removed.
        span: Position of ``text`` in the original source.
    """

    kind: LineKind
    text: str
    span: Span


def scan(source: str) -> list[SourceLine]:
    """Split Lilac source into classified lines.

    ``//`` comments outside string literals are removed. A header line that
    ends with ``{`` produces a HEADER line followed by an OPEN line.

    Args:
        source: The full text of a .lilac document.

    Returns:
        One SourceLine per physical line, plus one extra OPEN line for each
        header that opens its body on the same line.
    """
    lines: list[SourceLine] = []
    for number, raw in enumerate(source.split("\n"), start=1):
        lines.extend(_scan_line(number, _strip_comment(raw.rstrip("\r"))))
    return lines


# ################
# Implementation
# ################


def _strip_comment(raw: str) -> str:
    """Drop a trailing ``//`` comment, ignoring slashes inside string literals."""
    in_string = False
    escaped = False
    for index, ch in enumerate(raw):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "/" and raw.startswith("//", index):
            return raw[:index]
    return raw


def _scan_line(number: int, raw: str) -> list[SourceLine]:
    text = raw.strip()
    column = len(raw) - len(raw.lstrip()) + 1
    span = Span(number, column, column + len(text))

    if not text:
        return [SourceLine(LineKind.BLANK, "", Span(number, 1, 1))]
    if text == "{":
        return [SourceLine(LineKind.OPEN, text, span)]
    if text == "}":
        return [SourceLine(LineKind.CLOSE, text, span)]
    if _is_header(text):
        if text.endswith("{"):
            header_text = text[:-1].rstrip()
            brace_column = span.end_column - 1
            return [
                SourceLine(LineKind.HEADER, header_text, Span(number, column, column + len(header_text))),
                SourceLine(LineKind.OPEN, "{", Span(number, brace_column, brace_column + 1)),
            ]
        return [SourceLine(LineKind.HEADER, text, span)]
    return [SourceLine(LineKind.CASE, text, span)]


def _is_header(text: str) -> bool:
    return text == "func" or (text.startswith("func") and text[4].isspace())
