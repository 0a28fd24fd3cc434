# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of scanned lines into the functions of a Lilac document.

A document is a sequence of functions of the form::

    func name in1, in2 -> out1
    {
        name(in1, in2) = body;
        ...
    }

The braces are optional. Problems with the document structure are collected
as syntax issues instead of being raised, so that a half-written document
still yields every function that can be recovered.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lilac.model.nodes import Function, FunctionBody, FunctionCase, FunctionHeader
from lilac.parser.parser import parse_function_case, parse_header
from lilac.parser.scanner import LineKind, SourceLine, Span, scan

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SyntaxIssue:
    """A line or brace that could not be fitted into the document structure.

    Attributes:
        message: Human-readable description of the problem.
        span: Location of the offending text.
    """

    message: str
    span: Span


@dataclass
class FunctionDefinition:
    """A parsed function together with the source positions of its parts.

    Attributes:
        function: The header and body AST.
        header_span: Location of the header line.
        case_spans: Location of each case, parallel to ``function.body.cases``.
    """

    function: Function
    header_span: Span
    case_spans: list[Span] = field(default_factory=list)


@dataclass
class Document:
    """The parsed contents of a single .lilac document.

    Attributes:
        functions: Functions whose header parsed, in source order.
        issues: Structural problems found while assembling the functions.
    """

    functions: list[FunctionDefinition] = field(default_factory=list)
    issues: list[SyntaxIssue] = field(default_factory=list)


def parse_document(source: str) -> Document:
    """Parse Lilac source text into its functions and syntax issues.

    Args:
        source: The full text of a .lilac document.

    Returns:
        A Document. Malformed input never raises; it shows up in ``issues``.
    """
    return _DocumentBuilder().build(scan(source))


# ################
# Implementation
# ################


@dataclass
class _PendingFunction:
    header: FunctionHeader | None
    header_span: Span
    cases: list[FunctionCase] = field(default_factory=list)
    case_spans: list[Span] = field(default_factory=list)
    is_open: bool = False
    was_opened: bool = False


class _DocumentBuilder:
    """Line-driven state machine that groups cases under their headers."""

    def __init__(self) -> None:
        self._document = Document()
        self._pending: _PendingFunction | None = None

    def build(self, lines: list[SourceLine]) -> Document:
        for line in lines:
            if line.kind == LineKind.HEADER:
                self._on_header(line)
            elif line.kind == LineKind.OPEN:
                self._on_open(line)
            elif line.kind == LineKind.CLOSE:
                self._on_close(line)
            elif line.kind == LineKind.CASE:
                self._on_case(line)
        if self._pending is not None and self._pending.is_open:
            self._issue("Missing '}' at end of document", self._pending.header_span)
        self._finish()
        return self._document

    def _issue(self, message: str, span: Span) -> None:
        self._document.issues.append(SyntaxIssue(message=message, span=span))

    def _finish(self) -> None:
        pending = self._pending
        self._pending = None
        if pending is None or pending.header is None:
            return
        function = Function(header=pending.header, body=FunctionBody(cases=pending.cases))
        self._document.functions.append(
            FunctionDefinition(function=function, header_span=pending.header_span, case_spans=pending.case_spans)
        )

    def _on_header(self, line: SourceLine) -> None:
        if self._pending is not None and self._pending.is_open:
            self._issue("Missing '}' before next function header", line.span)
        self._finish()
        header = parse_header(line.text)
        if header is None:
            self._issue("Malformed function header, expected 'func name inputs -> outputs'", line.span)
        self._pending = _PendingFunction(header=header, header_span=line.span)

    def _on_open(self, line: SourceLine) -> None:
        pending = self._pending
        if pending is None:
            self._issue("'{' without a function header", line.span)
        elif pending.was_opened or pending.cases:
            self._issue("Unexpected '{'", line.span)
        else:
            pending.is_open = True
            pending.was_opened = True

    def _on_close(self, line: SourceLine) -> None:
        if self._pending is None or not self._pending.is_open:
            self._issue("Unmatched '}'", line.span)
            return
        self._pending.is_open = False
        self._finish()

    def _on_case(self, line: SourceLine) -> None:
        pending = self._pending
        if pending is None:
            self._issue("Function case outside of a function", line.span)
            return
        case = parse_function_case(line.text)
        if case is None:
            self._issue("Malformed function case, expected 'name(arguments) = body;'", line.span)
            return
        pending.cases.append(case)
        pending.case_spans.append(line.span)
