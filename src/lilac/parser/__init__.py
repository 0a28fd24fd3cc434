# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and parsers for .lilac documents."""

from lilac.parser.document import Document, FunctionDefinition, SyntaxIssue, parse_document
from lilac.parser.parser import (
    parse_expression,
    parse_function_arguments,
    parse_function_call,
    parse_function_case,
    parse_header,
)
from lilac.parser.printer import format_case, format_function, format_header, format_term
from lilac.parser.scanner import LineKind, SourceLine, Span, scan

__all__ = [
    "parse_expression",
    "parse_function_call",
    "parse_function_arguments",
    "parse_header",
    "parse_function_case",
    "parse_document",
    "Document",
    "FunctionDefinition",
    "SyntaxIssue",
    "scan",
    "LineKind",
    "SourceLine",
    "Span",
    "format_term",
    "format_header",
    "format_case",
    "format_function",
]
