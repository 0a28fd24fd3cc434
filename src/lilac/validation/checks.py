# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural validation of Lilac functions.

A function is checked case by case against its header. Only the first
problem of each function is reported. Output types are declared in the
header but are not checked against the case bodies.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from lilac.model.nodes import Function
from lilac.parser.document import Document
from lilac.parser.scanner import Span
from lilac.workspace.config import LilacSettings

# ###############
# Public Interface
# ###############


class Severity(enum.Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


@dataclass(frozen=True)
class Diagnostic:
    """A problem found in a Lilac document.

    Attributes:
        severity: How serious the problem is.
        message: Human-readable description of the problem.
        case_index: 0-based index of the offending case, if the problem is in a case.
        span: Location of the problem, when known.
    """

    severity: Severity
    message: str
    case_index: int | None = None
    span: Span | None = None


def diagnostic(function: Function) -> Diagnostic | None:
    """Return the first structural problem of a function, or None if it is valid.

    Checks, in order:

    1. The header name must not be empty.
    2. Each case, in order, must declare as many arguments as the header
       declares inputs, and each argument must equal the header input at the
       same position.

    Args:
        function: The function to check.

    Returns:
        An error Diagnostic for the first violation found, or ``None``.
    """
    header = function.header
    if header.name == "":
        return Diagnostic(Severity.ERROR, "Function name cannot be empty")

    for i, case in enumerate(function.body.cases):
        if len(case.arguments) != len(header.inputs):
            return Diagnostic(
                Severity.ERROR,
                f"Number of arguments in case {i} does not match function header",
                case_index=i,
            )
        for j, (argument, expected) in enumerate(zip(case.arguments, header.inputs)):
            if argument != expected:
                return Diagnostic(
                    Severity.ERROR,
                    f"Argument {j} in case {i} does not match function header",
                    case_index=i,
                )
    return None


def check_document(document: Document, settings: LilacSettings | None = None) -> list[Diagnostic]:
    """Collect the syntax issues and function diagnostics of a parsed document.

    Each diagnostic is positioned at the header of its function, or at the
    offending case. The result is ordered by position.

    Args:
        document: The parsed document.
        settings: Limits to apply; defaults to :class:`LilacSettings` defaults.

    Returns:
        At most ``settings.max_number_of_problems`` diagnostics.
    """
    if settings is None:
        settings = LilacSettings()

    diagnostics = [Diagnostic(Severity.ERROR, issue.message, span=issue.span) for issue in document.issues]
    for definition in document.functions:
        found = diagnostic(definition.function)
        if found is None:
            continue
        if found.case_index is None:
            span = definition.header_span
        else:
            span = definition.case_spans[found.case_index]
        diagnostics.append(replace(found, span=span))

    diagnostics.sort(key=_position)
    return diagnostics[: settings.max_number_of_problems]


# ################
# Implementation
# ################


def _position(item: Diagnostic) -> tuple[int, int]:
    if item.span is None:
        return (0, 0)
    return (item.span.line, item.span.column)
