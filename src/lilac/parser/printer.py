# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Canonical source text for Lilac AST nodes.

Parsing the text produced here yields a node equal to the one printed.
"""

from __future__ import annotations

from decimal import Decimal

from lilac.model.nodes import (
    Expression,
    Function,
    FunctionCase,
    FunctionHeader,
    LiteralType,
    Term,
)

# ###############
# Public Interface
# ###############

# Printed in place of an argument that failed to parse; it never parses itself.
HOLE = "?"


def format_term(term: Term | None) -> str:
    """Return the source text of a call or literal."""
    if term is None:
        return HOLE
    if isinstance(term, Expression):
        return _format_expression(term)
    arguments = ", ".join(format_term(arg) for arg in term.arguments)
    return f"{term.name}({arguments})"


def format_header(header: FunctionHeader) -> str:
    """Return the ``func name inputs -> outputs`` line for a header."""
    return f"func {header.name} {', '.join(header.inputs)} -> {', '.join(header.outputs)}"


def format_case(case: FunctionCase, name: str) -> str:
    """Return the ``name(arguments) = body;`` line for a case.

    Args:
        case: The case to print.
        name: The function name to print in front of the arguments.
    """
    return f"{name}({', '.join(case.arguments)}) = {format_term(case.body)};"


def format_function(function: Function, indent: str = "    ") -> str:
    """Return a complete braced function definition, ending with a newline."""
    lines = [format_header(function.header), "{"]
    lines.extend(indent + format_case(case, function.header.name) for case in function.body.cases)
    lines.append("}")
    return "\n".join(lines) + "\n"


# ################
# Implementation
# ################

_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


def _format_expression(expression: Expression) -> str:
    value = expression.value
    if expression.literal_type == LiteralType.BOOLEAN:
        return "true" if value else "false"
    if expression.literal_type == LiteralType.INTEGER:
        return str(value)
    if expression.literal_type == LiteralType.FLOAT:
        # Positional notation only; the literal grammar has no exponent form.
        text = format(Decimal(repr(value)), "f")
        return text if "." in text else text + ".0"
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in str(value)) + '"'
