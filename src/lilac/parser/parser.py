# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-level parsers for Lilac headers, cases, calls, and literal expressions.

Every parser returns ``None`` when its input does not have the expected shape.
A failed match is a normal outcome for partially typed source and never raises.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator

from lilac.model.nodes import (
    Expression,
    FunctionCall,
    FunctionCase,
    FunctionHeader,
    LiteralType,
    Term,
)

# ###############
# Public Interface
# ###############


def parse_expression(text: str) -> Expression | None:
    """Parse a single literal: an integer, a decimal, ``true``/``false``, or a quoted string.

    Args:
        text: A trimmed fragment of source text.

    Returns:
        The literal as an Expression, or ``None`` if the fragment is not a literal.
    """
    if text == "true":
        return Expression(literal_type=LiteralType.BOOLEAN, value=True)
    if text == "false":
        return Expression(literal_type=LiteralType.BOOLEAN, value=False)
    if _INTEGER_RE.fullmatch(text):
        return _parse_integer(text)
    if _FLOAT_RE.fullmatch(text):
        return _parse_float(text)
    match = _STRING_RE.fullmatch(text)
    if match:
        return Expression(literal_type=LiteralType.STRING, value=_unescape(match.group(1)))
    return None


def parse_function_call(text: str) -> Term | None:
    """Parse ``identifier(arguments)``, falling back to a literal expression.

    Arguments that fail to parse are kept as ``None`` placeholders rather than
    failing the whole call. Text nested more than a fixed number of calls deep
    does not parse.

    Args:
        text: A trimmed fragment of source text.

    Returns:
        A FunctionCall, an Expression, or ``None`` if neither shape matches.
    """
    if _nesting_depth(text) > _MAX_NESTING_DEPTH:
        return None
    match = _CALL_RE.fullmatch(text)
    if not match:
        return parse_expression(text)
    return FunctionCall(name=match.group(1), arguments=parse_function_arguments(match.group(2)))


def parse_function_arguments(text: str) -> list[Term | None]:
    """Split an argument list on top-level commas and parse each argument.

    Commas nested inside parentheses or string literals do not split.
    """
    return [_parse_optional_term(arg) for arg in _split_arguments(text)]


def parse_header(line: str) -> FunctionHeader | None:
    """Parse a ``func name in1, in2 -> out1, out2`` declaration line.

    Both the input and the output list need at least one type name.

    Args:
        line: One line of source text.

    Returns:
        The parsed FunctionHeader, or ``None`` if the line is not a header.
    """
    match = _HEADER_RE.fullmatch(line)
    if not match:
        return None
    return FunctionHeader(
        name=match.group(1),
        inputs=_split_names(match.group(2)),
        outputs=_split_names(match.group(3)),
    )


def parse_function_case(line: str) -> FunctionCase | None:
    """Parse a ``name(arg1, arg2) = body;`` case line.

    The case name is not compared against the enclosing function. Unlike call
    arguments, the body is required: an unparsable body fails the whole case.
    The body ends at the first ``;`` outside a string literal.

    Args:
        line: One line of source text.

    Returns:
        The parsed FunctionCase, or ``None`` if the line or its body does not parse.
    """
    line = line.strip()
    match = _CASE_HEAD_RE.match(line)
    if not match:
        return None
    rest = line[match.end() :]
    end = _find_terminator(rest)
    if end is None:
        return None
    body = _parse_required_term(rest[:end])
    if body is None:
        return None
    arguments = match.group(2).strip()
    return FunctionCase(
        arguments=_split_names(arguments) if arguments else [],
        body=body,
    )


# ################
# Implementation
# ################

# Calls nested deeper than this are rejected instead of parsed.
_MAX_NESTING_DEPTH = 64

_HEADER_RE = re.compile(r"func\s+(\w+)\s+((?:\w+\s*,\s*)*\w+)\s*->\s*((?:\w+\s*,\s*)*\w+)")
_CASE_HEAD_RE = re.compile(r"(\w+)\(([^;]*?)\)\s*=\s*")
_CALL_RE = re.compile(r"(\w+)\((.*)\)", re.DOTALL)

_INTEGER_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")
_STRING_RE = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}


def _parse_integer(text: str) -> Expression | None:
    try:
        value = int(text)
    except ValueError:
        # Beyond the interpreter's digit limit for int conversion.
        return None
    return Expression(literal_type=LiteralType.INTEGER, value=value)


def _parse_float(text: str) -> Expression | None:
    value = float(text)
    if not math.isfinite(value):
        return None
    return Expression(literal_type=LiteralType.FLOAT, value=value)


def _unescape(body: str) -> str:
    """Decode backslash escapes; an unknown ``\\c`` stands for ``c`` itself."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def _split_names(text: str) -> list[str]:
    return [name.strip() for name in text.split(",")]


def _parse_optional_term(text: str) -> Term | None:
    """Lenient mode: an argument that does not parse becomes a placeholder."""
    return parse_function_call(text.strip())


def _parse_required_term(text: str) -> Term | None:
    """Strict mode: the caller rejects its whole construct when this returns None."""
    text = text.strip()
    if not text:
        return None
    return parse_function_call(text)


def _unquoted(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for every character outside double-quoted strings.

    The quote characters themselves are yielded.
    """
    in_string = False
    escaped = False
    for index, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
                yield index, ch
            continue
        if ch == '"':
            in_string = True
        yield index, ch


def _find_terminator(text: str) -> int | None:
    """Return the index of the first ``;`` outside a string literal."""
    for index, ch in _unquoted(text):
        if ch == ";":
            return index
    return None


def _nesting_depth(text: str) -> int:
    """Return the deepest parenthesis nesting outside string literals."""
    depth = 0
    deepest = 0
    for _, ch in _unquoted(text):
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def _split_arguments(text: str) -> list[str]:
    """Split on commas at parenthesis depth zero.

    Commas inside string literals do not split. A trailing argument is kept
    only if it is non-blank, so ``f()`` and ``f(1,)`` do not gain an empty
    final argument.
    """
    args: list[str] = []
    start = 0
    depth = 0
    for index, ch in _unquoted(text):
        if ch == "," and depth == 0:
            args.append(text[start:index])
            start = index + 1
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
    tail = text[start:]
    if tail.strip():
        args.append(tail)
    return args
