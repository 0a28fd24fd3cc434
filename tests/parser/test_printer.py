# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for printing Lilac AST nodes back to source text."""

import pytest

from lilac.model.nodes import (
    Expression,
    Function,
    FunctionBody,
    FunctionCall,
    FunctionCase,
    FunctionHeader,
    LiteralType,
)
from lilac.parser.document import parse_document
from lilac.parser.printer import HOLE, format_case, format_function, format_header, format_term


class TestFormatTerm:
    @pytest.mark.parametrize(
        ("expr", "text"),
        [
            (Expression(literal_type=LiteralType.BOOLEAN, value=True), "true"),
            (Expression(literal_type=LiteralType.BOOLEAN, value=False), "false"),
            (Expression(literal_type=LiteralType.INTEGER, value=-12), "-12"),
            (Expression(literal_type=LiteralType.FLOAT, value=0.5), "0.5"),
            (Expression(literal_type=LiteralType.FLOAT, value=3.0), "3.0"),
            (Expression(literal_type=LiteralType.FLOAT, value=1e20), "100000000000000000000.0"),
            (Expression(literal_type=LiteralType.STRING, value='say "hi"\n'), r'"say \"hi\"\n"'),
        ],
    )
    def test_expression(self, expr: Expression, text: str) -> None:
        assert format_term(expr) == text

    def test_placeholder(self) -> None:
        assert format_term(None) == HOLE

    def test_nested_call(self) -> None:
        call = FunctionCall(
            name="f",
            arguments=[FunctionCall(name="g"), None, Expression(literal_type=LiteralType.INTEGER, value=1)],
        )
        assert format_term(call) == "f(g(), ?, 1)"


class TestFormatDeclarations:
    def test_header(self) -> None:
        header = FunctionHeader(name="add", inputs=["a", "b"], outputs=["c"])
        assert format_header(header) == "func add a, b -> c"

    def test_case(self) -> None:
        case = FunctionCase(arguments=["a", "b"], body=Expression(literal_type=LiteralType.INTEGER, value=0))
        assert format_case(case, "add") == "add(a, b) = 0;"

    def test_function_round_trips_through_document_parser(self) -> None:
        function = Function(
            header=FunctionHeader(name="add", inputs=["a", "b"], outputs=["c"]),
            body=FunctionBody(
                cases=[
                    FunctionCase(
                        arguments=["a", "b"],
                        body=FunctionCall(name="plus", arguments=[None, None]),
                    )
                ]
            ),
        )
        text = format_function(function)
        assert text == "func add a, b -> c\n{\n    add(a, b) = plus(?, ?);\n}\n"
        document = parse_document(text)
        assert document.issues == []
        assert document.functions[0].function == function
