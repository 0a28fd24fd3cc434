# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the Lilac function validator."""

from lilac.model.nodes import (
    Expression,
    Function,
    FunctionBody,
    FunctionCase,
    FunctionHeader,
    LiteralType,
)
from lilac.parser.document import parse_document
from lilac.parser.scanner import Span
from lilac.validation.checks import Diagnostic, Severity, check_document, diagnostic
from lilac.workspace.config import LilacSettings

# ###############
# Test Helpers
# ###############


def _case(*arguments: str) -> FunctionCase:
    """Create a case with the given argument names and a literal body."""
    return FunctionCase(arguments=list(arguments), body=Expression(literal_type=LiteralType.INTEGER, value=0))


def _function(name: str, inputs: list[str], *cases: FunctionCase) -> Function:
    return Function(
        header=FunctionHeader(name=name, inputs=inputs, outputs=["out"]),
        body=FunctionBody(cases=list(cases)),
    )


def _assert_error(function: Function, message: str) -> Diagnostic:
    result = diagnostic(function)
    assert result is not None, f"Expected error {message!r} but function is valid"
    assert result.severity == Severity.ERROR
    assert result.message == message
    return result


# ###############
# Function Diagnostic
# ###############


class TestDiagnostic:
    def test_matching_case_is_valid(self) -> None:
        assert diagnostic(_function("add", ["a", "b"], _case("a", "b"))) is None

    def test_function_without_cases_is_valid(self) -> None:
        assert diagnostic(_function("f", ["a"])) is None

    def test_empty_name(self) -> None:
        result = _assert_error(_function("", ["a"], _case("a")), "Function name cannot be empty")
        assert result.case_index is None

    def test_empty_name_wins_over_case_problems(self) -> None:
        _assert_error(_function("", ["a", "b"], _case("x")), "Function name cannot be empty")

    def test_argument_count_mismatch(self) -> None:
        result = _assert_error(
            _function("add", ["a", "b"], _case("a")),
            "Number of arguments in case 0 does not match function header",
        )
        assert result.case_index == 0

    def test_too_many_arguments(self) -> None:
        _assert_error(
            _function("f", ["a"], _case("a"), _case("a", "b")),
            "Number of arguments in case 1 does not match function header",
        )

    def test_argument_name_mismatch(self) -> None:
        result = _assert_error(
            _function("add", ["a", "b"], _case("a", "b"), _case("a", "c")),
            "Argument 1 in case 1 does not match function header",
        )
        assert result.case_index == 1

    def test_first_problem_in_case_order_wins(self) -> None:
        # Case 0 has a name mismatch, case 1 has a count mismatch.
        _assert_error(
            _function("f", ["a", "b"], _case("b", "a"), _case("a")),
            "Argument 0 in case 0 does not match function header",
        )

    def test_output_types_are_not_checked(self) -> None:
        function = Function(
            header=FunctionHeader(name="f", inputs=["a"], outputs=["x", "y", "z"]),
            body=FunctionBody(cases=[_case("a")]),
        )
        assert diagnostic(function) is None


# ###############
# Document Checks
# ###############


class TestCheckDocument:
    def test_clean_document(self) -> None:
        document = parse_document("func add a, b -> c\n{\n    add(a, b) = 1;\n}\n")
        assert check_document(document) == []

    def test_case_diagnostic_points_at_case(self) -> None:
        source = """\
func add a, b -> c
{
    add(a, b) = 1;
    add(a) = 2;
}
"""
        diagnostics = check_document(parse_document(source))
        assert len(diagnostics) == 1
        assert diagnostics[0].message == "Number of arguments in case 1 does not match function header"
        assert diagnostics[0].span == Span(4, 5, 16)

    def test_syntax_issue_is_an_error(self) -> None:
        diagnostics = check_document(parse_document("}\n"))
        assert [d.severity for d in diagnostics] == [Severity.ERROR]
        assert diagnostics[0].span == Span(1, 1, 2)

    def test_diagnostics_ordered_by_position(self) -> None:
        source = """\
func f a -> b
{
    f(x) = 1;
}
}
func g a -> b
{
    g() = 1;
}
"""
        diagnostics = check_document(parse_document(source))
        assert [d.span.line for d in diagnostics if d.span is not None] == [3, 5, 8]

    def test_max_number_of_problems(self) -> None:
        source = "}\n}\n}\n"
        diagnostics = check_document(parse_document(source), LilacSettings(max_number_of_problems=2))
        assert len(diagnostics) == 2
        assert check_document(parse_document(source), LilacSettings(max_number_of_problems=0)) == []
