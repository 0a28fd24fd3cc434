# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""AST node types for Lilac headers, cases, calls, and literal expressions."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class LiteralType(Enum):
    """Kinds of literal values an expression can hold."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


class Expression(BaseModel):
    """A leaf literal value (string, number, or boolean)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["expression"] = "expression"
    literal_type: LiteralType
    value: bool | int | float | str


class FunctionCall(BaseModel):
    """A named call with ordered argument terms.

    An argument is ``None`` where its text could not be parsed.
    """

    kind: Literal["call"] = "call"
    name: str
    arguments: list[Term | None] = _Field(default_factory=list)


# A call or a literal; the `kind` field discriminates between the two.
Term = Annotated[FunctionCall | Expression, _Field(discriminator="kind")]


class FunctionCase(BaseModel):
    """One pattern-matching clause: formal argument names bound to a body term."""

    arguments: list[str] = _Field(default_factory=list)
    body: Term


class FunctionBody(BaseModel):
    """The ordered cases of a function."""

    cases: list[FunctionCase] = _Field(default_factory=list)


class FunctionHeader(BaseModel):
    """A ``func name inputs -> outputs`` declaration.

    Attributes:
        name: The function name. May be empty when built programmatically.
        inputs: Ordered input type names.
        outputs: Ordered output type names.
    """

    name: str
    inputs: list[str] = _Field(default_factory=list)
    outputs: list[str] = _Field(default_factory=list)


class Function(BaseModel):
    """A header together with the body of cases it governs."""

    header: FunctionHeader
    body: FunctionBody = _Field(default_factory=FunctionBody)


# Resolve forward references in self-referential models.
FunctionCall.model_rebuild()
FunctionCase.model_rebuild()
FunctionBody.model_rebuild()
Function.model_rebuild()
