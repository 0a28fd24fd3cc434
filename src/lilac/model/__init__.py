# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Abstract syntax tree for Lilac function definitions."""

from lilac.model.nodes import (
    Expression,
    Function,
    FunctionBody,
    FunctionCall,
    FunctionCase,
    FunctionHeader,
    LiteralType,
    Term,
)

__all__ = [
    "LiteralType",
    "Expression",
    "FunctionCall",
    "Term",
    "FunctionCase",
    "FunctionBody",
    "FunctionHeader",
    "Function",
]
