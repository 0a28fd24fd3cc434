# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural checks of Lilac functions against their headers."""

from lilac.validation.checks import Diagnostic, Severity, check_document, diagnostic

__all__ = [
    "Diagnostic",
    "Severity",
    "check_document",
    "diagnostic",
]
