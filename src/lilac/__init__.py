# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lilac: parser and structural validator for pattern-matching function definitions."""
