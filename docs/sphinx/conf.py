# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Lilac documentation."""

project = "Lilac"
author = "Lilac Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
