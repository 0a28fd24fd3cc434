# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for Lilac."""
