# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Web UI for browsing Lilac functions."""
