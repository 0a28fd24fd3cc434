# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace settings and source discovery for Lilac."""

from lilac.workspace.config import (
    SETTINGS_FILE_NAME,
    LilacSettings,
    SettingsError,
    find_sources,
    load_settings,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "LilacSettings",
    "SettingsError",
    "find_sources",
    "load_settings",
]
