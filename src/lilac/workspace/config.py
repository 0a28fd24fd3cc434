# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings model and YAML loader for Lilac workspaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".lilac.yaml"
SOURCE_SUFFIX = ".lilac"


class SettingsError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


@dataclass
class LilacSettings:
    """Settings passed to the checker.

    Attributes:
        max_number_of_problems: Upper bound on diagnostics reported per document.
        exclude: Directories (relative to the workspace root) skipped when
            searching for sources.
    """

    max_number_of_problems: int = 1000
    exclude: list[str] = field(default_factory=list)


def load_settings(path: Path) -> LilacSettings:
    """Load and parse a Lilac settings file.

    Args:
        path: Path to the `.lilac.yaml` file.

    Returns:
        A LilacSettings instance populated from the file.

    Raises:
        SettingsError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file: {exc}") from exc

    return _parse_settings(text, source_label=str(path))


def find_sources(root: Path, settings: LilacSettings | None = None) -> list[Path]:
    """Return the .lilac files under *root*, sorted, skipping excluded directories.

    A *root* that is itself a file is returned as the only source.
    """
    if root.is_file():
        return [root]
    excluded = [(root / name).resolve() for name in (settings.exclude if settings else [])]
    return sorted(
        path
        for path in root.rglob(f"*{SOURCE_SUFFIX}")
        if not any(directory in path.resolve().parents for directory in excluded)
    )


# ################
# Implementation
# ################


def _parse_settings(text: str, source_label: str = "<string>") -> LilacSettings:
    """Parse settings YAML text into LilacSettings.

    An empty document yields the defaults.

    Raises:
        SettingsError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return LilacSettings()
    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    settings = LilacSettings()
    if "max-number-of-problems" in data:
        value = data["max-number-of-problems"]
        # bool is an int subclass; reject it explicitly.
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise SettingsError(f"{source_label}: 'max-number-of-problems' must be a non-negative integer")
        settings.max_number_of_problems = value

    if "exclude" in data:
        raw_exclude = data["exclude"]
        if not isinstance(raw_exclude, list) or not all(isinstance(item, str) for item in raw_exclude):
            raise SettingsError(f"{source_label}: 'exclude' must be a list of strings")
        settings.exclude = list(raw_exclude)

    return settings
