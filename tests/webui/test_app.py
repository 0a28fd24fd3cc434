# Copyright 2026 Lilac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Lilac web UI application."""

from pathlib import Path

import dash

from lilac.webui.app import create_app

# ###############
# Helpers
# ###############


def _texts(component: object) -> list[str]:
    """Collect every string in a Dash component tree."""
    if component is None:
        return []
    if isinstance(component, str):
        return [component]
    if isinstance(component, list):
        return [text for child in component for text in _texts(child)]
    return _texts(getattr(component, "children", None))


# ###############
# Public Interface
# ###############


def test_create_app_returns_dash_instance(tmp_path: Path) -> None:
    """create_app returns a Dash application instance."""
    app = create_app(directory=tmp_path)
    assert isinstance(app, dash.Dash)


def test_create_app_title(tmp_path: Path) -> None:
    """create_app sets the application title."""
    app = create_app(directory=tmp_path)
    assert app.title == "Lilac Function Viewer"


def test_layout_without_sources(tmp_path: Path) -> None:
    app = create_app(directory=tmp_path)
    assert "No .lilac files found." in _texts(app.layout)


def test_layout_lists_functions_and_diagnostics(tmp_path: Path) -> None:
    (tmp_path / "add.lilac").write_text("func add a, b -> c\n{\n    add(a) = 1;\n}\n", encoding="utf-8")
    texts = _texts(create_app(directory=tmp_path).layout)
    assert "add.lilac" in texts
    assert "func add a, b -> c\n{\n    add(a) = 1;\n}\n" in texts
    assert "line 3: Number of arguments in case 0 does not match function header" in texts


def test_layout_reports_unreadable_file(tmp_path: Path) -> None:
    (tmp_path / "binary.lilac").write_bytes(b"\xff\xfe")
    texts = _texts(create_app(directory=tmp_path).layout)
    assert "binary.lilac" in texts
    assert any(text.startswith("Cannot read file:") for text in texts)
