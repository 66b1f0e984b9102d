# topmark:header:start
#
#   project      : TrapWarnings
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading, discovery and rendering."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import tomlkit

from trapwarnings.config.io import discover_config, extract_tool_table, load_toml_dict, to_toml


def test_load_toml_dict_errors_return_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Unreadable or malformed files are logged and yield an empty table."""
    caplog.set_level(logging.ERROR, logger="trapwarnings")
    broken: Path = tmp_path / "broken.toml"
    broken.write_text("this is = = not toml", encoding="utf-8")

    assert load_toml_dict(broken) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}
    assert "Error decoding TOML" in caplog.text
    assert "Error loading TOML" in caplog.text


def test_extract_tool_table() -> None:
    """Only a ``[tool.trapwarnings]`` table is returned."""
    assert extract_tool_table({"tool": {"trapwarnings": {"capture_all": False}}}) == {
        "capture_all": False
    }
    assert extract_tool_table({"tool": {"ruff": {}}}) is None
    assert extract_tool_table({}) is None


def test_standalone_file_wins_in_same_directory(tmp_path: Path) -> None:
    """``trapwarnings.toml`` takes precedence over pyproject in one directory."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.trapwarnings]\none_message = "from pyproject"\n', encoding="utf-8"
    )
    (tmp_path / "trapwarnings.toml").write_text('one_message = "standalone"\n', encoding="utf-8")

    found = discover_config(tmp_path)
    assert found is not None
    path, table = found
    assert path.name == "trapwarnings.toml"
    assert table == {"one_message": "standalone"}


def test_pyproject_without_table_is_skipped(tmp_path: Path) -> None:
    """The search continues upward past a pyproject that does not configure us."""
    (tmp_path / "trapwarnings.toml").write_text('capture_all = false\n', encoding="utf-8")
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text('[project]\nname = "child"\n', encoding="utf-8")

    found = discover_config(child)
    assert found is not None
    assert found[0] == (tmp_path / "trapwarnings.toml").resolve()


def test_nearest_source_wins(tmp_path: Path) -> None:
    """A closer configuration shadows one further up."""
    (tmp_path / "trapwarnings.toml").write_text('one_message = "outer"\n', encoding="utf-8")
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text(
        '[tool.trapwarnings]\none_message = "inner"\n', encoding="utf-8"
    )

    found = discover_config(child)
    assert found is not None
    assert found[1] == {"one_message": "inner"}


def test_to_toml_standalone_and_pyproject() -> None:
    """Rendered TOML parses back to the same values."""
    table = {"one_message": "m", "capture_all": True, "unset": None}

    flat = tomlkit.parse(to_toml(table)).unwrap()
    assert flat == {"one_message": "m", "capture_all": True}

    text: str = to_toml(table, for_pyproject=True)
    assert "[tool.trapwarnings]" in text
    nested = tomlkit.parse(text).unwrap()
    assert nested == {"tool": {"trapwarnings": {"one_message": "m", "capture_all": True}}}


def test_pyproject_source_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Discovery names the pyproject table it settled on."""
    caplog.set_level(logging.DEBUG, logger="trapwarnings")
    (tmp_path / "pyproject.toml").write_text(
        "[tool.trapwarnings]\ncapture_all = true\n", encoding="utf-8"
    )

    assert discover_config(tmp_path) is not None
    assert "Using [tool.trapwarnings] from" in caplog.text
