# topmark:header:start
#
#   project      : TrapWarnings
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Config` / `MutableConfig` and configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from tests.conftest import parametrize
from trapwarnings.config import Config, MutableConfig, get_config, load_config, reset_config
from trapwarnings.config.keys import Toml
from trapwarnings.errors import ConfigError


def test_defaults() -> None:
    """Built-in defaults match the documented messages."""
    config: Config = MutableConfig.from_defaults().freeze()
    assert config == Config()
    assert config.one_message == "Diagnostic matched"
    assert config.none_message == "Code does not emit diagnostics"
    assert config.format_position_message(3) == "Diagnostic 3 matched"
    assert config.capture_all is True
    assert config.config_file is None


def test_freeze_thaw_roundtrip() -> None:
    """Thawing and freezing again yields an equal snapshot."""
    config = Config(one_message="one", capture_all=False)
    assert config.thaw().freeze() == config


def test_apply_table_overrides_and_records_source(tmp_path: Path) -> None:
    """Known keys override defaults; the source file is kept."""
    source: Path = tmp_path / "trapwarnings.toml"
    config: Config = (
        MutableConfig.from_defaults()
        .apply_table({"one_message": "custom", "capture_all": False}, source=source)
        .freeze()
    )
    assert config.one_message == "custom"
    assert config.none_message == "Code does not emit diagnostics"
    assert config.capture_all is False
    assert config.config_file == source


def test_unknown_keys_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys do not fail loading but are reported."""
    caplog.set_level(logging.WARNING, logger="trapwarnings")
    MutableConfig().apply_table({"one_mesage": "typo"})
    assert "Ignoring unknown config key 'one_mesage'" in caplog.text


@parametrize(
    "table",
    [
        {"one_message": 3},
        {"none_message": ""},
        {"capture_all": "yes"},
        {"position_message": "Diagnostic {position}"},
        {"position_message": "Diagnostic {0}"},
    ],
)
def test_invalid_values_raise(table: dict[str, Any]) -> None:
    """Values of the wrong type or broken templates raise `ConfigError`."""
    with pytest.raises(ConfigError):
        MutableConfig().apply_table(table)


def test_to_toml_dict_uses_canonical_keys() -> None:
    """The TOML view exposes every known key and nothing else."""
    assert set(Config().to_toml_dict()) == Toml.ALL_KEYS


def test_load_config_from_pyproject(tmp_path: Path) -> None:
    """``[tool.trapwarnings]`` in a parent directory's pyproject is found."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.trapwarnings]\nnone_message = "quiet please"\n',
        encoding="utf-8",
    )
    nested: Path = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    config: Config = load_config(nested)
    assert config.none_message == "quiet please"
    assert config.config_file == (tmp_path / "pyproject.toml").resolve()


def test_load_config_defaults_without_file(tmp_path: Path) -> None:
    """An empty tree resolves to the defaults."""
    assert load_config(tmp_path).one_message == Config().one_message


def test_get_config_is_cached_until_reset(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The process-wide config is loaded once and reloaded after `reset_config`."""
    monkeypatch.chdir(tmp_path)
    config_file: Path = tmp_path / "trapwarnings.toml"
    config_file.write_text('one_message = "first"\n', encoding="utf-8")

    assert get_config().one_message == "first"
    config_file.write_text('one_message = "second"\n', encoding="utf-8")
    assert get_config().one_message == "first"

    reset_config()
    assert get_config().one_message == "second"
