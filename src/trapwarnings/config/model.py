# topmark:header:start
#
#   project      : TrapWarnings
#   file         : model.py
#   file_relpath : src/trapwarnings/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by
      [`WarningTrap`][trapwarnings.core.trap.WarningTrap].
    - `MutableConfig`: a mutable builder populated from defaults and TOML
      tables; it can be frozen into `Config` and thawed back for edits.

Scope:
    - *In scope*: data shapes, defaults, validation of TOML values and
      freeze/thaw mechanics.
    - *Out of scope*: filesystem discovery and TOML parsing, which live in
      [`trapwarnings.config.io`][trapwarnings.config.io].
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from trapwarnings.config.io import discover_config
from trapwarnings.config.keys import Toml
from trapwarnings.config.logging import get_logger
from trapwarnings.constants import (
    DEFAULT_NONE_MESSAGE,
    DEFAULT_ONE_MESSAGE,
    DEFAULT_POSITION_MESSAGE,
)
from trapwarnings.errors import ConfigError

if TYPE_CHECKING:
    from trapwarnings.config.io import TomlTable
    from trapwarnings.config.logging import TrapLogger

logger: TrapLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for TrapWarnings.

    Attributes:
        one_message (str): Default assertion message of ``trap_one_warning``.
        none_message (str): Default assertion message of ``no_warnings``.
        position_message (str): Template for per-position messages of
            ``trap_warnings``; ``{index}`` is replaced by the zero-based position.
        capture_all (bool): Force an ``"always"`` warning filter inside interception
            scopes so repeated warnings from one code location are all captured.
        config_file (Path | None): The file the values were read from, if any.
    """

    one_message: str = DEFAULT_ONE_MESSAGE
    none_message: str = DEFAULT_NONE_MESSAGE
    position_message: str = DEFAULT_POSITION_MESSAGE
    capture_all: bool = True
    config_file: Path | None = None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            one_message=self.one_message,
            none_message=self.none_message,
            position_message=self.position_message,
            capture_all=self.capture_all,
            config_file=self.config_file,
        )

    def format_position_message(self, index: int) -> str:
        """Render the per-position default message for ``index``."""
        return self.position_message.format(index=index)

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration values as a TOML-compatible table."""
        return {
            Toml.KEY_ONE_MESSAGE: self.one_message,
            Toml.KEY_NONE_MESSAGE: self.none_message,
            Toml.KEY_POSITION_MESSAGE: self.position_message,
            Toml.KEY_CAPTURE_ALL: self.capture_all,
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Values start from the defaults (`from_defaults`), are overridden by TOML
    tables (`apply_table`) and are finally frozen into a `Config`.
    """

    one_message: str = DEFAULT_ONE_MESSAGE
    none_message: str = DEFAULT_NONE_MESSAGE
    position_message: str = DEFAULT_POSITION_MESSAGE
    capture_all: bool = True
    config_file: Path | None = field(default=None)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def apply_table(self, table: TomlTable, source: Path | None = None) -> MutableConfig:
        """Override values from a ``[tool.trapwarnings]``-shaped table.

        Unknown keys are logged and ignored.

        Args:
            table (TomlTable): Parsed TOML table.
            source (Path | None): File the table was read from (kept for reporting).

        Returns:
            MutableConfig: ``self``, to allow chaining.

        Raises:
            ConfigError: If a known key holds a value of the wrong type, or if
                ``position_message`` is not a valid template.
        """
        for key in table:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", key, source or "<table>")

        self.one_message = _get_str(table, Toml.KEY_ONE_MESSAGE, self.one_message)
        self.none_message = _get_str(table, Toml.KEY_NONE_MESSAGE, self.none_message)
        self.position_message = _get_str(table, Toml.KEY_POSITION_MESSAGE, self.position_message)
        self.capture_all = _get_bool(table, Toml.KEY_CAPTURE_ALL, self.capture_all)
        _check_position_template(self.position_message)

        if source is not None:
            self.config_file = source
        return self

    def freeze(self) -> Config:
        """Return an immutable snapshot of this builder."""
        return Config(
            one_message=self.one_message,
            none_message=self.none_message,
            position_message=self.position_message,
            capture_all=self.capture_all,
            config_file=self.config_file,
        )


def _get_str(table: TomlTable, key: str, default: str) -> str:
    value: Any = table.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{key} must be a non-empty string (got {value!r})")
    return value


def _get_bool(table: TomlTable, key: str, default: bool) -> bool:
    value: Any = table.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be a boolean (got {value!r})")
    return value


def _check_position_template(template: str) -> None:
    try:
        template.format(index=0)
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigError(
            f"{Toml.KEY_POSITION_MESSAGE} must be a template using only {{index}} "
            f"(got {template!r}: {exc})"
        ) from exc


# ------------------ Loading ------------------


def load_config(start: Path | None = None) -> Config:
    """Build a `Config` from the defaults and the nearest configuration file.

    Args:
        start (Path | None): Directory where discovery starts (defaults to the CWD).

    Returns:
        Config: The resolved, immutable configuration.
    """
    builder: MutableConfig = MutableConfig.from_defaults()
    found = discover_config(start)
    if found is not None:
        path, table = found
        builder.apply_table(table, source=path)
    return builder.freeze()


@functools.lru_cache(maxsize=1)
def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    config: Config = load_config()
    logger.debug("Loaded configuration (source: %s)", config.config_file or "<defaults>")
    return config


def reset_config() -> None:
    """Forget the cached process-wide configuration."""
    get_config.cache_clear()
