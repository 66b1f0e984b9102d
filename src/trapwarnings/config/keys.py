# topmark:header:start
#
#   project      : TrapWarnings
#   file         : keys.py
#   file_relpath : src/trapwarnings/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for TrapWarnings configuration.

These keys appear in ``trapwarnings.toml`` and in ``[tool.trapwarnings]`` inside
``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by TrapWarnings configuration."""

    KEY_ONE_MESSAGE: Final[str] = "one_message"
    KEY_NONE_MESSAGE: Final[str] = "none_message"
    KEY_POSITION_MESSAGE: Final[str] = "position_message"
    KEY_CAPTURE_ALL: Final[str] = "capture_all"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ONE_MESSAGE,
            KEY_NONE_MESSAGE,
            KEY_POSITION_MESSAGE,
            KEY_CAPTURE_ALL,
        }
    )
