# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __init__.py
#   file_relpath : src/trapwarnings/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for TrapWarnings.

Configuration is read from ``trapwarnings.toml`` or ``[tool.trapwarnings]`` in
``pyproject.toml`` (nearest file above the working directory wins) and frozen into
an immutable [`Config`][trapwarnings.config.model.Config].
"""

from __future__ import annotations

from trapwarnings.config.model import (
    Config,
    MutableConfig,
    get_config,
    load_config,
    reset_config,
)

__all__ = [
    "Config",
    "MutableConfig",
    "get_config",
    "load_config",
    "reset_config",
]
