# topmark:header:start
#
#   project      : TrapWarnings
#   file         : constants.py
#   file_relpath : src/trapwarnings/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TRAPWARNINGS_VERSION: str = get_version("trapwarnings")

# Config discovery: standalone file name and the pyproject table.
CONFIG_FILE_NAME: Final[str] = "trapwarnings.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "tool.trapwarnings"

ENV_LOG_LEVEL: Final[str] = "TRAPWARNINGS_LOG_LEVEL"

DEFAULT_ONE_MESSAGE: Final[str] = "Diagnostic matched"
DEFAULT_NONE_MESSAGE: Final[str] = "Code does not emit diagnostics"
DEFAULT_POSITION_MESSAGE: Final[str] = "Diagnostic {index} matched"
