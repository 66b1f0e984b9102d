# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/trapwarnings/cli/exit_codes.py
#   project      : TrapWarnings
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the TrapWarnings CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TrapWarnings CLI.

    Attributes:
        SUCCESS (int): Every warning assertion passed.
        FAILURE (int): At least one warning assertion failed.
        USAGE_ERROR (int): Invalid flags or arguments (Click's own usage errors use it too).
        TARGET_NOT_FOUND (int): The ``module:callable`` target could not be imported or resolved.
        TARGET_RAISED (int): The target raised an exception; no assertion was evaluated.
        CONFIG_ERROR (int): The configuration file holds invalid values.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    TARGET_NOT_FOUND = 3
    TARGET_RAISED = 4
    CONFIG_ERROR = 5
