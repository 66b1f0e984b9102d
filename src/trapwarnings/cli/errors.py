# topmark:header:start
#
#   project      : TrapWarnings
#   file         : errors.py
#   file_relpath : src/trapwarnings/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TrapWarnings CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console if one is present on
the Click context and fall back to Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from trapwarnings.cli.exit_codes import ExitCode


class TrapWarningsCliError(click.ClickException):
    """Base class for all TrapWarnings CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TrapUsageError(TrapWarningsCliError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class TargetNotFoundError(TrapWarningsCliError):
    """The ``module:callable`` target cannot be imported or is not callable."""

    exit_code = ExitCode.TARGET_NOT_FOUND


class TargetRaisedError(TrapWarningsCliError):
    """The target raised while being invoked."""

    exit_code = ExitCode.TARGET_RAISED


class TrapConfigError(TrapWarningsCliError):
    """The configuration file holds invalid values."""

    exit_code = ExitCode.CONFIG_ERROR
