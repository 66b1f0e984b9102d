# topmark:header:start
#
#   project      : TrapWarnings
#   file         : logging.py
#   file_relpath : src/trapwarnings/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for TrapWarnings, with an extra TRACE level.

Notes:
    Logging is for *internal* diagnostics of TrapWarnings (scope open/close,
    captured warnings, recorded assertions). It is separate from the `warnings`
    channel that TrapWarnings intercepts: nothing logged here is ever captured by
    an interception scope.

    Only the ``trapwarnings`` logger is configured. Test runners and host
    applications keep ownership of the root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from trapwarnings.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

PACKAGE_LOGGER: Final[str] = "trapwarnings"

# One step below DEBUG: per-record and per-scope chatter.
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

SHORT_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
LONG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(funcName)s(): %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class TrapLogger(logging.Logger):
    """`logging.Logger` with a `trace` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Format string or object to log.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


class ChalkFormatter(logging.Formatter):
    """Colors each formatted record by severity with `yachalk`."""

    # Highest threshold first; the first one the record reaches wins.
    _PALETTE: tuple[tuple[int, Callable[[str], str]], ...] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored line.
        """
        text: str = super().format(record)
        for threshold, paint in self._PALETTE:
            if record.levelno >= threshold:
                return paint(text)
        return chalk.dim(text)


def parse_log_level(value: str) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or a numeric string.

    Args:
        value (str): Raw level text.

    Returns:
        int | None: The numeric logging level, or None if ``value`` is not recognized.
    """
    text: str = value.strip().upper()
    if text.isdigit():
        return int(text)
    return _LEVEL_NAMES.get(text)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TRAPWARNINGS_LOG_LEVEL``, or None when unset."""
    raw: str | None = os.environ.get(ENV_LOG_LEVEL)
    return parse_log_level(raw) if raw else None


def setup_logging(level: int | None = None) -> None:
    """Attach a colored stderr handler to the ``trapwarnings`` logger.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level (int | None): Logging level. When None, ``TRAPWARNINGS_LOG_LEVEL``
            decides, and CRITICAL applies when that is unset too.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    pkg_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(SHORT_FORMAT if level >= logging.INFO else LONG_FORMAT))
    pkg_logger.addHandler(handler)


def get_logger(name: str) -> TrapLogger:
    """Return the `TrapLogger` called ``name``.

    `TrapLogger` is installed as logger class only while the logger is created,
    so the host application's `logging.setLoggerClass` choice is left alone.

    Args:
        name (str): Dotted logger name, usually ``__name__``.

    Returns:
        TrapLogger: The logger.
    """
    manager = logging.Logger.manager
    existing = manager.loggerDict.get(name)
    if isinstance(existing, TrapLogger):
        return existing

    previous = manager.loggerClass
    manager.setLoggerClass(TrapLogger)
    try:
        created = logging.getLogger(name)
    finally:
        manager.loggerClass = previous
    return cast("TrapLogger", created)
