# topmark:header:start
#
#   project      : TrapWarnings
#   file         : reporters.py
#   file_relpath : src/trapwarnings/reporting/reporters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assertion reporters.

TrapWarnings does not decide how a test run is reported. It only calls the five
primitives of the [`Reporter`][trapwarnings.reporting.reporters.Reporter]
protocol (``assert_pass``, ``assert_fail``, ``assert_match``, ``assert_true``
and ``note``) and leaves counting, formatting and exit codes to the framework
behind it.

Reporters are *soft*: the primitives must record outcomes and return, never raise.
A failed assertion is not an exception; the code under test has already returned
(or is still running, for assertions made as warnings arrive) when it is reported.

The active reporter is resolved per thread: [`use_reporter`][trapwarnings.reporting.reporters.use_reporter]
pushes a reporter for the duration of a ``with`` block and
[`current_reporter`][trapwarnings.reporting.reporters.current_reporter] returns the
innermost one, falling back to a process-wide `RecordingReporter`.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from trapwarnings.config.logging import get_logger
from trapwarnings.core.patterns import describe_pattern, matches
from trapwarnings.reporting.model import AssertionLog, AssertionOutcome, AssertionRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

    from trapwarnings.config.logging import TrapLogger
    from trapwarnings.core.patterns import Pattern
    from trapwarnings.reporting.model import AssertionStats

logger: TrapLogger = get_logger(__name__)


@runtime_checkable
class Reporter(Protocol):
    """Structural interface of the assertion framework used by TrapWarnings."""

    def assert_pass(self, message: str) -> None:
        """Record a passing assertion."""
        ...

    def assert_fail(self, message: str) -> None:
        """Record a failing assertion."""
        ...

    def assert_match(self, value: str, pattern: Pattern, message: str) -> bool:
        """Record whether ``value`` matches ``pattern`` and return the result."""
        ...

    def assert_true(self, condition: bool, message: str) -> bool:
        """Record whether ``condition`` holds and return it."""
        ...

    def note(self, message: str) -> None:
        """Record a non-assertive diagnostic line."""
        ...


class RecordingReporter:
    """Reporter that keeps every assertion in an [`AssertionLog`][trapwarnings.reporting.model.AssertionLog].

    This is the default reporter and the one used by the pytest plugin, which
    inspects the log once the test body has returned.

    Args:
        log_failures (bool): Also log every failure at WARNING level. Used by the
            process-wide fallback reporter, whose records nobody inspects.
    """

    def __init__(self, *, log_failures: bool = False) -> None:
        self.log: AssertionLog = AssertionLog()
        self.log_failures: bool = log_failures

    def _log_failure(self, message: str, detail: str | None = None) -> None:
        level: int = logging.WARNING if self.log_failures else logging.DEBUG
        if detail:
            logger.log(level, "Assertion failed: %s\n%s", message, detail)
        else:
            logger.log(level, "Assertion failed: %s", message)

    def _record(self, outcome: AssertionOutcome, message: str, detail: str | None = None) -> None:
        self.log.add(AssertionRecord(outcome=outcome, message=message, detail=detail))

    def assert_pass(self, message: str) -> None:
        """Record a passing assertion.

        Args:
            message (str): The assertion message.
        """
        self._record(AssertionOutcome.PASS, message)

    def assert_fail(self, message: str) -> None:
        """Record a failing assertion.

        Args:
            message (str): The assertion message.
        """
        self._log_failure(message)
        self._record(AssertionOutcome.FAIL, message)

    def assert_match(self, value: str, pattern: Pattern, message: str) -> bool:
        """Record whether ``value`` matches ``pattern``.

        Args:
            value (str): The captured warning message.
            pattern (Pattern): The expected pattern.
            message (str): The assertion message.

        Returns:
            bool: True if the value matched.
        """
        ok: bool = matches(value, pattern)
        if ok:
            self._record(AssertionOutcome.PASS, message)
        else:
            detail: str = f"{value!r}\n    doesn't match {describe_pattern(pattern)}"
            self._log_failure(message, detail)
            self._record(AssertionOutcome.FAIL, message, detail=detail)
        return ok

    def assert_true(self, condition: bool, message: str) -> bool:
        """Record whether ``condition`` holds.

        Args:
            condition (bool): The condition to check.
            message (str): The assertion message.

        Returns:
            bool: ``condition`` itself.
        """
        if condition:
            self._record(AssertionOutcome.PASS, message)
        else:
            self.assert_fail(message)
        return bool(condition)

    def note(self, message: str) -> None:
        """Record an informational line.

        Args:
            message (str): The note text.
        """
        self._record(AssertionOutcome.NOTE, message)

    @property
    def passed(self) -> int:
        """Number of passing assertions recorded so far."""
        return self.log.stats().n_pass

    @property
    def failed(self) -> int:
        """Number of failing assertions recorded so far."""
        return self.log.stats().n_fail

    def records(self) -> list[AssertionRecord]:
        """Return all records (notes included) in insertion order."""
        return list(self.log)

    def failures(self) -> list[AssertionRecord]:
        """Return the failing records in insertion order."""
        return self.log.failures()

    def stats(self) -> AssertionStats:
        """Return per-outcome counts."""
        return self.log.stats()

    def clear(self) -> None:
        """Forget all recorded assertions."""
        self.log.clear()


# --- Current reporter (per thread) ---

# Used when no reporter was pushed; its failures are also logged at WARNING.
_DEFAULT_REPORTER: RecordingReporter = RecordingReporter(log_failures=True)


class _ReporterStack(threading.local):
    def __init__(self) -> None:
        self.items: list[Reporter] = []


_stack: _ReporterStack = _ReporterStack()


def default_reporter() -> RecordingReporter:
    """Return the process-wide fallback reporter."""
    return _DEFAULT_REPORTER


def current_reporter() -> Reporter:
    """Return the innermost reporter pushed on this thread, or the default one."""
    if _stack.items:
        return _stack.items[-1]
    return _DEFAULT_REPORTER


@contextmanager
def use_reporter(reporter: Reporter) -> Iterator[Reporter]:
    """Make ``reporter`` the current reporter for the duration of a ``with`` block.

    Args:
        reporter (Reporter): The reporter to activate.

    Yields:
        Reporter: The activated reporter.
    """
    _stack.items.append(reporter)
    logger.trace("Pushed reporter %r (depth %d)", reporter, len(_stack.items))
    try:
        yield reporter
    finally:
        _stack.items.pop()
        logger.trace("Popped reporter %r (depth %d)", reporter, len(_stack.items))
