# topmark:header:start
#
#   project      : TrapWarnings
#   file         : trap.py
#   file_relpath : src/trapwarnings/core/trap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run code once, check the warnings it emitted, and return what it returned.

[`WarningTrap`][trapwarnings.core.trap.WarningTrap] binds the three operations to
a reporter and a configuration snapshot:

- ``trap_one_warning``: exactly one warning, matching a pattern.
- ``trap_warnings``: an exact, ordered list of warnings.
- ``no_warnings``: no warning at all; warnings are still passed on to the
  surrounding handler.

Every operation opens one [`InterceptionScope`][trapwarnings.core.scope.InterceptionScope],
invokes the code once inside it, closes it, reports through the reporter and
returns the code's result in the requested [`Arity`][trapwarnings.core.invoker.Arity].

Expectation mismatches are reported, never raised. Exceptions from the code under
test propagate after the scope has been closed; in that case no assertion is
reported for the invocation (except those ``trap_one_warning`` already made as
warnings arrived).

Examples:
    ```python
    trap = WarningTrap(reporter=RecordingReporter())
    value = trap.trap_one_warning(lambda: legacy_api(5), r"deprecated", "legacy_api warns")
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Union

from trapwarnings.config.logging import get_logger
from trapwarnings.config.model import get_config
from trapwarnings.core.invoker import Arity, invoke_in_scope
from trapwarnings.core.patterns import validate_pattern, validate_patterns
from trapwarnings.core.scope import InterceptionScope
from trapwarnings.reporting.reporters import current_reporter
from trapwarnings.utils.introspection import format_callable_pretty

if TYPE_CHECKING:
    from trapwarnings.config.logging import TrapLogger
    from trapwarnings.config.model import Config
    from trapwarnings.core.invoker import Invocation
    from trapwarnings.core.patterns import Pattern
    from trapwarnings.core.scope import CapturedWarning, CaptureCallback
    from trapwarnings.reporting.reporters import Reporter

logger: TrapLogger = get_logger(__name__)

# A shared message, or one message per position (empty entries fall back to the default).
Messages = Union[str, Sequence[Union[str, None]], None]


def _check_callable(code: object) -> None:
    if not callable(code):
        raise TypeError(f"Expected a zero-argument callable, got {type(code).__name__}")


class WarningTrap:
    """Warning assertions bound to a reporter and a configuration.

    Args:
        reporter (Reporter | None): Where assertions go. Defaults to the current
            reporter at construction time.
        config (Config | None): Default messages and capture behavior. Defaults to
            the process-wide configuration.
    """

    def __init__(self, reporter: Reporter | None = None, config: Config | None = None) -> None:
        self.reporter: Reporter = reporter if reporter is not None else current_reporter()
        self.config: Config = config if config is not None else get_config()

    def _scope(
        self,
        on_capture: CaptureCallback | None = None,
        *,
        forward: bool = False,
    ) -> InterceptionScope:
        return InterceptionScope(
            on_capture,
            forward=forward,
            capture_all=self.config.capture_all,
        )

    def trap_one_warning(
        self,
        code: Callable[[], Any],
        pattern: Pattern,
        message: str | None = None,
        *,
        arity: Arity = Arity.SINGLE,
    ) -> Any:
        """Check that ``code`` emits one warning matching ``pattern``.

        Each warning is matched against ``pattern`` as it arrives, so extra warnings
        each get their own assertion. After the invocation a note with the number of
        captured warnings is recorded, and a failure is reported if there were none.

        Args:
            code (Callable[[], Any]): Zero-argument callable, invoked exactly once.
            pattern (Pattern): Regex string, compiled regex or predicate.
            message (str | None): Assertion message (default from config,
                ``"Diagnostic matched"``).
            arity (Arity): Calling convention for the return value.

        Returns:
            Any: What ``code`` returned, in the requested arity.
        """
        _check_callable(code)
        validate_pattern(pattern)
        msg: str = message or self.config.one_message
        reporter: Reporter = self.reporter

        def on_capture(text: str, record: CapturedWarning) -> None:
            reporter.assert_match(text, pattern, msg)

        scope: InterceptionScope = self._scope(on_capture)
        invocation: Invocation = invoke_in_scope(code, arity, scope)

        count: int = len(scope.buffer)
        logger.debug("trap_one_warning%s: %d warning(s)", format_callable_pretty(code), count)
        reporter.note(f"caught {count} diagnostic(s)")
        if count == 0:
            reporter.assert_fail(f"{msg} (no diagnostics captured)")
        return invocation.unwrap()

    def trap_warnings(
        self,
        code: Callable[[], Any],
        patterns: Sequence[Pattern],
        messages: Messages = None,
        *,
        arity: Arity = Arity.SINGLE,
    ) -> Any:
        """Check that ``code`` emits exactly ``len(patterns)`` warnings, in order.

        On a count mismatch a single failure naming both counts is reported and no
        warning is matched. Otherwise warning ``i`` is matched against ``patterns[i]``.

        Args:
            code (Callable[[], Any]): Zero-argument callable, invoked exactly once.
            patterns (Sequence[Pattern]): Expected patterns, one per warning.
            messages (Messages): One message per position, or one shared message.
                Missing or empty entries default to ``"Diagnostic <i> matched"``.
            arity (Arity): Calling convention for the return value.

        Returns:
            Any: What ``code`` returned, in the requested arity.
        """
        _check_callable(code)
        validate_patterns(patterns)
        expected: tuple[Pattern, ...] = tuple(patterns)
        reporter: Reporter = self.reporter

        scope: InterceptionScope = self._scope()
        invocation: Invocation = invoke_in_scope(code, arity, scope)

        captured: tuple[str, ...] = scope.buffer.snapshot()
        logger.debug(
            "trap_warnings%s: %d warning(s), %d pattern(s)",
            format_callable_pretty(code),
            len(captured),
            len(expected),
        )
        if len(captured) != len(expected):
            reporter.assert_fail(
                f"Caught {len(captured)} diagnostics, but got {len(expected)} patterns to check"
            )
        else:
            for i, (text, pattern) in enumerate(zip(captured, expected)):
                reporter.assert_match(text, pattern, self._position_message(messages, i))
        return invocation.unwrap()

    def no_warnings(
        self,
        code: Callable[[], Any],
        message: str | None = None,
        *,
        arity: Arity = Arity.SINGLE,
    ) -> Any:
        """Check that ``code`` emits no warning.

        Captured warnings are re-emitted to the handler that was active before the
        call, so they are observed rather than swallowed. A violation produces two
        failures: one with the warning count and one boolean assertion.

        Args:
            code (Callable[[], Any]): Zero-argument callable, invoked exactly once.
            message (str | None): Assertion message (default from config,
                ``"Code does not emit diagnostics"``).
            arity (Arity): Calling convention for the return value.

        Returns:
            Any: What ``code`` returned, in the requested arity.
        """
        _check_callable(code)
        msg: str = message or self.config.none_message
        reporter: Reporter = self.reporter

        scope: InterceptionScope = self._scope(forward=True)
        invocation: Invocation = invoke_in_scope(code, arity, scope)

        count: int = len(scope.buffer)
        logger.debug("no_warnings%s: %d warning(s)", format_callable_pretty(code), count)
        if count:
            reporter.assert_fail(f"{msg}: captured {count} diagnostics")
        reporter.assert_true(count == 0, msg)
        return invocation.unwrap()

    # Alias.
    trap_warning = trap_one_warning

    def _position_message(self, messages: Messages, index: int) -> str:
        if isinstance(messages, str):
            return messages or self.config.format_position_message(index)
        if messages is not None and index < len(messages):
            entry: str | None = messages[index]
            if entry:
                return entry
        return self.config.format_position_message(index)
