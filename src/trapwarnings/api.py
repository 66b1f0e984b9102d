# topmark:header:start
#
#   project      : TrapWarnings
#   file         : api.py
#   file_relpath : src/trapwarnings/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public function API.

These functions report to the *current* reporter
([`current_reporter`][trapwarnings.reporting.reporters.current_reporter]) and use
the process-wide configuration. Under pytest with the TrapWarnings plugin active,
the current reporter is the one of the running test, so failed expectations fail
that test once its body has returned.

Outside pytest, and without a reporter pushed with
[`use_reporter`][trapwarnings.reporting.reporters.use_reporter], assertions go
to the process-wide
[`default_reporter`][trapwarnings.reporting.reporters.default_reporter]. Its
log keeps growing until `clear` is called and nothing inspects it, so its
failures are also logged at WARNING on the ``trapwarnings`` logger. Push a
`RecordingReporter` to collect and check results explicitly.

Examples:
    ```python
    from trapwarnings import no_warnings, trap_one_warning, trap_warnings

    assert trap_one_warning(lambda: parse("x"), r"at\\s+line", "parse warns") == 42
    trap_warnings(lambda: migrate(), [r"renamed", r"removed"])
    assert no_warnings(lambda: load()) == "ok"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trapwarnings.core.invoker import Arity
from trapwarnings.core.trap import WarningTrap

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from trapwarnings.core.patterns import Pattern
    from trapwarnings.core.trap import Messages


def trap_one_warning(
    code: Callable[[], Any],
    pattern: Pattern,
    message: str | None = None,
    *,
    arity: Arity = Arity.SINGLE,
) -> Any:
    """Run ``code`` once and check it emits one warning matching ``pattern``.

    See [`WarningTrap.trap_one_warning`][trapwarnings.core.trap.WarningTrap.trap_one_warning].
    """
    return WarningTrap().trap_one_warning(code, pattern, message, arity=arity)


def trap_warnings(
    code: Callable[[], Any],
    patterns: Sequence[Pattern],
    messages: Messages = None,
    *,
    arity: Arity = Arity.SINGLE,
) -> Any:
    """Run ``code`` once and check its warnings against ``patterns``, in order.

    See [`WarningTrap.trap_warnings`][trapwarnings.core.trap.WarningTrap.trap_warnings].
    """
    return WarningTrap().trap_warnings(code, patterns, messages, arity=arity)


def no_warnings(
    code: Callable[[], Any],
    message: str | None = None,
    *,
    arity: Arity = Arity.SINGLE,
) -> Any:
    """Run ``code`` once and check it emits no warning.

    See [`WarningTrap.no_warnings`][trapwarnings.core.trap.WarningTrap.no_warnings].
    """
    return WarningTrap().no_warnings(code, message, arity=arity)


trap_warning = trap_one_warning
