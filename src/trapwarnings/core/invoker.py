# topmark:header:start
#
#   project      : TrapWarnings
#   file         : invoker.py
#   file_relpath : src/trapwarnings/core/invoker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run code exactly once and keep its result in the caller's arity.

Python functions have a single return value, so the calling convention is chosen
explicitly with [`Arity`][trapwarnings.core.invoker.Arity]:

- ``Arity.SINGLE``: the callable's return value is handed back as is.
- ``Arity.MULTI``: the return value is materialized into a tuple. Lists, tuples
  and other iterables (generators included) are drained *while the interception
  scope is still open*, so warnings raised lazily during iteration are captured
  by the same single invocation. ``None`` becomes ``()``; any other value
  (strings, bytes and mappings included) becomes a one-element tuple.

Internally the result is always held as a tuple
([`Invocation.values`][trapwarnings.core.invoker.Invocation]) and unwrapped only
when ``SINGLE`` was requested.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from trapwarnings.config.logging import get_logger

if TYPE_CHECKING:
    from trapwarnings.config.logging import TrapLogger
    from trapwarnings.core.scope import InterceptionScope

logger: TrapLogger = get_logger(__name__)


class Arity(Enum):
    """Calling convention requested by the caller."""

    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class Invocation:
    """Result of one invocation, held until the assertions have run.

    Attributes:
        values (tuple[Any, ...]): The captured value(s); a one-element tuple for
            ``Arity.SINGLE``.
        arity (Arity): The calling convention used for the invocation.
    """

    values: tuple[Any, ...]
    arity: Arity

    def unwrap(self) -> Any:
        """Return the result in the arity the caller asked for."""
        if self.arity is Arity.SINGLE:
            return self.values[0]
        return self.values


def _as_values(result: Any, arity: Arity) -> tuple[Any, ...]:
    if arity is Arity.SINGLE:
        return (result,)
    if result is None:
        return ()
    if isinstance(result, (str, bytes, bytearray, Mapping)):
        return (result,)
    if isinstance(result, Iterable):
        return tuple(result)
    return (result,)


def invoke(code: Callable[[], Any], arity: Arity = Arity.SINGLE) -> Invocation:
    """Call ``code`` once and capture its result.

    Exceptions raised by ``code`` propagate unchanged.

    Args:
        code (Callable[[], Any]): Zero-argument callable to run.
        arity (Arity): Calling convention of the caller.

    Returns:
        Invocation: The captured result.

    Raises:
        TypeError: If ``code`` is not callable.
    """
    if not callable(code):
        raise TypeError(f"Expected a zero-argument callable, got {type(code).__name__}")
    if not isinstance(arity, Arity):
        raise TypeError(f"arity must be an Arity member, got {arity!r}")

    values: tuple[Any, ...] = _as_values(code(), arity)
    logger.trace("Invocation returned %d value(s) (%s)", len(values), arity.value)
    return Invocation(values=values, arity=arity)


def invoke_in_scope(
    code: Callable[[], Any],
    arity: Arity,
    scope: InterceptionScope,
) -> Invocation:
    """Open ``scope``, invoke ``code`` once inside it, and close it again.

    The scope is closed before this function returns or raises.

    Args:
        code (Callable[[], Any]): Zero-argument callable to run.
        arity (Arity): Calling convention of the caller.
        scope (InterceptionScope): A scope that has not been opened yet.

    Returns:
        Invocation: The captured result.
    """
    with scope:
        return invoke(code, arity)
