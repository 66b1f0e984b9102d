# topmark:header:start
#
#   project      : TrapWarnings
#   file         : run.py
#   file_relpath : src/trapwarnings/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings `run` command.

Imports a ``module:callable`` target, invokes it once under one of the three
warning checks and prints the resulting assertions as TAP-like lines.

Mode selection (``--mode auto``):
    - no ``--expect``: ``no_warnings``
    - one ``--expect``: ``trap_one_warning``
    - several ``--expect``: ``trap_warnings``

Exit codes: see [`ExitCode`][trapwarnings.cli.exit_codes.ExitCode].
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import click

from trapwarnings.cli.commands.config import load_config_or_fail
from trapwarnings.cli.errors import TargetNotFoundError, TargetRaisedError, TrapUsageError
from trapwarnings.cli.exit_codes import ExitCode
from trapwarnings.cli.options import get_console, get_verbosity
from trapwarnings.config.logging import get_logger
from trapwarnings.core.invoker import Arity
from trapwarnings.core.trap import WarningTrap
from trapwarnings.errors import InvalidPatternError
from trapwarnings.reporting.reporters import RecordingReporter
from trapwarnings.utils.introspection import format_callable_pretty, resolve_target

if TYPE_CHECKING:
    from collections.abc import Callable

    from trapwarnings.config.logging import TrapLogger
    from trapwarnings.reporting.model import AssertionRecord

logger: TrapLogger = get_logger(__name__)


class TrapMode(str, Enum):
    """Which warning check `run` performs."""

    AUTO = "auto"
    ONE = "one"
    ORDERED = "ordered"
    NONE = "none"


def resolve_mode(mode: TrapMode, n_patterns: int) -> TrapMode:
    """Resolve ``auto`` and validate the pattern count for explicit modes.

    Args:
        mode (TrapMode): Requested mode.
        n_patterns (int): Number of ``--expect`` patterns.

    Returns:
        TrapMode: A concrete mode (never ``AUTO``).

    Raises:
        TrapUsageError: If the pattern count does not fit the requested mode.
    """
    if mode is TrapMode.AUTO:
        if n_patterns == 0:
            return TrapMode.NONE
        return TrapMode.ONE if n_patterns == 1 else TrapMode.ORDERED
    if mode is TrapMode.ONE and n_patterns != 1:
        raise TrapUsageError(f"--mode one needs exactly one --expect (got {n_patterns}).")
    if mode is TrapMode.NONE and n_patterns:
        raise TrapUsageError("--mode none does not accept --expect.")
    return mode


def _load_target(target: str) -> Callable[[], Any]:
    try:
        obj: Any = resolve_target(target)
    except ValueError as exc:
        raise TrapUsageError(str(exc)) from exc
    except (ImportError, AttributeError) as exc:
        raise TargetNotFoundError(f"Cannot resolve {target!r}: {exc}") from exc
    if not callable(obj):
        raise TargetNotFoundError(f"{target!r} is not callable")
    return obj


@click.command(
    name="run",
    help="Run MODULE:CALLABLE once and check the warnings it emits.",
)
@click.argument("target")
@click.option(
    "-e",
    "--expect",
    "patterns",
    multiple=True,
    metavar="REGEX",
    help="Expected warning pattern (repeat for an ordered list).",
)
@click.option(
    "-m",
    "--message",
    "messages",
    multiple=True,
    help="Assertion message (repeat to give one message per --expect).",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in TrapMode]),
    default=TrapMode.AUTO.value,
    show_default=True,
    help="Warning check to perform.",
)
@click.option(
    "--multi",
    is_flag=True,
    default=False,
    help="Collect the return value as a sequence of values.",
)
@click.option(
    "--show-result",
    is_flag=True,
    default=False,
    help="Print the target's return value.",
)
def run_command(
    *,
    target: str,
    patterns: tuple[str, ...],
    messages: tuple[str, ...],
    mode: str,
    multi: bool,
    show_result: bool,
) -> None:
    """Run a target under a warning check.

    Args:
        target (str): ``package.module:callable`` to invoke.
        patterns (tuple[str, ...]): Expected warning patterns.
        messages (tuple[str, ...]): Assertion messages.
        mode (str): One of ``auto``, ``one``, ``ordered``, ``none``.
        multi (bool): Use ``Arity.MULTI``.
        show_result (bool): Print the return value.

    Raises:
        TrapUsageError: On invalid option combinations or patterns.
        TargetRaisedError: If the target raised.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    verbosity: int = get_verbosity(ctx)

    concrete: TrapMode = resolve_mode(TrapMode(mode), len(patterns))
    code: Callable[[], Any] = _load_target(target)
    reporter = RecordingReporter()
    trap = WarningTrap(reporter=reporter, config=load_config_or_fail())
    arity: Arity = Arity.MULTI if multi else Arity.SINGLE
    message: str | None = messages[0] if messages else None
    # A single -m is shared by every position.
    shared_or_each: str | list[str] | None = message if len(messages) <= 1 else list(messages)

    logger.debug("run %s in mode %s", format_callable_pretty(code), concrete.value)
    try:
        if concrete is TrapMode.NONE:
            result: Any = trap.no_warnings(code, message, arity=arity)
        elif concrete is TrapMode.ONE:
            result = trap.trap_one_warning(code, patterns[0], message, arity=arity)
        else:
            result = trap.trap_warnings(code, list(patterns), shared_or_each, arity=arity)
    except InvalidPatternError as exc:
        raise TrapUsageError(str(exc)) from exc
    except Exception as exc:
        raise TargetRaisedError(f"{target} raised {type(exc).__name__}: {exc}") from exc

    records: list[AssertionRecord] = reporter.records()
    if verbosity < 0:
        records = [r for r in records if r.failed]
    console.report(records)
    if show_result:
        console.print(f"# result: {result!r}")
    if verbosity >= 0:
        console.summary(reporter.stats())

    if reporter.failed:
        ctx.exit(ExitCode.FAILURE)
