# topmark:header:start
#
#   project      : TrapWarnings
#   file         : options.py
#   file_relpath : src/trapwarnings/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group-level output options and accessors for the state they produce.

The root group stores two values in ``ctx.obj``:

- ``"console"``: the [`ClickConsole`][trapwarnings.cli.console.ClickConsole];
- ``"verbosity"``: ``-v`` count minus ``-q`` count (``0`` by default).

Subcommands read them back with `get_console` and `get_verbosity`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from trapwarnings.cli.errors import TrapUsageError

if TYPE_CHECKING:
    from collections.abc import Callable

    from trapwarnings.cli.console import ClickConsole

P = ParamSpec("P")
R = TypeVar("R")

CONSOLE_KEY = "console"
VERBOSITY_KEY = "verbosity"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Combine ``-v`` and ``-q`` counts into one signed level.

    Args:
        verbose_count (int): Occurrences of ``-v``.
        quiet_count (int): Occurrences of ``-q``.

    Returns:
        int: ``verbose_count`` or ``-quiet_count``; 0 when neither was given.

    Raises:
        TrapUsageError: If both flags were given.
    """
    if verbose_count and quiet_count:
        raise TrapUsageError("--verbose and --quiet cannot be combined.")
    return verbose_count - quiet_count


def output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose``, ``-q/--quiet`` and ``--no-color`` to a command."""
    f = click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Print plain text without ANSI colors.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print failed assertions (repeatable).",
    )(f)
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Print extra context such as the config source (repeatable).",
    )(f)
    return f


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console created by the root group."""
    ctx.ensure_object(dict)
    return ctx.obj[CONSOLE_KEY]


def get_verbosity(ctx: click.Context) -> int:
    """Return the signed verbosity resolved by the root group."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get(VERBOSITY_KEY, 0))
