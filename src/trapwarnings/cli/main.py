# topmark:header:start
#
#   project      : TrapWarnings
#   file         : main.py
#   file_relpath : src/trapwarnings/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings CLI entry point (``trapwarnings`` console script).

The root group resolves the output options once, sets up internal logging from
``TRAPWARNINGS_LOG_LEVEL`` and stores the console and verbosity in ``ctx.obj``
(see [`trapwarnings.cli.options`][trapwarnings.cli.options]).
"""

from __future__ import annotations

import click

from trapwarnings.cli.commands.config import config_command
from trapwarnings.cli.commands.run import run_command
from trapwarnings.cli.commands.version import version_command
from trapwarnings.cli.console import ClickConsole
from trapwarnings.cli.options import (
    CONSOLE_KEY,
    VERBOSITY_KEY,
    output_options,
    resolve_verbosity,
)
from trapwarnings.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Populate ``ctx.obj`` with the console and the verbosity.

    Args:
        ctx (click.Context): The root context.
        verbose (int): ``-v`` count.
        quiet (int): ``-q`` count.
        no_color (bool): ``--no-color`` flag.
    """
    ctx.ensure_object(dict)
    ctx.obj[VERBOSITY_KEY] = resolve_verbosity(verbose, quiet)

    # Program output and internal logging are configured independently.
    setup_logging()

    ctx.color = not no_color
    ctx.obj[CONSOLE_KEY] = ClickConsole(enable_color=not no_color)
    logger.debug("CLI state: verbosity=%d color=%s", ctx.obj[VERBOSITY_KEY], not no_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Run code once and check the Python warnings it emits.",
)
@output_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the TrapWarnings CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj[CONSOLE_KEY]
        console.print("Hint: use 'trapwarnings run MODULE:CALLABLE -e PATTERN' to check warnings.")
        console.print()
        console.print(ctx.get_help())


for _command in (run_command, config_command, version_command):
    cli.add_command(_command)
