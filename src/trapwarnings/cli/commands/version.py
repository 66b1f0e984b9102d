# topmark:header:start
#
#   project      : TrapWarnings
#   file         : version.py
#   file_relpath : src/trapwarnings/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings `version` command.

Prints the current TrapWarnings version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from trapwarnings.cli.options import get_console, get_verbosity
from trapwarnings.constants import TRAPWARNINGS_VERSION


@click.command(
    name="version",
    help="Show the current version of TrapWarnings.",
)
def version_command() -> None:
    """Show the current version of TrapWarnings."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_verbosity(ctx) > 0:
        console.print(console.styled("TrapWarnings version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TRAPWARNINGS_VERSION, bold=True)}")
    else:
        console.print(console.styled(TRAPWARNINGS_VERSION, bold=True))
