# topmark:header:start
#
#   project      : TrapWarnings
#   file         : config.py
#   file_relpath : src/trapwarnings/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings `config` command.

Prints the effective configuration (defaults merged with the nearest
``trapwarnings.toml`` or ``[tool.trapwarnings]`` table) as TOML.
"""

from __future__ import annotations

import click

from trapwarnings.cli.errors import TrapConfigError
from trapwarnings.cli.options import get_console, get_verbosity
from trapwarnings.config.io import to_toml
from trapwarnings.config.model import Config, load_config
from trapwarnings.errors import ConfigError


def load_config_or_fail() -> Config:
    """Load the configuration, converting config errors into a CLI error.

    Returns:
        Config: The resolved configuration.

    Raises:
        TrapConfigError: If the configuration file holds invalid values.
    """
    try:
        return load_config()
    except ConfigError as exc:
        raise TrapConfigError(str(exc)) from exc


@click.command(
    name="config",
    help="Show the effective TrapWarnings configuration as TOML.",
)
@click.option(
    "--for-pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.trapwarnings] for pasting into pyproject.toml.",
)
def config_command(*, for_pyproject: bool = False) -> None:
    """Show the effective configuration.

    Args:
        for_pyproject (bool): Render under ``[tool.trapwarnings]``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    config: Config = load_config_or_fail()

    if get_verbosity(ctx) > 0:
        source: str = str(config.config_file) if config.config_file else "<defaults>"
        console.print(f"# source: {source}")
    console.print(to_toml(config.to_toml_dict(), for_pyproject=for_pyproject), nl=False)
