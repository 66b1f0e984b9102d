# topmark:header:start
#
#   project      : TrapWarnings
#   file         : console.py
#   file_relpath : src/trapwarnings/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output of the TrapWarnings CLI.

Assertion reports, the effective configuration and error messages are program
output and go through `ClickConsole`. Internal diagnostics go through `logging`
(see [`trapwarnings.config.logging`][trapwarnings.config.logging]) and never
end up on stdout.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

from trapwarnings.reporting.render import render_records, render_summary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from trapwarnings.reporting.model import AssertionRecord, AssertionStats


class ClickConsole:
    """Writes CLI output through `click.echo`, honoring ``--no-color``.

    Args:
        enable_color (bool): Emit ANSI styles; plain text when False.
        out (TextIO | None): Stream for reports (`sys.stdout` when omitted).
        err (TextIO | None): Stream for errors (`sys.stderr` when omitted).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Echo ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str) -> None:
        """Echo ``text`` to the error stream, in bright red when colors are on."""
        click.secho(text, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply `click.style` to ``text``, or return it unchanged without colors."""
        return click.style(text, **style_kwargs) if self.enable_color else text

    def report(self, records: Iterable[AssertionRecord]) -> None:
        """Print assertion records as TAP-like lines.

        Args:
            records (Iterable[AssertionRecord]): Records in the order they were made.
        """
        for line in render_records(records, color=self.enable_color):
            self.print(line)

    def summary(self, stats: AssertionStats) -> None:
        """Print the bold one-line assertion summary."""
        self.print(self.styled(render_summary(stats), bold=True))
