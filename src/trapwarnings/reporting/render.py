# topmark:header:start
#
#   project      : TrapWarnings
#   file         : render.py
#   file_relpath : src/trapwarnings/reporting/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of assertion records.

Output follows TAP conventions: numbered ``ok`` / ``not ok`` lines, with failure
details and notes as ``#`` comments.
Colors come from `yachalk` and can be disabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trapwarnings.reporting.model import AssertionOutcome, compute_assertion_stats

if TYPE_CHECKING:
    from collections.abc import Iterable

    from trapwarnings.reporting.model import AssertionRecord, AssertionStats


def _paint(text: str, outcome: AssertionOutcome, color: bool) -> str:
    return outcome.color(text) if color else text


def render_records(records: Iterable[AssertionRecord], *, color: bool = False) -> list[str]:
    """Render records as TAP-like lines.

    Args:
        records (Iterable[AssertionRecord]): Records in insertion order.
        color (bool): Colorize lines by outcome.

    Returns:
        list[str]: One line per assertion or note, plus indented detail lines for failures.
    """
    lines: list[str] = []
    number: int = 0
    for record in records:
        if record.outcome is AssertionOutcome.NOTE:
            lines.append(_paint(f"# {record.message}", record.outcome, color))
            continue

        number += 1
        prefix: str = "ok" if record.passed else "not ok"
        lines.append(_paint(f"{prefix} {number} - {record.message}", record.outcome, color))
        if record.failed:
            lines.append(_paint(f"#   Failed test '{record.message}'", record.outcome, color))
            if record.detail:
                for detail_line in record.detail.splitlines():
                    lines.append(_paint(f"#   {detail_line}", record.outcome, color))
    return lines


def render_summary(stats: AssertionStats) -> str:
    """Return a one-line summary such as ``"3 assertions, 1 failed"``."""
    noun: str = "assertion" if stats.total == 1 else "assertions"
    return f"{stats.total} {noun}, {stats.n_fail} failed"


def render_failures(records: Iterable[AssertionRecord]) -> str:
    """Render only the failing records, followed by a summary line.

    Used for test-failure messages where passing assertions are noise.

    Args:
        records (Iterable[AssertionRecord]): All records of a test.

    Returns:
        str: Multi-line failure report.
    """
    all_records: list[AssertionRecord] = list(records)
    lines: list[str] = []
    for record in all_records:
        if not record.failed:
            continue
        lines.append(f"not ok - {record.message}")
        if record.detail:
            lines.extend(f"    {line}" for line in record.detail.splitlines())
    lines.append(render_summary(compute_assertion_stats(all_records)))
    return "\n".join(lines)
