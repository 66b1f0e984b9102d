# topmark:header:start
#
#   project      : TrapWarnings
#   file         : model.py
#   file_relpath : src/trapwarnings/reporting/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assertion records produced by reporters.

Sections:
    * AssertionOutcome: pass / fail / note, with associated terminal colors.
    * AssertionRecord: immutable record of one assertion (outcome + message + detail).
    * AssertionStats: aggregated counts per outcome.
    * AssertionLog: mutable, insertion-ordered collection of records.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from trapwarnings.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from trapwarnings.config.logging import TrapLogger


logger: TrapLogger = get_logger(__name__)


class AssertionOutcome(Enum):
    """Outcome of a recorded assertion.

    ``NOTE`` entries are informational and never count as assertions.
    """

    PASS = "pass"
    FAIL = "fail"
    NOTE = "note"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this outcome.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this outcome.
        """
        return cast(
            "Callable[[str], str]",
            {
                AssertionOutcome.PASS: chalk.green,
                AssertionOutcome.FAIL: chalk.red_bright,
                AssertionOutcome.NOTE: chalk.gray,
            }[self],
        )


@dataclass(frozen=True)
class AssertionRecord:
    """A single assertion (or note) as seen by a reporter.

    Attributes:
        outcome (AssertionOutcome): Whether the assertion passed, failed, or is a note.
        message (str): The assertion message given by the caller.
        detail (str | None): Extra diagnostics for failures (e.g. the value and
            pattern that did not match).
    """

    outcome: AssertionOutcome
    message: str
    detail: str | None = None

    @property
    def passed(self) -> bool:
        """Return True for passing assertions."""
        return self.outcome is AssertionOutcome.PASS

    @property
    def failed(self) -> bool:
        """Return True for failing assertions."""
        return self.outcome is AssertionOutcome.FAIL


@dataclass(frozen=True)
class AssertionStats:
    """Aggregated counts for recorded assertions."""

    n_pass: int
    n_fail: int
    n_note: int

    @property
    def total(self) -> int:
        """Return the number of assertions (notes excluded)."""
        return self.n_pass + self.n_fail


@dataclass
class AssertionLog:
    """Mutable, insertion-ordered collection of assertion records."""

    items: list[AssertionRecord] = field(default_factory=lambda: [])

    def add(self, record: AssertionRecord) -> None:
        """Append a record to the log.

        Args:
            record: The record to append.
        """
        self.items.append(record)
        logger.trace("Recorded [%s]: %r", record.outcome.value, record.message)

    def assertions(self) -> list[AssertionRecord]:
        """Return the pass/fail records, notes excluded."""
        return [r for r in self.items if r.outcome is not AssertionOutcome.NOTE]

    def failures(self) -> list[AssertionRecord]:
        """Return the failed records in insertion order."""
        return [r for r in self.items if r.failed]

    def notes(self) -> list[str]:
        """Return the note messages in insertion order."""
        return [r.message for r in self.items if r.outcome is AssertionOutcome.NOTE]

    def stats(self) -> AssertionStats:
        """Return per-outcome counts for this log."""
        return compute_assertion_stats(self.items)

    def clear(self) -> None:
        """Drop all records."""
        self.items.clear()

    def __iter__(self) -> Iterator[AssertionRecord]:
        """Iterate over all records in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of records, notes included."""
        return len(self.items)


def compute_assertion_stats(records: Iterable[AssertionRecord]) -> AssertionStats:
    """Return per-outcome counts for a sequence of records.

    Args:
        records: The records to count.

    Returns:
        Per-outcome counts.
    """
    n_pass = n_fail = n_note = 0
    for r in records:
        if r.outcome is AssertionOutcome.PASS:
            n_pass += 1
        elif r.outcome is AssertionOutcome.FAIL:
            n_fail += 1
        else:
            n_note += 1
    return AssertionStats(n_pass=n_pass, n_fail=n_fail, n_note=n_note)
