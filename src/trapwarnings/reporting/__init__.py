# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __init__.py
#   file_relpath : src/trapwarnings/reporting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assertion reporting.

Design:
    - TrapWarnings talks to an assertion framework only through the
      `Reporter` protocol.
    - `RecordingReporter` keeps immutable `AssertionRecord` entries in a
      mutable `AssertionLog`.
    - Human-readable output lives in
      [`trapwarnings.reporting.render`][trapwarnings.reporting.render].
"""

from __future__ import annotations

from trapwarnings.reporting.model import (
    AssertionLog,
    AssertionOutcome,
    AssertionRecord,
    AssertionStats,
    compute_assertion_stats,
)
from trapwarnings.reporting.reporters import (
    RecordingReporter,
    Reporter,
    current_reporter,
    default_reporter,
    use_reporter,
)

__all__ = [
    "AssertionLog",
    "AssertionOutcome",
    "AssertionRecord",
    "AssertionStats",
    "RecordingReporter",
    "Reporter",
    "compute_assertion_stats",
    "current_reporter",
    "default_reporter",
    "use_reporter",
]
