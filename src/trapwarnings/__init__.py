# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __init__.py
#   file_relpath : src/trapwarnings/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings package.

TrapWarnings runs a piece of code exactly once, captures the Python warnings it
emits, asserts them against expected patterns, and hands back whatever the code
returned. Assertions go to a pluggable reporter; a pytest plugin turns failed
expectations into test failures.
"""

from __future__ import annotations

from trapwarnings.api import no_warnings, trap_one_warning, trap_warning, trap_warnings
from trapwarnings.core.invoker import Arity
from trapwarnings.core.trap import WarningTrap
from trapwarnings.reporting.reporters import (
    RecordingReporter,
    Reporter,
    current_reporter,
    use_reporter,
)

__all__ = [
    "Arity",
    "RecordingReporter",
    "Reporter",
    "WarningTrap",
    "current_reporter",
    "no_warnings",
    "trap_one_warning",
    "trap_warning",
    "trap_warnings",
    "use_reporter",
]
