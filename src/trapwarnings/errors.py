# topmark:header:start
#
#   project      : TrapWarnings
#   file         : errors.py
#   file_relpath : src/trapwarnings/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by TrapWarnings itself.

Usage:
    These errors signal *misuse* of the library (bad patterns, scope misuse,
    invalid configuration). Expectation mismatches are never raised: they are
    reported as failed assertions through the active reporter. Exceptions
    raised by the code under test propagate unchanged and are not wrapped.
"""

from __future__ import annotations


class TrapWarningsError(Exception):
    """Base class for all TrapWarnings errors."""


class InvalidPatternError(TrapWarningsError, TypeError):
    """A pattern is neither a regex string, a compiled regex, nor a predicate."""


class ScopeStateError(TrapWarningsError, RuntimeError):
    """An interception scope was opened twice or closed while not open."""


class ConfigError(TrapWarningsError, ValueError):
    """A configuration value has the wrong type or shape."""
