# topmark:header:start
#
#   project      : TrapWarnings
#   file         : patterns.py
#   file_relpath : src/trapwarnings/core/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patterns matched against captured warning messages.

A pattern is one of:

- a ``str``: a regular expression, applied with `re.search` (unanchored);
- a compiled `re.Pattern`;
- a predicate ``Callable[[str], bool]``.

Patterns are checked with [`validate_pattern`][trapwarnings.core.patterns.validate_pattern]
before any code is invoked, so a malformed expectation never costs an invocation.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Union

from trapwarnings.errors import InvalidPatternError

Pattern = Union[str, re.Pattern[str], Callable[[str], bool]]


def validate_pattern(pattern: object) -> None:
    """Raise if ``pattern`` cannot be used to match warning messages.

    Args:
        pattern (object): The candidate pattern.

    Raises:
        InvalidPatternError: If ``pattern`` is not a regex string, compiled str
            regex or callable, or if a regex string does not compile.
    """
    if isinstance(pattern, re.Pattern):
        if isinstance(pattern.pattern, (bytes, bytearray)):
            raise InvalidPatternError(
                f"Compiled pattern {pattern.pattern!r} is a bytes regex; warning messages are str"
            )
        return
    if isinstance(pattern, str):
        try:
            re.compile(pattern)
        except re.error as exc:
            raise InvalidPatternError(f"Invalid regular expression {pattern!r}: {exc}") from exc
        return
    if isinstance(pattern, bytes) or not callable(pattern):
        raise InvalidPatternError(
            f"Pattern must be a regex string, a compiled regex or a predicate, "
            f"got {type(pattern).__name__}"
        )


def validate_patterns(patterns: Sequence[Pattern]) -> None:
    """Validate every pattern of an ordered expectation list.

    Args:
        patterns (Sequence[Pattern]): The patterns to check.

    Raises:
        InvalidPatternError: If ``patterns`` is a plain string (a common mistake
            for a one-element list) or if any pattern is invalid.
    """
    if isinstance(patterns, (str, bytes)) or not isinstance(patterns, Sequence):
        raise InvalidPatternError(
            f"Expected a sequence of patterns, got {type(patterns).__name__}"
        )
    for pattern in patterns:
        validate_pattern(pattern)


def matches(text: str, pattern: Pattern) -> bool:
    """Return True if ``text`` satisfies ``pattern``.

    Args:
        text (str): A captured warning message.
        pattern (Pattern): A validated pattern.

    Returns:
        bool: The match result.
    """
    if isinstance(pattern, re.Pattern):
        return pattern.search(text) is not None
    if isinstance(pattern, str):
        return re.search(pattern, text) is not None
    return bool(pattern(text))


def describe_pattern(pattern: Pattern) -> str:
    """Return a short human-readable form of ``pattern`` for failure details."""
    if isinstance(pattern, re.Pattern):
        return f"/{pattern.pattern}/"
    if isinstance(pattern, str):
        return f"/{pattern}/"
    name: str = getattr(pattern, "__qualname__", None) or type(pattern).__name__
    return f"<predicate {name}>"
