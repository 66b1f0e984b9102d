# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __init__.py
#   file_relpath : src/trapwarnings/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interception engine: scope, invoker and patterns.

[`WarningTrap`][trapwarnings.core.trap.WarningTrap] lives in
`trapwarnings.core.trap` and is not re-exported here, because it depends on
`trapwarnings.reporting`, which itself depends on this package.
"""

from __future__ import annotations

from trapwarnings.core.invoker import Arity, Invocation, invoke, invoke_in_scope
from trapwarnings.core.patterns import Pattern, describe_pattern, matches, validate_pattern
from trapwarnings.core.scope import CapturedWarning, DiagnosticBuffer, InterceptionScope

__all__ = [
    "Arity",
    "CapturedWarning",
    "DiagnosticBuffer",
    "InterceptionScope",
    "Invocation",
    "Pattern",
    "describe_pattern",
    "invoke",
    "invoke_in_scope",
    "matches",
    "validate_pattern",
]
