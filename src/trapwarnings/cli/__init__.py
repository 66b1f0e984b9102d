# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __init__.py
#   file_relpath : src/trapwarnings/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface for TrapWarnings (Click based)."""
