# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __init__.py
#   file_relpath : src/trapwarnings/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TrapWarnings CLI subcommands."""
