# topmark:header:start
#
#   project      : TrapWarnings
#   file         : __main__.py
#   file_relpath : src/trapwarnings/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TrapWarnings via ``python -m trapwarnings``.

Delegates to :func:`trapwarnings.cli.main.cli`, the same entry point as the
``trapwarnings`` console script.
"""

from __future__ import annotations

from trapwarnings.cli.main import cli

if __name__ == "__main__":
    cli()
