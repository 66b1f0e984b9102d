# topmark:header:start
#
#   project      : TrapWarnings
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for CLI tests.

The `targets` fixture writes a small module of warning-emitting callables into a
temporary directory, makes it importable and changes into that directory so that
configuration discovery only sees what the test puts there.
"""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from trapwarnings.cli.main import cli

TARGETS_MODULE = "trapwarnings_cli_targets"

TARGETS_SOURCE = textwrap.dedent(
    '''
    import warnings


    def one():
        warnings.warn("deprecated call")
        return 42


    def two():
        warnings.warn("first thing")
        warnings.warn("second thing")
        return "done"


    def quiet():
        return [1, 2]


    def crash():
        raise ValueError("broken target")


    NOT_CALLABLE = 3
    '''
)


def run_cli(args: list[str]) -> Result:
    """Invoke the CLI with colors disabled and return the Click result.

    Args:
        args (list[str]): Command-line arguments after the program name.

    Returns:
        Result: The Click test runner result.
    """
    return CliRunner().invoke(cli, ["--no-color", *args])


@pytest.fixture
def targets(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create the importable targets module and chdir next to it.

    Returns:
        Path: The directory holding the module.
    """
    (tmp_path / f"{TARGETS_MODULE}.py").write_text(TARGETS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, TARGETS_MODULE, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
