# topmark:header:start
#
#   project      : TrapWarnings
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nox sessions for TrapWarnings.

Sessions:
  - `qa`: pytest (fast tests) and pyright, once per supported Python.
  - `lint` / `format_check` / `format`: ruff.
  - `property_test`: the ``hypothesis_slow`` property tests.
  - `package_check`: build the sdist and wheel and run ``twine check``.

``nox`` with no arguments runs `lint` and `format_check`.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib as _toml

    def _load_toml(text: str) -> dict[str, Any]:
        return _toml.loads(text)

else:
    import toml as _toml

    def _load_toml(text: str) -> dict[str, Any]:
        return _toml.loads(text)


PYPROJECT: Path = Path(__file__).parent / "pyproject.toml"
CURRENT_PYTHON: str = f"{sys.version_info.major}.{sys.version_info.minor}"
_CLASSIFIER = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions listed in the pyproject classifiers.

    Evaluated when the noxfile is imported, so it only uses the standard library
    (plus ``toml`` on Python 3.10). Falls back to the running interpreter.

    Returns:
        list[str]: Versions in ascending order.
    """
    try:
        classifiers: list[str] = _load_toml(PYPROJECT.read_text(encoding="utf-8"))["project"][
            "classifiers"
        ]
    except (OSError, KeyError, ValueError):
        return [CURRENT_PYTHON]

    found: set[tuple[int, int]] = set()
    for classifier in classifiers:
        match = _CLASSIFIER.match(classifier)
        if match:
            found.add((int(match.group(1)), int(match.group(2))))
    return [f"{major}.{minor}" for major, minor in sorted(found)] or [CURRENT_PYTHON]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Tests (without the slow property tests) and type checking."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail if ruff would reformat anything."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Reformat with ruff."""
    session.install("ruff")
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Long-running hypothesis tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON)
def package_check(session: nox.Session) -> None:
    """Build distributions into a scratch directory and validate their metadata."""
    session.install("build", "twine")
    dist: Path = Path(session.create_tmp()) / "dist"
    session.run("python", "-m", "build", "--sdist", "--wheel", "--outdir", str(dist))
    session.run("twine", "check", *[str(p) for p in dist.iterdir()])
