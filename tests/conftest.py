# topmark:header:start
#
#   project      : TrapWarnings
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TrapWarnings test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    The TrapWarnings pytest plugin is active while this suite runs, so the module-level
    API reports into the *running test's* reporter. Tests that exercise failing
    expectations must therefore bind their own reporter, either with the
    `recorder` / `wtrap` fixtures or with an inline ``with use_reporter(...)`` block
    inside the test body. A reporter pushed from a fixture would sit *below* the
    plugin's per-test reporter on the stack.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from trapwarnings.config import Config, logging, reset_config
from trapwarnings.core.trap import WarningTrap
from trapwarnings.reporting.reporters import RecordingReporter

F = TypeVar("F", bound=Callable[..., object])


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


@pytest.fixture(autouse=True)
def isolate_trapwarnings_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep env-driven logging and the cached configuration out of each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.

    Yields:
        None: Control to the test.
    """
    monkeypatch.delenv("TRAPWARNINGS_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set TrapWarnings logging to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def recorder() -> RecordingReporter:
    """Return a fresh reporter, independent from the plugin's per-test reporter."""
    return RecordingReporter()


@pytest.fixture
def wtrap(recorder: RecordingReporter) -> WarningTrap:
    """Return a `WarningTrap` bound to `recorder` and the built-in defaults."""
    return WarningTrap(reporter=recorder, config=Config())


def warn(*messages: str) -> Callable[[], None]:
    """Return a callable that emits each message as a `UserWarning`, in order."""

    def _code() -> None:
        for message in messages:
            warnings.warn(message, UserWarning, stacklevel=2)

    return _code
