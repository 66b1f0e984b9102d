# topmark:header:start
#
#   project      : TrapWarnings
#   file         : pytest_plugin.py
#   file_relpath : src/trapwarnings/pytest_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pytest integration.

Registered through the ``pytest11`` entry point. For every test item:

- a fresh [`RecordingReporter`][trapwarnings.reporting.reporters.RecordingReporter]
  is created during setup;
- it is the current reporter while the test body runs, so the module-level
  ``trap_one_warning`` / ``trap_warnings`` / ``no_warnings`` report into it;
- once the body has returned, recorded failures fail the test with a
  TAP-like report of every failed expectation.

Assertions are therefore *soft*: all expectations of a test are evaluated and
the return values of the trapped code are still available to plain ``assert``
statements.

Fixtures:
    trap: a [`WarningTrap`][trapwarnings.core.trap.WarningTrap] bound to the test's reporter.
    trap_reporter: the test's reporter itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from trapwarnings.config.logging import get_logger
from trapwarnings.core.trap import WarningTrap
from trapwarnings.reporting.render import render_failures
from trapwarnings.reporting.reporters import RecordingReporter, use_reporter

if TYPE_CHECKING:
    from collections.abc import Generator

    from trapwarnings.config.logging import TrapLogger

logger: TrapLogger = get_logger(__name__)

REPORTER_KEY: pytest.StashKey[RecordingReporter] = pytest.StashKey[RecordingReporter]()


def _item_reporter(item: pytest.Item) -> RecordingReporter:
    reporter: RecordingReporter | None = item.stash.get(REPORTER_KEY, None)
    if reporter is None:
        reporter = RecordingReporter()
        item.stash[REPORTER_KEY] = reporter
    return reporter


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item: pytest.Item) -> None:
    """Attach a fresh reporter to the item before its fixtures are set up.

    Args:
        item (pytest.Item): The test item about to run.
    """
    item.stash[REPORTER_KEY] = RecordingReporter()


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, None, None]:
    """Run the test body with the item's reporter active, then check it.

    Args:
        item (pytest.Item): The running test item.

    Yields:
        None: Control to the test body.

    Returns:
        None: The result of the inner hook implementations.
    """
    reporter: RecordingReporter = _item_reporter(item)
    with use_reporter(reporter):
        result = yield

    if reporter.failed:
        logger.debug("%s: %d failed warning assertion(s)", item.nodeid, reporter.failed)
        pytest.fail(render_failures(reporter.records()), pytrace=False)
    return result


@pytest.fixture
def trap_reporter(request: pytest.FixtureRequest) -> RecordingReporter:
    """Return the reporter that collects this test's warning assertions.

    Args:
        request (pytest.FixtureRequest): The pytest request object.

    Returns:
        RecordingReporter: The per-test reporter.
    """
    return _item_reporter(request.node)


@pytest.fixture
def trap(trap_reporter: RecordingReporter) -> WarningTrap:
    """Return a `WarningTrap` reporting into this test's reporter.

    Args:
        trap_reporter (RecordingReporter): The per-test reporter.

    Returns:
        WarningTrap: The bound trap.
    """
    return WarningTrap(reporter=trap_reporter)
