# topmark:header:start
#
#   project      : TrapWarnings
#   file         : test_no_warnings.py
#   file_relpath : tests/api/test_no_warnings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `no_warnings`."""

from __future__ import annotations

import warnings

import pytest

from tests.conftest import warn
from trapwarnings import Arity, no_warnings, use_reporter
from trapwarnings.core.trap import WarningTrap
from trapwarnings.reporting.reporters import RecordingReporter


def test_quiet_code_is_one_pass(wtrap: WarningTrap, recorder: RecordingReporter) -> None:
    """No warning: exactly one passing assertion with the default message."""
    assert wtrap.no_warnings(lambda: "fine") == "fine"
    assert [(r.message, r.passed) for r in recorder.records()] == [
        ("Code does not emit diagnostics", True)
    ]


def test_noisy_code_is_two_failures(wtrap: WarningTrap, recorder: RecordingReporter) -> None:
    """A violation reports the count and then the boolean assertion."""
    with warnings.catch_warnings(record=True):
        wtrap.no_warnings(warn("one", "two"), "stays quiet")

    assert [r.message for r in recorder.failures()] == [
        "stays quiet: captured 2 diagnostics",
        "stays quiet",
    ]
    assert recorder.passed == 0


def test_captured_warnings_are_forwarded(wtrap: WarningTrap) -> None:
    """Warnings are passed on to the outer handler, not swallowed."""
    with warnings.catch_warnings(record=True) as outer:
        warnings.simplefilter("always")
        wtrap.no_warnings(warn("leaked"))

    assert [str(w.message) for w in outer] == ["leaked"]
    assert outer[0].category is UserWarning


def test_multi_arity(wtrap: WarningTrap, recorder: RecordingReporter) -> None:
    """The return value follows the requested arity."""
    assert wtrap.no_warnings(lambda: None, arity=Arity.MULTI) == ()
    assert wtrap.no_warnings(lambda: [1, 2], arity=Arity.MULTI) == (1, 2)
    assert recorder.failed == 0


def test_exception_propagates_without_assertion(
    wtrap: WarningTrap, recorder: RecordingReporter
) -> None:
    """The code's exception escapes and nothing is reported for the call."""
    handler_before = warnings.showwarning

    def code() -> None:
        raise RuntimeError("no")

    with pytest.raises(RuntimeError):
        wtrap.no_warnings(code)

    assert warnings.showwarning is handler_before
    assert recorder.records() == []


def test_module_api(recorder: RecordingReporter) -> None:
    """The function API reports to the current reporter."""
    with warnings.catch_warnings(record=True), use_reporter(recorder):
        no_warnings(warn("oops"), "api")
    assert recorder.failed == 2


def test_passing_expectation_under_plugin() -> None:
    """A quiet call passes inside the plugin-managed test."""
    assert no_warnings(lambda: 3) == 3
