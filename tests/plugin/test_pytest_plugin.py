# topmark:header:start
#
#   project      : TrapWarnings
#   file         : test_pytest_plugin.py
#   file_relpath : tests/plugin/test_pytest_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the pytest plugin, run in isolated sessions via `pytester`."""

from __future__ import annotations

import textwrap

import pytest

PLUGIN_ARGS = ("-p", "trapwarnings.pytest_plugin")


def _run(pytester: pytest.Pytester, source: str) -> pytest.RunResult:
    pytester.makepyfile(test_sample=textwrap.dedent(source))
    return pytester.runpytest(*PLUGIN_ARGS)


def test_passing_expectations_pass(pytester: pytest.Pytester) -> None:
    """Met expectations leave the test green and return the code's value."""
    result = _run(
        pytester,
        """
        import warnings
        from trapwarnings import no_warnings, trap_one_warning, trap_warnings

        def emit(*messages):
            def code():
                for m in messages:
                    warnings.warn(m)
                return len(messages)
            return code

        def test_all_pass():
            assert trap_one_warning(emit("old api"), r"old") == 1
            assert trap_warnings(emit("a", "b"), [r"a", r"b"]) == 2
            assert no_warnings(emit()) == 0
        """,
    )
    result.assert_outcomes(passed=1)


def test_failed_expectation_fails_test_with_report(pytester: pytest.Pytester) -> None:
    """A failed expectation fails the test after the body ran to completion."""
    result = _run(
        pytester,
        """
        import warnings
        from trapwarnings import trap_one_warning

        def test_mismatch():
            value = trap_one_warning(lambda: warnings.warn("actual text"), r"^expected", "m")
            assert value is None
            print("body finished")
        """,
    )
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*not ok - m*",
            "*'actual text'*",
            "*doesn't match /^expected/*",
            "*1 assertion, 1 failed*",
        ]
    )
    result.stdout.fnmatch_lines(["*body finished*"])


def test_assertions_are_soft(pytester: pytest.Pytester) -> None:
    """Every failed expectation of a test is reported, not only the first."""
    result = _run(
        pytester,
        """
        import warnings
        from trapwarnings import no_warnings, trap_warnings

        def test_two_problems():
            trap_warnings(lambda: None, [r"x"])
            no_warnings(lambda: warnings.warn("noise"), "quiet")
        """,
    )
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*not ok - Caught 0 diagnostics, but got 1 patterns to check*",
            "*not ok - quiet: captured 1 diagnostics*",
            "*not ok - quiet*",
            "*3 assertions, 3 failed*",
        ]
    )


def test_reporters_are_per_test(pytester: pytest.Pytester) -> None:
    """A failure in one test does not leak into the next one."""
    result = _run(
        pytester,
        """
        from trapwarnings import trap_one_warning

        def test_fails():
            trap_one_warning(lambda: None, r"x")

        def test_passes(trap_reporter):
            assert trap_reporter.records() == []
        """,
    )
    result.assert_outcomes(passed=1, failed=1)


def test_fixtures(pytester: pytest.Pytester) -> None:
    """`trap` reports into `trap_reporter`, the test's own reporter."""
    result = _run(
        pytester,
        """
        import warnings
        from trapwarnings import Arity, current_reporter

        def test_bound(trap, trap_reporter):
            assert current_reporter() is trap_reporter
            values = trap.trap_one_warning(
                lambda: (warnings.warn("hi"), 1)[1:], r"hi", arity=Arity.MULTI
            )
            assert values == (1,)
            assert trap_reporter.passed == 1
            assert trap_reporter.log.notes() == ["caught 1 diagnostic(s)"]
        """,
    )
    result.assert_outcomes(passed=1)


def test_tests_without_expectations_are_unaffected(pytester: pytest.Pytester) -> None:
    """Plain tests pass and fail on their own."""
    result = _run(
        pytester,
        """
        def test_ok():
            assert True

        def test_plain_failure():
            assert 1 == 2
        """,
    )
    result.assert_outcomes(passed=1, failed=1)
