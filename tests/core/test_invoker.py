# topmark:header:start
#
#   project      : TrapWarnings
#   file         : test_invoker.py
#   file_relpath : tests/core/test_invoker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for single invocation and the arity conventions."""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from typing import Any

import pytest

from tests.conftest import parametrize
from trapwarnings.core.invoker import Arity, Invocation, invoke, invoke_in_scope
from trapwarnings.core.scope import InterceptionScope


def test_single_returns_value_unchanged() -> None:
    """SINGLE hands the return value back as is, containers included."""
    payload: list[int] = [1, 2, 3]
    invocation: Invocation = invoke(lambda: payload, Arity.SINGLE)

    assert invocation.values == (payload,)
    assert invocation.unwrap() is payload


@parametrize(
    "returned, expected",
    [
        ([1, 2, 3], (1, 2, 3)),
        ((4, 5), (4, 5)),
        ([], ()),
        (None, ()),
        (7, (7,)),
        ("text", ("text",)),
        (b"raw", (b"raw",)),
        ({"k": 1}, ({"k": 1},)),
    ],
)
def test_multi_materializes_a_tuple(returned: Any, expected: tuple[Any, ...]) -> None:
    """MULTI yields a tuple; scalars, strings and mappings stay whole."""
    assert invoke(lambda: returned, Arity.MULTI).unwrap() == expected


def test_code_runs_exactly_once() -> None:
    """Each invocation calls the code a single time."""
    calls: list[int] = []

    def code() -> int:
        calls.append(1)
        return len(calls)

    assert invoke(code).unwrap() == 1
    assert calls == [1]


def test_multi_drains_generator_inside_scope() -> None:
    """Warnings raised lazily while a generator is consumed are captured."""

    def lazy() -> Iterator[int]:
        for i in range(3):
            warnings.warn(f"item {i}")
            yield i

    scope = InterceptionScope()
    invocation: Invocation = invoke_in_scope(lazy, Arity.MULTI, scope)

    assert invocation.unwrap() == (0, 1, 2)
    assert scope.buffer.snapshot() == ("item 0", "item 1", "item 2")
    assert not scope.is_open


def test_exception_propagates_and_scope_is_closed() -> None:
    """An exception from the code reaches the caller after the scope was released."""
    handler_before = warnings.showwarning
    scope = InterceptionScope()

    def boom() -> None:
        warnings.warn("about to fail")
        raise LookupError("boom")

    with pytest.raises(LookupError, match="boom"):
        invoke_in_scope(boom, Arity.SINGLE, scope)

    assert not scope.is_open
    assert warnings.showwarning is handler_before
    assert scope.buffer.snapshot() == ("about to fail",)


def test_rejects_non_callable_and_bad_arity() -> None:
    """Invalid arguments are reported before anything runs."""
    with pytest.raises(TypeError, match="callable"):
        invoke(42)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="Arity"):
        invoke(lambda: None, "multi")  # type: ignore[arg-type]
