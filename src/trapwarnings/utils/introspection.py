# topmark:header:start
#
#   project      : TrapWarnings
#   file         : introspection.py
#   file_relpath : src/trapwarnings/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers to name callables in logs and to import ``module:callable`` targets."""

from __future__ import annotations

import functools
import importlib
from inspect import getmodule
from typing import Any


def format_callable_pretty(obj: Any) -> str:
    """Return ``"(module.qualname)"`` for the code under test, for log lines.

    Partials are unwrapped to the function they bind. Lambdas keep their
    ``<lambda>`` qualname, so the enclosing function still shows.

    Args:
        obj (Any): Any callable.

    Returns:
        str: The parenthesized dotted name, without module if none is known.
    """
    while isinstance(obj, functools.partial):
        obj = obj.func

    name: str = (
        getattr(obj, "__qualname__", None)
        or getattr(obj, "__name__", None)
        or type(obj).__qualname__
    )
    module: str | None = getattr(obj, "__module__", None)
    if not module:
        found = getmodule(obj)
        module = found.__name__ if found is not None else None
    return f"({module}.{name})" if module else f"({name})"


def resolve_target(target: str) -> Any:
    """Import ``"package.module:qualname"`` and return the named object.

    Args:
        target (str): Module path, a colon, then a (possibly dotted) attribute path.

    Returns:
        Any: The resolved object.

    Raises:
        ValueError: If ``target`` is not of the form ``module:qualname``.
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute path does not exist.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Target must look like 'package.module:callable', got {target!r}")

    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj
