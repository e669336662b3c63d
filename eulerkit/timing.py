"""Run callables one after another and report how long each took."""

from __future__ import annotations

import time
from typing import Any, Callable

__all__ = ["time_solutions"]

SEPARATOR = "-" * 59

_UNITS = ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs"))


def _format_duration(nanoseconds: int) -> str:
    for scale, unit in _UNITS:
        if nanoseconds >= scale:
            text = f"{nanoseconds / scale:.9f}".rstrip("0").rstrip(".")
            return f"{text}{unit}"
    return f"{nanoseconds}ns"


def _split_call(item: Any) -> tuple[Callable[..., Any], tuple[Any, ...]]:
    if callable(item):
        return item, ()
    if isinstance(item, (tuple, list)) and item and callable(item[0]):
        return item[0], tuple(item[1:])
    raise TypeError(f"expected a callable or (callable, *args), got {item!r}")


def time_solutions(*args: Any) -> list[Any]:
    """Call each given function in turn, printing its name and run time.

    Each argument is a callable taking no arguments, or a tuple whose first
    item is the callable and whose remaining items are its arguments.
    Returns the results of the calls in order.
    """
    calls = [_split_call(item) for item in args]
    results = []
    for func, params in calls:
        print(SEPARATOR)
        start = time.perf_counter_ns()
        result = func(*params)
        elapsed = time.perf_counter_ns() - start
        name = getattr(func, "__name__", repr(func))
        print(f"{name} took {_format_duration(elapsed)}")
        results.append(result)
    return results