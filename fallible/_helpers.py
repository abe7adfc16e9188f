"""Internal helpers for combinators.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing custom combinators."""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable

from kungfu import Error, Ok

from .outcome import Failure, Outcome, Success


def as_outcome[T, E](resolved: object) -> Outcome[T, E]:
    """
    Coerce an already-resolved value into an Outcome.

    Accepts an Outcome (returned as is) or a kungfu Ok/Error.
    Anything else is a wiring mistake in the caller's chain.
    """
    match resolved:
        case Outcome():
            return typing.cast(Outcome[T, E], resolved)
        case Ok(value):
            return typing.cast(Outcome[T, E], Success(value))
        case Error(err):
            return typing.cast(Outcome[T, E], Failure(err))
        case _:
            raise TypeError(
                f"Expected an Outcome or kungfu Result, got {type(resolved).__name__}"
            )


def needs_await(value: object) -> bool:
    """True for awaitables that are not already-resolved outcomes."""
    return not isinstance(value, Outcome) and inspect.isawaitable(value)


def is_async_callable(fn: Callable[..., object] | None) -> bool:
    """
    Whether fn is statically known to return a coroutine.

    Sees through functools.partial and objects with an async __call__.
    Lambdas returning coroutines are only detected once invoked.
    """
    if fn is None:
        return False
    while isinstance(fn, functools.partial):
        fn = fn.func
    if inspect.iscoroutinefunction(fn):
        return True
    call = getattr(fn, "__call__", None)
    return call is not None and inspect.iscoroutinefunction(call)


__all__ = (
    "as_outcome",
    "is_async_callable",
    "needs_await",
)
