"""
Guard combinators
=================

Validation of the success value.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import as_outcome, is_async_callable
from ..outcome import Failure, Outcome, Success
from ..pending import Steps, drive

if typing.TYPE_CHECKING:
    from .._types import Eventually, MaybeAwaitable, Predicate, Source


def _ensure_steps[T, E](
    source: Source[T, E],
    predicate: Predicate[T],
    error: Callable[[T], MaybeAwaitable[E]],
) -> Steps[Outcome[T, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            if (yield predicate(value)):
                return outcome
            return Failure(typing.cast(E, (yield error(value))))
        case _:
            return outcome


def ensure[T, E](
    source: Source[T, E],
    *,
    predicate: Predicate[T],
    error: Callable[[T], MaybeAwaitable[E]],
) -> Eventually[T, E]:
    """
    Turn Success into Failure if value FAILS validation check.

    Failure passes through, predicate not called.

    Example:
        ensure(rows, predicate=bool, error=lambda _: "No data returned")
    """
    deferred = is_async_callable(predicate) or is_async_callable(error)
    return drive(_ensure_steps(source, predicate, error), deferred=deferred)


__all__ = ("ensure",)
