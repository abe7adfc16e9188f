"""
Lifting values into outcomes.

Functions for turning plain values, kungfu Results, Optionals and awaitables
into Outcome / Pending.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import Result

from ..outcome import Failure, Outcome, Success
from ..pending import Pending


def success[T](value: T) -> Outcome[T, typing.Never]:
    """
    Lift pure value into a Success.

    Example:
        from fallible import lift as L

        L.success(42)  # Success(42)
    """
    return Success(value)


def failure[E](error: E) -> Outcome[typing.Never, E]:
    """Create a Failure. Dual of success()."""
    return Failure(error)


def from_result[T, E](result: Result[T, E]) -> Outcome[T, E]:
    """
    Lift a kungfu Result: Ok -> Success, Error -> Failure.

    Example:
        from kungfu import Ok

        L.from_result(Ok(1)).map(lambda x: x + 1)  # Success(2)
    """
    return Outcome.from_result(result)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Outcome[T, E]:
    """
    Convert Optional to Outcome. None becomes Failure(error()).

    NOTE: error is a thunk so the error is only built when needed.
    """
    if value is None:
        return Failure(error())
    return Success(value)


def pending[T, E](
    awaitable: Awaitable[Outcome[T, E]] | Awaitable[Result[T, E]],
) -> Pending[T, E]:
    """
    Wrap an awaitable of Outcome (or kungfu Result) so it can be chained.

    Example:
        L.pending(repo.fetch_user(42)).map(lambda user: user.name)
    """
    return Pending.of(awaitable)


__all__ = (
    "failure",
    "from_result",
    "optional",
    "pending",
    "success",
)
