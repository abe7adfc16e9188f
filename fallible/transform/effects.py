"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the computation result: the returned outcome is the
input instance itself.

NOTE: whatever the effect returns is awaited if it is awaitable, sync
effects included. An effect returning a Task or Future (or passing one
through) makes the result a Pending that waits for it. To fire and forget,
return None from the effect."""

from __future__ import annotations

import typing

from .._helpers import as_outcome, is_async_callable
from ..outcome import Failure, Outcome, Success
from ..pending import Steps, drive

if typing.TYPE_CHECKING:
    from .._types import Effect, Eventually, Source


def _tap_steps[T, E](source: Source[T, E], effect: Effect[T]) -> Steps[Outcome[T, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            yield effect(value)
        case Failure(_):
            pass
    return outcome


def _tap_error_steps[T, E](source: Source[T, E], effect: Effect[E]) -> Steps[Outcome[T, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Failure(err):
            yield effect(err)
        case Success(_):
            pass
    return outcome


def tap[T, E](
    source: Source[T, E],
    *,
    effect: Effect[T],
) -> Eventually[T, E]:
    """Execute side effect (sync or async) on Success value, pass through unchanged.

    An awaitable returned by the effect is awaited before the outcome is
    handed back, so a scheduled Task is joined, not detached.
    """
    return drive(_tap_steps(source, effect), deferred=is_async_callable(effect))


def tap_error[T, E](
    source: Source[T, E],
    *,
    effect: Effect[E],
) -> Eventually[T, E]:
    """Execute side effect (sync or async) on Failure error, pass through unchanged.

    Same awaiting rule as tap.
    """
    return drive(_tap_error_steps(source, effect), deferred=is_async_callable(effect))


__all__ = ("tap", "tap_error")
