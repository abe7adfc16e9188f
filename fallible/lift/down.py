"""
Lowering outcomes back out.

Extract a kungfu Result or a plain value from any source. Sync sources give
the answer directly; pending ones give a coroutine.
"""

from __future__ import annotations

import typing

from kungfu import Result

from .._helpers import as_outcome
from ..outcome import Failure, Outcome, Success
from ..pending import Steps, drive, to_coroutine

if typing.TYPE_CHECKING:
    from .._types import MaybeAwaitable, Source


def _to_result_steps[T, E](source: Source[T, E]) -> Steps[Result[T, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    return outcome.to_result()


def _or_else_steps[T, E](source: Source[T, E], default: T) -> Steps[T]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            return value
        case Failure(_):
            return default
        case _:
            raise TypeError(f"Unknown outcome variant {type(outcome).__name__}")


def to_result[T, E](source: Source[T, E]) -> MaybeAwaitable[Result[T, E]]:
    """
    Convert to kungfu Ok/Error.

    Example:
        result = await L.to_result(pipeline)
    """
    return drive(_to_result_steps(source), wrap=to_coroutine)


def or_else[T, E](source: Source[T, E], default: T) -> MaybeAwaitable[T]:
    """
    Success value, or default on Failure.

    Example:
        user = await L.or_else(fetch_user(42), default=GUEST)
    """
    return drive(_or_else_steps(source, default), wrap=to_coroutine)


__all__ = ("or_else", "to_result")
