"""
Conditional bind
================

bind_if: predicate-gated continuation.

NOTE: polarity is inverted relative to the name. A TRUE predicate means
"already fine, skip": the original Success is returned and the
continuation is not called. A FALSE predicate runs the continuation.

    bind_if(Success(10), predicate=lambda x: x > 5, then=double)  # Success(10)
    bind_if(Success(3), predicate=lambda x: x > 5, then=double)   # Success(6)
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import as_outcome, is_async_callable
from ..outcome import Outcome, Success
from ..pending import Steps, drive

if typing.TYPE_CHECKING:
    from .._types import Eventually, Predicate, Source


def _bind_if_steps[T, E](
    source: Source[T, E],
    predicate: Predicate[T],
    then: Callable[[T], Source[T, E]],
) -> Steps[Outcome[T, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            if (yield predicate(value)):
                return outcome
            return as_outcome((yield then(value)))
        case _:
            return outcome


def bind_if[T, E](
    source: Source[T, E],
    *,
    predicate: Predicate[T],
    then: Callable[[T], Source[T, E]],
) -> Eventually[T, E]:
    """
    Run `then` on the success value unless predicate holds.

    - Failure: predicate and then both skipped, Failure returned unchanged
    - Success(v), predicate(v) true: Success(v) returned unchanged
    - Success(v), predicate(v) false: then(v) becomes the result

    Typical use: normalise only what needs normalising.

    Example:
        bind_if(
            raw,
            predicate=lambda text: text.startswith("{"),
            then=extract_json_body,
        )
    """
    deferred = is_async_callable(predicate) or is_async_callable(then)
    return drive(_bind_if_steps(source, predicate, then), deferred=deferred)


__all__ = ("bind_if",)
