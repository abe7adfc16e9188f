"""
Functor and monad combinators
=============================

map / bind / map_error / match over any source: a ready Outcome, a Pending,
or an awaitable of either. Continuations may be sync or async; the result is
an Outcome when nothing had to be awaited and a Pending otherwise.

Monadic laws (bind):
- Left identity: bind(Success(a), f) == f(a)
- Right identity: bind(m, Success) == m
- Associativity: bind(bind(m, f), g) == bind(m, x => bind(f(x), g))
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import as_outcome, is_async_callable
from ..outcome import Failure, Outcome, Success
from ..pending import Steps, drive, to_coroutine

if typing.TYPE_CHECKING:
    from .._types import Eventually, MaybeAwaitable, Source


# ============================================================================
# Steps
# ============================================================================


def _fmap_steps[T, U, E](
    source: Source[T, E],
    f: Callable[[T], MaybeAwaitable[U]],
) -> Steps[Outcome[U, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            return Success(typing.cast(U, (yield f(value))))
        case _:
            return typing.cast(Outcome[U, E], outcome)


def _bind_steps[T, U, E](
    source: Source[T, E],
    f: Callable[[T], Source[U, E]],
) -> Steps[Outcome[U, E]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            return as_outcome((yield f(value)))
        case _:
            return typing.cast(Outcome[U, E], outcome)


def _map_error_steps[T, E, F](
    source: Source[T, E],
    f: Callable[[E], MaybeAwaitable[F]],
) -> Steps[Outcome[T, F]]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Failure(err):
            return Failure(typing.cast(F, (yield f(err))))
        case _:
            return typing.cast(Outcome[T, F], outcome)


def _match_steps[T, E, R](
    source: Source[T, E],
    on_success: Callable[[T], MaybeAwaitable[R]],
    on_failure: Callable[[E], MaybeAwaitable[R]],
) -> Steps[R]:
    outcome: Outcome[T, E] = as_outcome((yield source))
    match outcome:
        case Success(value):
            return typing.cast(R, (yield on_success(value)))
        case Failure(err):
            return typing.cast(R, (yield on_failure(err)))
        case _:
            raise TypeError(f"Unknown outcome variant {type(outcome).__name__}")


# ============================================================================
# Combinators
# ============================================================================


def fmap[T, U, E](
    source: Source[T, E],
    f: Callable[[T], MaybeAwaitable[U]],
    /,
) -> Eventually[U, E]:
    """
    Functor fmap - apply f to the success value.

    Success(v) -> Success(f(v)); Failure(e) -> the same Failure, f never called.
    If f returns an awaitable it is awaited and its result wrapped.

    Example:
        fmap(Success(5), lambda x: x * 2)  # Success(10)
    """
    return drive(_fmap_steps(source, f), deferred=is_async_callable(f))


def bind[T, U, E](
    source: Source[T, E],
    f: Callable[[T], Source[U, E]],
    /,
) -> Eventually[U, E]:
    """
    Monadic bind (flatMap).

    - On Success: f(v) becomes the result (it may itself be a Failure)
    - On Failure: short-circuit, f never called

    f may return an Outcome, a kungfu Result, or an awaitable of either.
    """
    return drive(_bind_steps(source, f), deferred=is_async_callable(f))


def map_error[T, E, F](
    source: Source[T, E],
    f: Callable[[E], MaybeAwaitable[F]],
    /,
) -> Eventually[T, F]:
    """Map over the error. Dual of fmap: Success passes through, f never called."""
    return drive(_map_error_steps(source, f), deferred=is_async_callable(f))


def match[T, E, R](
    source: Source[T, E],
    *,
    on_success: Callable[[T], MaybeAwaitable[R]],
    on_failure: Callable[[E], MaybeAwaitable[R]],
) -> MaybeAwaitable[R]:
    """
    Reduce an outcome to a single value by calling exactly one handler.

    Returns R directly when source and handlers are sync, otherwise a
    coroutine resolving to R.

    Example:
        match(outcome, on_success=str, on_failure=lambda e: f"error: {e}")
    """
    deferred = is_async_callable(on_success) or is_async_callable(on_failure)
    return drive(
        _match_steps(source, on_success, on_failure),
        deferred=deferred,
        wrap=to_coroutine,
    )


__all__ = ("bind", "fmap", "map_error", "match")
