"""
Exception-capturing adapters.

The only place where raised exceptions become Failures. Two forms:

- catching(op, on_error=f): Failure(f(exc))
- catching(op): exception-first, Failure(exc) with the exception object
  itself, so a later tap_error can inspect its concrete type before a
  map_error narrows it to a domain error.

Both take an optional `cleanup` clause run exactly once after the operation,
whether it returned or raised, before the outcome is handed back.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Awaitable, Callable

from .._errors import InvalidOutcomeAccessError
from .._helpers import is_async_callable, needs_await
from ..outcome import Failure, Outcome, Success
from ..pending import Pending, Steps, drive

if typing.TYPE_CHECKING:
    from .._types import Cleanup, Eventually, MaybeAwaitable

log = logging.getLogger(__name__)

# CancelledError is a BaseException: listed so cancellation surfaces as a Failure
_CAPTURED: typing.Final = (Exception, asyncio.CancelledError)

type Captured = Exception | asyncio.CancelledError


def _catching_steps[T, E](
    operation: Callable[[], MaybeAwaitable[T]],
    on_error: Callable[[Captured], MaybeAwaitable[E]] | None,
    cleanup: Cleanup | None,
) -> Steps[Outcome[T, E]]:
    try:
        try:
            value = typing.cast(T, (yield operation()))
        except InvalidOutcomeAccessError:
            raise
        except _CAPTURED as exc:
            log.debug("Captured %s: %s", type(exc).__name__, exc)
            if on_error is None:
                return Failure(typing.cast(E, exc))
            return Failure(typing.cast(E, (yield on_error(exc))))
        return Success(value)
    finally:
        if cleanup is not None:
            cleaned = cleanup()
            if needs_await(cleaned):
                yield cleaned


@typing.overload
def catching[T](
    operation: Callable[[], MaybeAwaitable[T]],
    *,
    on_error: None = None,
    cleanup: Cleanup | None = None,
) -> Eventually[T, Captured]: ...


@typing.overload
def catching[T, E](
    operation: Callable[[], MaybeAwaitable[T]],
    *,
    on_error: Callable[[Captured], MaybeAwaitable[E]],
    cleanup: Cleanup | None = None,
) -> Eventually[T, E]: ...


def catching[T, E](
    operation: Callable[[], MaybeAwaitable[T]],
    *,
    on_error: Callable[[Captured], MaybeAwaitable[E]] | None = None,
    cleanup: Cleanup | None = None,
) -> Eventually[T, E] | Eventually[T, Captured]:
    """
    Execute thunk, catch exceptions and convert to Failure.

    Runs eagerly. If the thunk (or cleanup) turns out to return an awaitable,
    the rest is deferred into a Pending that awaits it, captures what it
    raises, and runs cleanup before resolving.

    Example:
        catching(lambda: json.loads(raw), on_error=lambda e: ParseError(str(e)))

        catching(lambda: read_config(path), cleanup=lock.release)
            .tap_error(log_exception)
            .map_error(to_config_error)

    NOTE: InvalidOutcomeAccessError is never captured; it always propagates.
    Errors raised by on_error or cleanup propagate as well.
    """
    deferred = is_async_callable(operation) or is_async_callable(cleanup)
    return drive(_catching_steps(operation, on_error, cleanup), deferred=deferred)


@typing.overload
def catching_async[T](
    operation: Callable[[], Awaitable[T]],
    *,
    on_error: None = None,
    cleanup: Cleanup | None = None,
) -> Pending[T, Captured]: ...


@typing.overload
def catching_async[T, E](
    operation: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Captured], MaybeAwaitable[E]],
    cleanup: Cleanup | None = None,
) -> Pending[T, E]: ...


def catching_async[T, E](
    operation: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Captured], MaybeAwaitable[E]] | None = None,
    cleanup: Cleanup | None = None,
) -> Pending[T, E] | Pending[T, Captured]:
    """
    Async version of catching(): always lazy, always a Pending.

    The thunk is not called until the Pending is awaited.

    Example:
        catching_async(
            lambda: client.get(url),
            on_error=lambda e: FetchError(str(e)),
            cleanup=client.aclose,
        )
    """
    return drive(_catching_steps(operation, on_error, cleanup), deferred=True)


__all__ = ("Captured", "catching", "catching_async")
