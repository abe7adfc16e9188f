"""
Resource combinators
====================

using: scoped release around a fallible body, for a resource that was
already acquired into an outcome.

Release protocol, first match wins:
1. explicit `release=` callable, called with the resource
2. resource.close()
3. resource.aclose()

Whatever release returns is awaited if awaitable.
"""

from __future__ import annotations

import functools
import logging
import typing
from collections.abc import Callable

from .._helpers import as_outcome, is_async_callable, needs_await
from ..outcome import Outcome, Success
from ..pending import Steps, drive

if typing.TYPE_CHECKING:
    from .._types import Eventually, MaybeAwaitable, Source

log = logging.getLogger(__name__)

_RELEASE_METHODS: typing.Final = ("close", "aclose")


def _releaser[R](
    resource: R,
    release: Callable[[R], MaybeAwaitable[object]] | None,
) -> Callable[[], MaybeAwaitable[object]]:
    if release is not None:
        return functools.partial(release, resource)
    for name in _RELEASE_METHODS:
        method = getattr(resource, name, None)
        if callable(method):
            return method
    raise TypeError(
        f"{type(resource).__name__} has no close() or aclose(); pass release= explicitly"
    )


def _using_steps[R, U, E](
    source: Source[R, E],
    body: Callable[[R], Source[U, E]],
    release: Callable[[R], MaybeAwaitable[object]] | None,
) -> Steps[Outcome[U, E]]:
    outcome: Outcome[R, E] = as_outcome((yield source))
    match outcome:
        case Success(resource):
            dispose = _releaser(resource, release)
            try:
                return as_outcome((yield body(resource)))
            finally:
                released = dispose()
                if needs_await(released):
                    yield released
                log.debug("Released %s", type(resource).__name__)
        case _:
            return typing.cast(Outcome[U, E], outcome)


def using[R, U, E](
    source: Source[R, E],
    *,
    body: Callable[[R], Source[U, E]],
    release: Callable[[R], MaybeAwaitable[object]] | None = None,
) -> Eventually[U, E]:
    """
    Resource management: use -> release (always, exactly once).

    - Failure: body not called, nothing released, Failure returned unchanged
    - Success(r): body(r) runs; r is released after it returns a Success,
      a Failure, or raises. A raised exception propagates after release,
      it is NOT converted into a Failure (use catching for that).

    Release errors propagate too, with a body error as their __context__.
    Nested `using` calls release innermost first.

    NOTE: with a sync body and an async-only release (aclose), the result is
    a Pending even when the body raises. Neither the release nor the body
    error happens until it is awaited, so such a chain must be awaited.

    Example:
        using(open_connection(dsn), body=lambda conn: run_query(conn, sql))
    """
    deferred = is_async_callable(body) or is_async_callable(release)
    return drive(_using_steps(source, body, release), deferred=deferred)


__all__ = ("using",)
