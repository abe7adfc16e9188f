"""
Pending - outcome that is not there yet
=======================================

Bridging layer between "value now" and "value later".

Every combinator is written once, as a generator of steps. Anything a step
needs resolved (its input, a continuation's return, a predicate verdict,
a cleanup's return) is yielded to a driver:

- non-awaitables and outcomes are sent straight back;
- the first real awaitable moves the rest of the generator into a Pending,
  which resumes it when awaited.

Exceptions raised by an awaitable are thrown back into the generator at the
same yield, so try/except/finally inside a combinator reads and behaves the
same whichever side of the bridge it ends up on.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Awaitable, Callable, Coroutine, Generator

from kungfu import LazyCoroResult, Result

from ._chain import Chain
from ._errors import PendingReusedError
from ._helpers import as_outcome, needs_await

if typing.TYPE_CHECKING:
    from .outcome import Outcome

type Steps[R] = Generator[object, object, R]

_NOTHING: typing.Final = object()


class Pending[T, E](Chain[T, E]):
    """
    Deferred outcome. Awaiting it yields Outcome[T, E].

    Single-shot: the underlying computation runs on the first await,
    a second await raises PendingReusedError. Chain methods on a Pending
    return new Pendings; nothing runs until the last one is awaited.
    """

    __slots__ = ("_factory", "_awaited")

    def __init__(
        self,
        factory: Callable[[], Coroutine[typing.Any, typing.Any, Outcome[T, E]]],
        /,
    ) -> None:
        """Create Pending from a fn returning coroutine."""
        self._factory = factory
        self._awaited = False

    @staticmethod
    def of[V, Err](
        awaitable: Awaitable[Outcome[V, Err]] | Awaitable[Result[V, Err]],
    ) -> Pending[V, Err]:
        """Wrap an awaitable of Outcome (or kungfu Result)."""

        async def run() -> Outcome[V, Err]:
            return as_outcome(await awaitable)

        return Pending(run)

    @property
    def awaited(self) -> bool:
        """Whether the computation has been started."""
        return self._awaited

    def to_lazy(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult (inherits single-shot semantics)."""

        async def run() -> Result[T, E]:
            outcome = await self
            return outcome.to_result()

        return LazyCoroResult(run)

    # Protocol methods

    def __await__(self) -> typing.Generator[typing.Any, None, Outcome[T, E]]:
        if self._awaited:
            raise PendingReusedError()
        self._awaited = True
        return self._factory().__await__()

    def __repr__(self) -> str:
        state = "awaited" if self._awaited else "not awaited"
        return f"<Pending {state}>"


# ============================================================================
# Driver
# ============================================================================


def drive[R](
    steps: Steps[R],
    *,
    deferred: bool = False,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, R]]], typing.Any] = Pending,
) -> typing.Any:
    """
    Run steps synchronously until the first awaitable, then hand off.

    deferred: start in async mode right away (continuation known to be async).
    wrap: builds the deferred value from a coroutine fn. Pending for
          outcome-producing combinators, a bare coroutine for reducers (match).
    """
    if deferred:
        return wrap(functools.partial(_drive_async, steps, _NOTHING))

    sent: object = None
    while True:
        try:
            yielded = steps.send(sent)
        except StopIteration as stop:
            return stop.value
        if needs_await(yielded):
            return wrap(functools.partial(_drive_async, steps, yielded))
        sent = yielded


async def _drive_async[R](steps: Steps[R], awaitable: object) -> R:
    sent: object = None
    raised: BaseException | None = None
    if awaitable is not _NOTHING:
        sent, raised = await _settle(typing.cast(Awaitable[object], awaitable))

    while True:
        try:
            if raised is not None:
                yielded = steps.throw(raised)
            else:
                yielded = steps.send(sent)
        except StopIteration as stop:
            return stop.value
        if needs_await(yielded):
            sent, raised = await _settle(typing.cast(Awaitable[object], yielded))
        else:
            sent, raised = yielded, None


def to_coroutine[R](
    fn: Callable[[], Coroutine[typing.Any, typing.Any, R]],
) -> Coroutine[typing.Any, typing.Any, R]:
    """Wrap for reducers: the deferred value is a plain coroutine, not a Pending."""
    return fn()


async def _settle(awaitable: Awaitable[object]) -> tuple[object, BaseException | None]:
    # Everything goes back into the steps; whatever they don't handle re-raises from there.
    try:
        return await awaitable, None
    except BaseException as exc:
        return None, exc


__all__ = ("Pending", "Steps", "drive", "to_coroutine")
