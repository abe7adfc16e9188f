"""Fluent chaining shared by Outcome and Pending.

Each method forwards to the module-level combinator of the same name with
`self` as the source, so `outcome.map(f)` and `fmap(outcome, f)` are the same
computation. Imports are local: the combinator modules depend on Outcome."""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from ._types import Effect, Eventually, MaybeAwaitable, Predicate, Source


class Chain[T, E]:
    """Fluent combinator methods. Sync in, sync out; anything async in, Pending out."""

    __slots__ = ()

    # Functor / monad

    def map[U](self, f: Callable[[T], MaybeAwaitable[U]], /) -> Eventually[U, E]:
        """Apply f to the success value. Failure passes through, f not called."""
        from .transform.functor import fmap

        return fmap(self, f)

    def bind[U](self, f: Callable[[T], Source[U, E]], /) -> Eventually[U, E]:
        """Monadic bind (>>=). Short-circuits on Failure."""
        from .transform.functor import bind

        return bind(self, f)

    def map_error[F](self, f: Callable[[E], MaybeAwaitable[F]], /) -> Eventually[T, F]:
        """Apply f to the error. Success passes through, f not called."""
        from .transform.functor import map_error

        return map_error(self, f)

    def match[R](
        self,
        on_success: Callable[[T], MaybeAwaitable[R]],
        on_failure: Callable[[E], MaybeAwaitable[R]],
        /,
    ) -> MaybeAwaitable[R]:
        """Reduce to a single value by calling exactly one handler."""
        from .transform.functor import match

        return match(self, on_success=on_success, on_failure=on_failure)

    # Effects

    def tap(self, effect: Effect[T], /) -> Eventually[T, E]:
        """Observe the success value, return the same outcome."""
        from .transform.effects import tap

        return tap(self, effect=effect)

    def tap_error(self, effect: Effect[E], /) -> Eventually[T, E]:
        """Observe the error, return the same outcome."""
        from .transform.effects import tap_error

        return tap_error(self, effect=effect)

    # Control

    def bind_if(
        self,
        predicate: Predicate[T],
        then: Callable[[T], Source[T, E]],
        /,
    ) -> Eventually[T, E]:
        """Apply `then` only when predicate is FALSE. See control.branch.bind_if."""
        from .control.branch import bind_if

        return bind_if(self, predicate=predicate, then=then)

    def ensure(
        self,
        predicate: Predicate[T],
        error: Callable[[T], MaybeAwaitable[E]],
        /,
    ) -> Eventually[T, E]:
        """Turn Success into Failure if value FAILS validation check."""
        from .control.guard import ensure

        return ensure(self, predicate=predicate, error=error)

    def using[U](
        self,
        body: Callable[[T], Source[U, E]],
        /,
        *,
        release: Callable[[T], MaybeAwaitable[object]] | None = None,
    ) -> Eventually[U, E]:
        """Run body with the success value as a resource, release it afterwards."""
        from .control.resource import using

        return using(self, body=body, release=release)


__all__ = ("Chain",)
