"""
Core type definitions for fallible.

Aliases shared by every combinator module.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

if typing.TYPE_CHECKING:
    from kungfu import Result

    from .outcome import Outcome
    from .pending import Pending

# ============================================================================
# Type aliases
# ============================================================================

# Result of a function that may or may not suspend
type MaybeAwaitable[T] = T | Awaitable[T]

# Predicate = function that tests a value (sync or async)
type Predicate[T] = Callable[[T], MaybeAwaitable[bool]]

# Effect = side effect that observes a value, its return is ignored
type Effect[T] = Callable[[T], MaybeAwaitable[object]]

# Cleanup = zero-arg action run after an operation, whatever its outcome
type Cleanup = Callable[[], MaybeAwaitable[object]]

# Source = anything that is, or eventually yields, an outcome
type Source[T, E] = Outcome[T, E] | Result[T, E] | Awaitable[Outcome[T, E]] | Awaitable[Result[T, E]]

# Eventually = what a combinator hands back: value now, or value later
type Eventually[T, E] = Outcome[T, E] | Pending[T, E]

# NoError = "never fails" semantic
type NoError = typing.Never

__all__ = (
    "Cleanup",
    "Effect",
    "Eventually",
    "MaybeAwaitable",
    "NoError",
    "Predicate",
    "Source",
)
