"""
Outcome - two-state success/failure value
=========================================

Outcome[T, E] is exactly one of:
- Success(value: T)
- Failure(error: E)

Instances are immutable. Every combinator returns a new Outcome or hands
back the very same instance when it has nothing to change (Failure
identity survives map/bind/tap, Success identity survives map_error/tap_error).
"""

from __future__ import annotations

import typing
from typing import assert_never

from kungfu import Error, Ok, Result

from ._chain import Chain
from ._errors import InvalidOutcomeAccessError


class Outcome[T, E](Chain[T, E]):
    """
    Base of Success and Failure.

    Not instantiated directly: use `Outcome.success`, `Outcome.failure`
    or the variant classes themselves.
    """

    __slots__ = ()

    def __new__(cls, *args: object, **kwargs: object) -> typing.Self:
        if cls is Outcome:
            raise TypeError("Outcome cannot be instantiated directly, use Success or Failure")
        return super().__new__(cls)

    # Construction

    @staticmethod
    def success[V](value: V) -> Outcome[V, typing.Never]:
        """Successful outcome carrying value."""
        return Success(value)

    @staticmethod
    def failure[Err](error: Err) -> Outcome[typing.Never, Err]:
        """Failed outcome carrying error."""
        return Failure(error)

    @staticmethod
    def from_result[V, Err](result: Result[V, Err]) -> Outcome[V, Err]:
        """Convert kungfu Ok/Error into Success/Failure."""
        match result:
            case Ok(value):
                return Success(value)
            case Error(err):
                return Failure(err)
            case _:
                raise TypeError(f"Expected kungfu Ok or Error, got {type(result).__name__}")

    # Accessors

    @property
    def is_success(self) -> bool:
        raise NotImplementedError

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        raise NotImplementedError

    @property
    def error(self) -> E:
        raise NotImplementedError

    def to_result(self) -> Result[T, E]:
        """Convert to kungfu Ok/Error."""
        match self:
            case Success(value):
                return Ok(value)
            case Failure(err):
                return Error(err)
            case _ as unreachable:
                assert_never(unreachable)

    # Immutability

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Protocol methods

    def __await__(self) -> typing.Generator[typing.Any, None, Outcome[T, E]]:
        """An outcome is already resolved: awaiting it returns the same instance."""
        return _resolved(self).__await__()


@typing.final
class Success[T](Outcome[T, typing.Never]):
    """Success variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        object.__setattr__(self, "_value", value)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def value(self) -> T:
        return self._value

    @property
    def error(self) -> typing.Never:
        raise InvalidOutcomeAccessError("Outcome is successful")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Success):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Success, self._value))

    def __reduce__(self) -> tuple[type[Success[T]], tuple[T]]:
        return (Success, (self._value,))

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@typing.final
class Failure[E](Outcome[typing.Never, E]):
    """Failure variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E, /) -> None:
        object.__setattr__(self, "_error", error)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> typing.Never:
        raise InvalidOutcomeAccessError("Outcome is not successful")

    @property
    def error(self) -> E:
        return self._error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((Failure, self._error))

    def __reduce__(self) -> tuple[type[Failure[E]], tuple[E]]:
        return (Failure, (self._error,))

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


async def _resolved[T, E](outcome: Outcome[T, E]) -> Outcome[T, E]:
    return outcome


__all__ = ("Failure", "Outcome", "Success")
