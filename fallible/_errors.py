from __future__ import annotations


class InvalidOutcomeAccessError(RuntimeError):
    """Read the value of a Failure or the error of a Success.

    Programmer error: `catching` never converts it into a Failure.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PendingReusedError(RuntimeError):
    """Pending outcome awaited more than once."""

    def __init__(self) -> None:
        super().__init__("Pending outcome has already been awaited")


__all__ = ("InvalidOutcomeAccessError", "PendingReusedError")
