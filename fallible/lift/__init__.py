"""
Lift helpers.

Supports the same import styles as the rest of the package:
    from fallible import lift as L   # Recommended
    from fallible import lift        # Explicit

Architecture:
- up       - values, kungfu Results, Optionals, awaitables into outcomes
- catching - exception-raising code into outcomes
- down     - outcomes back out into kungfu Results or plain values

Examples:
    from fallible import lift as L

    user = L.success(User(id=42))
    parsed = L.catching(lambda: int(raw), on_error=lambda e: f"bad int: {e}")
    value = await L.or_else(L.pending(fetch_user(42)), GUEST)
"""

from __future__ import annotations

from . import down, up
from .catching import Captured, catching, catching_async
from .down import or_else, to_result
from .up import failure, from_result, optional, pending, success

__all__ = (
    # Namespaces
    "down",
    "up",
    # Up
    "failure",
    "from_result",
    "optional",
    "pending",
    "success",
    # Catching
    "Captured",
    "catching",
    "catching_async",
    # Down
    "or_else",
    "to_result",
)
