"""
Fallible: success/failure outcomes with sync/async combinators.

Core building blocks for railway-style error handling: a two-state Outcome
plus map, bind, map_error, match, tap, tap_error, bind_if, ensure,
exception capture (catching) and scoped resources (using).

Architecture:
- Every combinator is one generator of steps run by a shared driver
- Sync in, sync out: an Outcome
- Anything pending (input, continuation, predicate, cleanup): a Pending
- Fluent methods on Outcome and Pending forward to the module functions
"""

# Core types
from ._types import Cleanup, Effect, Eventually, MaybeAwaitable, NoError, Predicate, Source
from .outcome import Failure, Outcome, Success
from .pending import Pending

# Internal helpers (for custom combinators)
from . import _helpers

# Transform
from .transform import bind, fmap, map_error, match, tap, tap_error

# Control flow
from .control import bind_if, ensure, using

# Lift helpers
from . import lift
from .lift import (
    Captured,
    catching,
    catching_async,
    failure,
    from_result,
    optional,
    or_else,
    pending,
    success,
    to_result,
)

# Errors
from ._errors import InvalidOutcomeAccessError, PendingReusedError

__all__ = (
    # Types
    "Cleanup",
    "Effect",
    "Eventually",
    "MaybeAwaitable",
    "NoError",
    "Predicate",
    "Source",
    "Outcome",
    "Success",
    "Failure",
    "Pending",
    # Internal helpers (for custom combinators)
    "_helpers",
    # Transform
    "bind",
    "fmap",
    "map_error",
    "match",
    "tap",
    "tap_error",
    # Control
    "bind_if",
    "ensure",
    "using",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "Captured",
    "catching",
    "catching_async",
    "failure",
    "from_result",
    "optional",
    "or_else",
    "pending",
    "success",
    "to_result",
    # Errors
    "InvalidOutcomeAccessError",
    "PendingReusedError",
)
