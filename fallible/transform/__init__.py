from .effects import tap, tap_error
from .functor import bind, fmap, map_error, match

__all__ = (
    # Functor / monad
    "bind",
    "fmap",
    "map_error",
    "match",
    # Effects
    "tap",
    "tap_error",
)
