from .branch import bind_if
from .guard import ensure
from .resource import using

__all__ = (
    # Branch
    "bind_if",
    # Guard
    "ensure",
    # Resource
    "using",
)
