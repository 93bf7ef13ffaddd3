"""Chain entries — what an App holds.

Every registered entry is either a single middleware (``Leaf``) or a
nested app whose own entries run as one step (``Composite``). The chain
compiler turns both into a middleware with one recursive operation.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from wren.app import App


@dataclass(frozen=True, slots=True)
class Leaf:
    """A single middleware. Not validated until it is invoked."""

    middleware: Any


@dataclass(frozen=True, slots=True)
class Composite:
    """A nested app, compiled from its entries when the chain reaches it."""

    app: "App"


Entry: TypeAlias = Leaf | Composite


def as_entry(value: Any) -> Entry:
    """Wrap a middleware, app or existing entry as an ``Entry``."""
    from wren.app import App

    if isinstance(value, (Leaf, Composite)):
        return value
    if isinstance(value, App):
        return Composite(value)
    return Leaf(value)
