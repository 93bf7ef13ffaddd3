"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(context: Context, buffer: Buffer, next: Next) -> None

Built-in middleware:
    location() -- Populate context["location"] from a provider or defaults
    parse_query() -- Copy location.search pairs into the context
    parse_hash() -- Copy hash-bang (#!...?key=value) pairs into the context
"""

from wren.middleware.accessors import (
    HashMiddleware,
    LocationMiddleware,
    QueryMiddleware,
    ensure_location,
    location,
    parse_hash,
    parse_query,
)
from wren.middleware.protocol import Context, Middleware, Next

__all__ = [
    "Context",
    "HashMiddleware",
    "LocationMiddleware",
    "Middleware",
    "Next",
    "QueryMiddleware",
    "ensure_location",
    "location",
    "parse_hash",
    "parse_query",
]
