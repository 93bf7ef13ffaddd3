"""Middleware helpers shared across the test modules."""

from collections.abc import Callable
from typing import Any


def mark(name: str) -> Callable[..., Any]:
    """Middleware that records *name* in ``context["trail"]`` and continues."""

    def middleware(context, buffer, next):
        context.setdefault("trail", []).append(name)
        next()

    middleware.__qualname__ = f"mark({name!r})"
    return middleware
