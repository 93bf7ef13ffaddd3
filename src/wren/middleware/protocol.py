"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    def my_mw(context: Context, buffer: Buffer, next: Next) -> None: ...
    async def my_mw(context: Context, buffer: Buffer, next: Next) -> None: ...

No base class required. The chain checks nothing at registration time;
a malformed middleware fails when it is invoked.

``next`` hands control to the following step. Call it once, with no
argument on success, with an error to abort, or with ``END``/``SKIP``.
It returns an awaitable that resolves when the downstream step has
returned, so async middleware can ``await next()`` and sync middleware
can simply call it.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, Protocol, TypeAlias

from wren.buffer.protocol import Buffer

# Caller-supplied mutable state threaded through a run
Context: TypeAlias = MutableMapping[str, Any]

# The continuation handed to every middleware
Next: TypeAlias = Callable[..., Awaitable[None]]


class Middleware(Protocol):
    """Protocol for wren middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def greet(context: Context, buffer: Buffer, next: Next) -> None:
            buffer.append(f"Hello, {context['name']}")
            next()

        # Class middleware
        class Timer:
            async def __call__(self, context: Context, buffer: Buffer, next: Next) -> None:
                start = time.monotonic()
                await next()
                context["elapsed"] = time.monotonic() - start
    """

    def __call__(
        self, context: Context, buffer: Buffer, next: Next
    ) -> Awaitable[None] | None: ...
