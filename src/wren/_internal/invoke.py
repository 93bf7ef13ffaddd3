"""Invoke helpers — call sync or async callables uniformly.

Middlewares, conditions and completion callbacks can be ``def`` or
``async def``. Any code that calls a user-provided callable must handle
both cases. This module keeps the sync/async check in exactly one place.

Usage::

    from wren._internal.invoke import invoke

    result = await invoke(condition, context)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync — returns immediately
        def greet(context, buffer, next):
            buffer.append("hello")
            next()

        # async — returns coroutine, awaited automatically
        async def greet(context, buffer, next):
            buffer.append(await fetch_greeting())
            await next()
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
