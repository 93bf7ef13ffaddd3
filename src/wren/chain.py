"""Chain compiler — turns an ordered list of entries into one middleware.

``merge(a, b, c)`` returns a middleware that runs ``a``, then ``b``, then
``c``, each starting only after the previous one called its ``next``.
Nested apps are compiled from their entries when the chain reaches them,
so from the outside an app behaves like a single middleware.

Signal handling at a chain boundary:

- a truthy error halts the chain and is handed to the caller unchanged
- ``END`` halts the chain and is handed to the caller, which halts too
- ``SKIP`` halts the chain and is reported to the caller as success

Each step is started in the run's task group by the previous step's
continuation. A middleware can ``await next()`` to wait until the
downstream step has returned, or call it and return.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Generator, Sequence
from contextvars import ContextVar
from typing import Any

import anyio
from anyio.abc import TaskGroup

from wren._internal.invoke import invoke
from wren.buffer.protocol import Buffer
from wren.entries import Composite, Entry, Leaf, as_entry
from wren.errors import WrenError
from wren.middleware.protocol import Context
from wren.signals import SKIP

logger = logging.getLogger("wren.chain")

task_group_var: ContextVar[TaskGroup] = ContextVar("wren_task_group")
"""Task group of the current run. Set by ``App.start()``."""


class Handoff:
    """Awaitable returned by ``next()``.

    Resolves once the step it started has returned. Awaiting it is
    optional; the step runs either way.
    """

    __slots__ = ("_finished",)

    def __init__(self, finished: anyio.Event | None = None) -> None:
        self._finished = finished

    def __await__(self) -> Generator[Any, None, None]:
        if self._finished is not None:
            yield from self._finished.wait().__await__()


def _handoff(result: object) -> Awaitable[None]:
    if inspect.isawaitable(result):
        return result
    return Handoff()


def _describe(entry: Entry) -> str:
    if isinstance(entry, Composite):
        return repr(entry.app)
    mw = entry.middleware
    return getattr(mw, "__qualname__", None) or type(mw).__qualname__


class Continuation:
    """The ``next`` callable handed to one middleware invocation.

    Single-use. A second call is logged and ignored so that a middleware
    can never run the rest of its chain twice.
    """

    __slots__ = ("_advance", "called", "label")

    def __init__(self, advance: Callable[[object], Awaitable[None]], label: str) -> None:
        self._advance = advance
        self.label = label
        self.called = False

    def __call__(self, err: object = None) -> Awaitable[None]:
        if self.called:
            logger.warning("%s called next() more than once; ignoring", self.label)
            return Handoff()
        self.called = True
        return self._advance(err)

    def __repr__(self) -> str:
        return f"<Continuation of {self.label}>"


class _ChainRun:
    """Cursor over one invocation of a merged chain."""

    __slots__ = ("_buffer", "_context", "_entries", "_index", "_next", "_task_group")

    def __init__(
        self,
        entries: Sequence[Entry],
        context: Context,
        buffer: Buffer,
        next: Callable[..., Any],
        task_group: TaskGroup,
    ) -> None:
        self._entries = entries
        self._context = context
        self._buffer = buffer
        self._next = next
        self._task_group = task_group
        self._index = 0

    def advance(self, err: object = None) -> Awaitable[None]:
        if err or self._index >= len(self._entries):
            if err is SKIP:
                err = None
            logger.debug("chain of %d finished at step %d: %r", len(self._entries), self._index, err)
            return _handoff(self._next(err))

        entry = self._entries[self._index]
        self._index += 1
        finished = anyio.Event()
        self._task_group.start_soon(self._step, entry, finished)
        return Handoff(finished)

    async def _step(self, entry: Entry, finished: anyio.Event) -> None:
        # The step may have been started from a task outside the run.
        task_group_var.set(self._task_group)
        label = _describe(entry)
        next = Continuation(self.advance, label)
        logger.debug("step %d/%d: %s", self._index, len(self._entries), label)
        try:
            await invoke(compile_entry(entry), self._context, self._buffer, next)
        except Exception as exc:
            if next.called:
                # Control already moved on; nothing left to hand the error to.
                logger.exception("%s raised after calling next()", label)
            else:
                await next(exc)
        finally:
            finished.set()


def compile_entry(entry: Entry) -> Any:
    """Return the middleware for *entry*, compiling nested apps recursively."""
    match entry:
        case Composite(app=app):
            return merge(*app)
        case Leaf(middleware=middleware):
            return middleware
    raise TypeError(f"not a chain entry: {entry!r}")


def merge(*entries: Any) -> Callable[[Context, Buffer, Callable[..., Any]], Awaitable[None]]:
    """Merge middlewares and apps into a single middleware.

    The entry list is fixed here; apps among them are compiled from
    whatever entries they hold when the chain reaches them::

        combined = merge(authenticate, load_profile, render_page)
        app.use(combined)

    The merged middleware must be invoked inside a run (``App.start()``),
    whose task group its steps are started in.
    """
    compiled = tuple(as_entry(entry) for entry in entries)

    def merged(context: Context, buffer: Buffer, next: Callable[..., Any]) -> Awaitable[None]:
        try:
            task_group = task_group_var.get()
        except LookupError:
            msg = "merged middleware invoked outside App.start()"
            raise WrenError(msg) from None
        return _ChainRun(compiled, context, buffer, next, task_group).advance()

    return merged
