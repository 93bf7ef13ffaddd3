"""Wren application class.

An App is an append-only list of entries (middlewares and nested apps)
compiled into a single chain every time it starts. Composition
operators only ever append, so registration order is execution order.
"""

import logging
import re
from collections.abc import Callable, Iterator, MutableMapping
from dataclasses import dataclass
from typing import Any, ClassVar, Self, TypeAlias

import anyio

from wren._internal.invoke import invoke
from wren.buffer.protocol import Buffer
from wren.chain import merge, task_group_var
from wren.config import AppConfig
from wren.entries import Entry, as_entry
from wren.errors import ConfigurationError
from wren.middleware.accessors import location
from wren.middleware.protocol import Context, Next
from wren.signals import END, SKIP, Signal

logger = logging.getLogger("wren.app")

# Path matcher accepted by mount(): a literal prefix or a compiled pattern
PathMatcher: TypeAlias = str | re.Pattern[str]

# Completion callback — receives (error, buffer)
Callback: TypeAlias = Callable[[object, Buffer], Any]


@dataclass(frozen=True, slots=True)
class Completion:
    """Outcome of one run: the unabsorbed error (or None) and the buffer."""

    error: object
    buffer: Buffer

    @property
    def ok(self) -> bool:
        return not self.error


def _condition_guard(condition: Callable[[Context], Any]) -> Callable[..., Any]:
    """Middleware running *condition* and turning its result into a signal."""

    async def guard(context: Context, buffer: Buffer, next: Next) -> None:
        result = await invoke(condition, context)
        if isinstance(result, BaseException):
            await next(result)
        else:
            await next(None if result else SKIP)

    guard.__qualname__ = f"useif({getattr(condition, '__qualname__', condition)!s})"
    return guard


async def _end(context: Context, buffer: Buffer, next: Next) -> None:
    await next(END)


def _path_condition(path: PathMatcher) -> Callable[[Context], bool | None]:
    """Condition testing ``context["location"]["pathname"]`` against *path*."""
    if isinstance(path, re.Pattern):
        matches: Callable[[str], object] = path.search
    elif isinstance(path, str):
        matches = lambda pathname: pathname.startswith(path)  # noqa: E731
    else:
        msg = f"mount() path must be a str prefix or a compiled re.Pattern, got {type(path).__name__}"
        raise ConfigurationError(msg)

    def condition(context: Context) -> bool | None:
        pathname = (context.get("location") or {}).get("pathname")
        if not pathname:
            return None
        return bool(matches(pathname))

    condition.__qualname__ = f"mount({getattr(path, 'pattern', path)!r})"
    return condition


class App:
    """The wren application.

    Usage::

        app = App()
        app.use(load_user)
        app.useif(lambda ctx: ctx.get("admin"), admin_panel)
        app.mount("/docs/", docs_app)
        app.use(not_found)

        result = await app.start({"location": {"pathname": "/docs/intro"}})
        print(result.buffer.html())

    Entries are index-addressed (``app[0]``, ``len(app)``) and never
    reordered. ``start()`` compiles whatever is registered at that moment.
    """

    END: ClassVar[Signal] = END
    SKIP: ClassVar[Signal] = SKIP

    __slots__ = ("_entries", "_mounts", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._entries: list[Entry] = []
        self._mounts: int = 0

    # -- Sequence access --

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"<App entries={len(self._entries)} mounts={self._mounts}>"

    @property
    def mounts(self) -> int:
        """Number of ``mount()`` groups installed."""
        return self._mounts

    # -- Composition --

    def use(self, *entries: Any) -> Self:
        """Append middlewares or apps to the end of the chain.

        Nothing is validated here; a malformed middleware fails when the
        chain reaches it.
        """
        self._entries.extend(as_entry(entry) for entry in entries)
        return self

    def useif(self, condition: Callable[[Context], Any], *entries: Any) -> Self:
        """Run *entries* when ``condition(context)`` is truthy, then stop.

        A satisfied block ends the whole run with ``END``: entries
        registered after it do not execute. When the condition is falsy
        the block is skipped and the chain carries on. A condition that
        returns an exception instance aborts the run with it.
        """
        block = App(self.config)
        block.use(_condition_guard(condition), *entries, _end)
        return self.use(block)

    def mount(self, path: PathMatcher, *entries: Any) -> Self:
        """Run *entries* when the context's location pathname matches *path*.

        A ``str`` is a prefix match; a compiled pattern is searched, so it
        honours its own anchors. The first mount also installs a location
        middleware built from this app's config. As with ``useif()``, the
        first matching mount ends the run.
        """
        condition = _path_condition(path)
        if not self._mounts:
            self.use(
                location(self.config.default_location, provider=self.config.location_provider)
            )
        self._mounts += 1
        return self.useif(condition, *entries)

    # -- Execution --

    async def start(
        self,
        context: Context | Callback | None = None,
        buffer: Buffer | Callback | None = None,
        callback: Callback | None = None,
    ) -> Completion:
        """Run the chain once and report the outcome.

        Context and buffer are optional: ``start(callback)`` and
        ``start(context, callback)`` work too. Missing ones are built by
        the config's factories. *callback* (sync or async) is called once
        with ``(error, buffer)``; ``END`` and ``SKIP`` are reported as
        success. Returns once the chain has finished and every step
        started during the run has returned.
        """
        if callback is None:
            if buffer is None and callable(context) and not isinstance(context, MutableMapping):
                context, callback = None, context
            elif callable(buffer):
                buffer, callback = None, buffer

        if context is None:
            context = self.config.context_factory()
        if buffer is None:
            buffer = self.config.buffer_factory()

        chain = merge(*self._entries)
        done = anyio.Event()
        outcome: list[object] = []

        def finish(err: object = None) -> None:
            if err is END:
                err = None
            if not outcome:
                outcome.append(err)
                done.set()

        async with anyio.create_task_group() as tg:
            token = task_group_var.set(tg)
            try:
                await invoke(chain, context, buffer, finish)
            finally:
                task_group_var.reset(token)
            await done.wait()

        error = outcome[0]
        if error:
            logger.debug("run finished with error: %r", error)

        if callback is not None:
            await invoke(callback, error, buffer)
        return Completion(error, buffer)

    def run(
        self,
        context: Context | Callback | None = None,
        buffer: Buffer | Callback | None = None,
        callback: Callback | None = None,
    ) -> Completion:
        """Blocking wrapper around ``start()`` for code outside an event loop."""
        return anyio.run(self.start, context, buffer, callback)
