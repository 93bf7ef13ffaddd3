"""Location accessors: populate ``context["location"]`` and parse its params.

Wren is not tied to a browser or a server, so where a location comes
from is injected: a *provider* callable (the ambient navigation source,
if the host has one), then a *defaults* value, then an empty mapping.
A string from either source is parsed as a URL.

Usage::

    app.use(location("https://example.com/docs/?page=2#!?tab=api"))
    app.use(parse_query())   # context["page"] == "2"
    app.use(parse_hash())    # context["tab"] == "api"
"""

import re
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, TypeAlias

from wren.buffer.protocol import Buffer
from wren.config import LocationLike
from wren.middleware.protocol import Context, Next
from wren.params import parse_params
from wren.urls import parse_location

LocationProvider: TypeAlias = Callable[[], LocationLike | None]


def ensure_location(
    context: Context,
    defaults: LocationLike | None = None,
    provider: LocationProvider | None = None,
) -> Mapping[str, str]:
    """Set ``context["location"]`` if it is missing and return it.

    Any mapping already on the context is kept as is, including an empty
    one; a URL string there is parsed in place.
    """
    value = context.get("location")
    if value is None:
        value = provider() if provider is not None else None
        if value is None:
            value = defaults
        if value is None:
            value = {}
    if isinstance(value, str):
        value = parse_location(value)
    context["location"] = value
    return value


class LocationMiddleware:
    """Make sure the context carries a ``location`` before continuing."""

    __slots__ = ("defaults", "provider")

    def __init__(
        self,
        defaults: LocationLike | None = None,
        *,
        provider: LocationProvider | None = None,
    ) -> None:
        self.defaults = defaults
        self.provider = provider

    async def __call__(self, context: Context, buffer: Buffer, next: Next) -> None:
        ensure_location(context, self.defaults, self.provider)
        await next()


class _ParamsMiddleware:
    """Decode one part of the location into context keys, once per run.

    ``prefix`` must match the start of ``location[field]``; what follows
    the match is decoded. The decoded mapping is kept under ``marker`` so
    repeated instances in the same chain do nothing. Pairs are copied onto
    the context itself, or into ``context[root]`` when a root key is set.
    """

    __slots__ = ("defaults", "provider", "root")

    field: ClassVar[str]
    marker: ClassVar[str]
    prefix: ClassVar[re.Pattern[str]]

    def __init__(
        self,
        defaults: str | None = None,
        *,
        root: str | None = None,
        provider: LocationProvider | None = None,
    ) -> None:
        self.defaults = defaults
        self.root = root
        self.provider = provider

    def extract(self, raw: str) -> str | None:
        """Return the encoded pairs inside *raw*, or None if it has none."""
        match = self.prefix.match(raw)
        if match is None:
            return None
        return raw[match.end() :]

    async def __call__(self, context: Context, buffer: Buffer, next: Next) -> None:
        if self.marker not in context:
            location = ensure_location(context, provider=self.provider)
            raw = location.get(self.field) or self.defaults
            encoded = self.extract(raw) if raw else None
            if encoded is not None:
                params = parse_params(encoded)
                context[self.marker] = params
                target: Any = context.setdefault(self.root, {}) if self.root else context
                target.update(params)
        await next()


class QueryMiddleware(_ParamsMiddleware):
    """Parse ``location["search"]`` (``?key=value&...``)."""

    __slots__ = ()

    field = "search"
    marker = "locationSearch"
    # a lone "?" carries nothing
    prefix = re.compile(r"^\?(?=.)", re.DOTALL)


class HashMiddleware(_ParamsMiddleware):
    """Parse a hash-bang ``location["hash"]`` (``#!/page?key=value&...``)."""

    __slots__ = ()

    field = "hash"
    marker = "locationHash"
    # greedy: everything up to the last "?" is the hash-bang path
    prefix = re.compile(r"^#!.*\?")


def location(
    defaults: LocationLike | None = None, *, provider: LocationProvider | None = None
) -> LocationMiddleware:
    """Middleware that populates ``context["location"]``."""
    return LocationMiddleware(defaults, provider=provider)


def parse_query(
    defaults: str | None = None,
    *,
    root: str | None = None,
    provider: LocationProvider | None = None,
) -> QueryMiddleware:
    """Middleware that copies query-string pairs into the context.

    *defaults* is a ``?``-prefixed string used when the location has no
    search part.
    """
    return QueryMiddleware(defaults, root=root, provider=provider)


def parse_hash(
    defaults: str | None = None,
    *,
    root: str | None = None,
    provider: LocationProvider | None = None,
) -> HashMiddleware:
    """Middleware that copies hash-bang pairs into the context."""
    return HashMiddleware(defaults, root=root, provider=provider)
