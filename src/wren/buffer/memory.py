"""In-memory buffer — the default output sink for ``App.start()``.

Holds items as-is and only renders them when ``html()`` is read, so a
middleware can append markup strings, ``__html__`` objects or parsed
elements and let the caller decide what to do with the result.
"""

from typing import Any, Self

_MISSING: Any = object()


def render(item: Any) -> str:
    """Render a single buffer item to markup.

    Strings pass through. Objects exposing ``outer_html`` or the
    ``__html__()`` markup protocol render through those. Anything else
    falls back to ``str()``, which for parsed elements such as
    BeautifulSoup tags is their outer markup.
    """
    if isinstance(item, str):
        return item
    outer = getattr(item, "outer_html", None)
    if isinstance(outer, str):
        return outer
    to_html = getattr(item, "__html__", None)
    if callable(to_html):
        return str(to_html())
    return str(item)


class MemoryBuffer:
    """Ordered list of renderable items.

    Usage::

        buffer = MemoryBuffer()
        buffer.append("<h1>", "Title", "</h1>")
        buffer.html()           # "<h1>Title</h1>"
        buffer.html("replaced") # full replace
        buffer.empty().html()   # ""
    """

    __slots__ = ("_items",)

    def __init__(self, *items: Any) -> None:
        self._items: list[Any] = list(items)

    def __len__(self) -> int:
        return 1

    def __getitem__(self, index: int) -> list[Any]:
        if index not in (0, -1):
            raise IndexError("buffer index out of range")
        return self._items

    @property
    def items(self) -> tuple[Any, ...]:
        """Snapshot of the buffered items, in append order."""
        return tuple(self._items)

    def empty(self) -> Self:
        """Drop every buffered item."""
        self._items.clear()
        return self

    def append(self, *items: Any) -> Self:
        """Append one or more items, preserving call order."""
        self._items.extend(items)
        return self

    def html(self, value: Any = _MISSING) -> Any:
        """Return the rendered markup, or replace the contents with *value*."""
        if value is not _MISSING:
            return self.empty().append(value)
        return "".join(render(item) for item in self._items)

    def __str__(self) -> str:
        return self.html()

    def __repr__(self) -> str:
        return f"MemoryBuffer({self._items!r})"
