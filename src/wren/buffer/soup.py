"""BeautifulSoup-backed buffer (``pip install wren[soup]``).

Writes straight into a parsed element tree instead of collecting items,
so the result of a run can be queried and edited like any other soup::

    from wren.buffer.soup import SoupBuffer

    canvas = SoupBuffer("<div id='canvas'></div>")
    await app.start({}, canvas)
    canvas.element.find_all("a")
"""

import copy
from typing import Any, Self

from bs4 import BeautifulSoup, NavigableString, Tag

from wren.buffer.memory import render

_MISSING: Any = object()


class SoupBuffer:
    """Buffer whose contents are the children of a BeautifulSoup element.

    Strings and markup-protocol objects are parsed with *features* and
    their nodes appended. Tags and strings from another tree are copied
    so the source tree is left untouched.
    """

    __slots__ = ("_features", "element")

    def __init__(self, markup: str = "<div></div>", features: str = "html.parser") -> None:
        soup = BeautifulSoup(markup, features)
        root = soup.find()
        self.element: Tag = root if isinstance(root, Tag) else soup
        self._features = features

    def __len__(self) -> int:
        return 1

    def empty(self) -> Self:
        """Remove every child of the wrapped element."""
        self.element.clear()
        return self

    def append(self, *items: Any) -> Self:
        """Append items as child nodes, preserving call order."""
        for item in items:
            for node in self._nodes(item):
                self.element.append(node)
        return self

    def html(self, value: Any = _MISSING) -> Any:
        """Return the element's inner markup, or replace it with *value*."""
        if value is not _MISSING:
            return self.empty().append(value)
        return self.element.decode_contents()

    def _nodes(self, item: Any) -> list[Any]:
        if isinstance(item, (Tag, NavigableString)):
            return [copy.copy(item)]
        fragment = BeautifulSoup(render(item), self._features)
        return list(fragment.contents)

    def __str__(self) -> str:
        return self.html()

    def __repr__(self) -> str:
        return f"SoupBuffer({str(self.element)!r})"
