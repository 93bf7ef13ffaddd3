"""Buffer protocol — the output sink shared by every middleware in a run.

Structural, so a host object with the same four members (for example a
wrapped DOM element) can be passed to ``App.start()`` in place of the
reference ``MemoryBuffer``.
"""

from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Buffer(Protocol):
    """An ordered, appendable, serializable sequence of renderable items.

    ``len()`` always reports 1: a buffer presents itself as a single
    element, so hosts can treat it like a one-item selection.
    """

    def __len__(self) -> int: ...
    def empty(self) -> Self: ...
    def append(self, *items: Any) -> Self: ...
    def html(self, value: Any = ...) -> Any: ...
