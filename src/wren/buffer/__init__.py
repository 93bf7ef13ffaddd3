"""Buffers — output sinks written to by middleware.

Buffer -- Protocol every sink satisfies
MemoryBuffer -- Reference in-memory implementation (the default)
SoupBuffer -- BeautifulSoup element wrapper (``wren.buffer.soup``, requires beautifulsoup4)
"""

from wren.buffer.memory import MemoryBuffer, render
from wren.buffer.protocol import Buffer

__all__ = [
    "Buffer",
    "MemoryBuffer",
    "render",
]
