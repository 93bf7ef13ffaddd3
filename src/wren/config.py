"""Application configuration.

AppConfig is a frozen dataclass shared by an App and every block it
creates, so nested useif/mount apps see the same defaults.
"""

from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from wren.buffer.memory import MemoryBuffer
from wren.buffer.protocol import Buffer

# A location is a browser-style mapping ("pathname", "search", "hash", ...)
# or a URL string that is parsed into one.
LocationLike: TypeAlias = Mapping[str, str] | str


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(
            default_location="https://example.com/docs/?page=2",
            location_provider=lambda: current_url(),
        )
    """

    # Location used when the context carries none and no provider answers
    default_location: LocationLike | None = None

    # Ambient navigation source, asked before the default. Returning None
    # means "no location available here".
    location_provider: Callable[[], LocationLike | None] | None = None

    # Builders for the context and buffer when start() is not given them
    context_factory: Callable[[], MutableMapping[str, Any]] = dict
    buffer_factory: Callable[[], Buffer] = MemoryBuffer
