"""Wren exception hierarchy.

Errors that flow through a chain are ordinary values handed to a
continuation, so most failures a caller sees are whatever a middleware
passed along. These types cover the engine's own failures.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when an app is composed with invalid arguments.

    Checked eagerly at registration time, e.g. an unsupported
    ``mount()`` path matcher.
    """
