"""Wren — transport-agnostic asynchronous middleware composition.

A chain of middlewares runs in order against a shared context and an
output buffer. ``END`` stops everything, ``SKIP`` stops the current
sub-app, any other value passed to ``next`` is an error.

Basic usage::

    from wren import App

    app = App()

    def hello(context, buffer, next):
        buffer.append(f"Hello, {context.get('name', 'World')}!")
        next()

    app.use(hello)
    result = app.run({"name": "wren"})
    result.buffer.html()  # "Hello, wren!"

Routing on a location::

    app.mount("/docs/", docs)
    app.mount(re.compile(r"^/api/v\\d+/"), api)
    await app.start({"location": {"pathname": "/docs/intro"}})
"""

__version__ = "0.1.0"
__all__ = [
    "END",
    "SKIP",
    "App",
    "AppConfig",
    "Buffer",
    "Completion",
    "ConfigurationError",
    "Context",
    "MemoryBuffer",
    "Middleware",
    "Next",
    "Signal",
    "WrenError",
    "location",
    "merge",
    "parse_hash",
    "parse_location",
    "parse_params",
    "parse_query",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "END": "wren.signals",
    "SKIP": "wren.signals",
    "Signal": "wren.signals",
    "App": "wren.app",
    "Completion": "wren.app",
    "AppConfig": "wren.config",
    "Buffer": "wren.buffer.protocol",
    "MemoryBuffer": "wren.buffer.memory",
    "ConfigurationError": "wren.errors",
    "WrenError": "wren.errors",
    "Context": "wren.middleware.protocol",
    "Middleware": "wren.middleware.protocol",
    "Next": "wren.middleware.protocol",
    "location": "wren.middleware.accessors",
    "parse_hash": "wren.middleware.accessors",
    "parse_query": "wren.middleware.accessors",
    "merge": "wren.chain",
    "parse_location": "wren.urls",
    "parse_params": "wren.params",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
