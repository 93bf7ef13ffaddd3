"""Control signals passed to a continuation to short-circuit a chain.

``END`` stops the chain it is raised in and every enclosing chain; only
``App.start()`` absorbs it. ``SKIP`` stops the chain it is raised in and
is absorbed right there, so the enclosing chain carries on::

    def stop(context, buffer, next):
        next(END)  # nothing after this runs

    def bail(context, buffer, next):
        next(SKIP)  # rest of this sub-app is skipped
"""

from typing import Final


class Signal:
    """A sentinel value understood by the chain compiler.

    Compared by identity. Always truthy so it halts a chain the same
    way an error does.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<Signal {self.name}>"


END: Final = Signal("END")
SKIP: Final = Signal("SKIP")
