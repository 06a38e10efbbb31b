"""
Skip sentinel for conditional blocks.

Pass ``skip()`` as an argument belonging to a ``{...}`` block to drop that
block (and its arguments) from the query.
"""

from typing import Any


class Skip:
    """Singleton marker; only identity comparison is ever applied to it."""

    _instance: "Skip | None" = None

    def __new__(cls) -> "Skip":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<SKIP>"

    def __copy__(self) -> "Skip":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Skip":
        return self

    def __reduce__(self) -> str:
        return "SKIP"


SKIP = Skip()


def skip() -> Skip:
    """Return the value that marks a conditional block for removal."""
    return SKIP


def is_skip(value: Any) -> bool:
    return value is SKIP
