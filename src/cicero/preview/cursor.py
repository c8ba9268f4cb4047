"""Bidirectional selection cursor over an ordered sequence."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Generic, TypeVar


T = TypeVar("T")


class CursorState(Enum):
    EMPTY = "empty"
    UNSELECTED = "unselected"
    SELECTED = "selected"


class SelectionCursor(Generic[T]):
    """Track the selected item of an immutable sequence.

    The cursor is in one of three states: ``EMPTY`` when the sequence has no
    items, ``UNSELECTED`` when there are items but no current position, and
    ``SELECTED`` otherwise. Stepping from ``UNSELECTED`` enters the sequence
    from outside: ``select_next`` lands on the first item and
    ``select_previous`` on the last one. Stepping past either end is a no-op.
    """

    __slots__ = ("_index", "_items")

    def __init__(self, items: Sequence[T], initial_index: int | None = None) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._index: int | None = None
        if initial_index is not None and 0 <= initial_index < len(self._items):
            self._index = initial_index

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SelectionCursor(items={len(self._items)}, state={self.state.name}, index={self._index})"

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def state(self) -> CursorState:
        if not self._items:
            return CursorState.EMPTY
        if self._index is None:
            return CursorState.UNSELECTED
        return CursorState.SELECTED

    @property
    def index(self) -> int | None:
        return self._index

    def has_previous(self) -> bool:
        if not self._items:
            return False
        if self._index is None:
            return True
        return self._index > 0

    def select_previous(self) -> None:
        if not self.has_previous():
            return
        if self._index is None:
            self._index = len(self._items) - 1
        else:
            self._index -= 1

    def has_next(self) -> bool:
        if not self._items:
            return False
        if self._index is None:
            return True
        return self._index + 1 < len(self._items)

    def select_next(self) -> None:
        if not self.has_next():
            return
        if self._index is None:
            self._index = 0
        else:
            self._index += 1

    def current_item(self) -> T | None:
        if self._index is None:
            return None
        return self._items[self._index]

    def select_if_found(self, value: T) -> bool:
        """Select the first item equal to ``value``; leave the state alone otherwise."""
        for index, item in enumerate(self._items):
            if item == value:
                self._index = index
                return True
        return False


__all__ = ["CursorState", "SelectionCursor"]
