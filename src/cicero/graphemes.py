"""Cluster-aware row index over the inspected text.

Every code point of the text gets its own row; consecutive grapheme clusters
are divided by one separator row. For ``"e\\u0301fg"`` the rows are::

    e
    U+0301
    ----
    f
    ----
    g

Stepping forward from the last row of a cluster skips the separator and lands
on the first row of the next cluster; stepping backward from the first row of
a cluster does the same in reverse. Navigation clamps at both ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import unicodedata

from cicero.preview.cursor import SelectionCursor
from cicero.ucd.notation import code_point_description
from cicero.ucd.segmentation import split_graphemes


class Direction(Enum):
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True, slots=True)
class GraphemeRow:
    """One code point of the text, or a separator when ``code_point`` is ``None``."""

    code_point: str | None = None

    @property
    def is_separator(self) -> bool:
        return self.code_point is None

    def __str__(self) -> str:
        if self.code_point is None:
            return ""
        name = unicodedata.name(self.code_point, "")
        return f"{code_point_description(self.code_point)}  {self.code_point}  {name}".rstrip()


SEPARATOR = GraphemeRow()


def build_rows(
    text: str,
) -> tuple[tuple[GraphemeRow, ...], frozenset[int], frozenset[int]]:
    """Return ``(rows, cluster_starts, cluster_ends)`` for ``text``."""
    rows: list[GraphemeRow] = []
    starts: set[int] = set()
    ends: set[int] = set()
    for cluster in split_graphemes(text):
        if rows:
            rows.append(SEPARATOR)
        starts.add(len(rows))
        rows.extend(GraphemeRow(char) for char in cluster)
        ends.add(len(rows) - 1)
    return tuple(rows), frozenset(starts), frozenset(ends)


class GraphemeIndex:
    """Rows of a text plus the selected row.

    The index is rebuilt from scratch whenever the text changes; the first row
    is selected when the text is not empty.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.rows, self.cluster_starts, self.cluster_ends = build_rows(text)
        self._cursor: SelectionCursor[GraphemeRow] = SelectionCursor(self.rows, 0)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"GraphemeIndex(text={self.text!r}, selected={self.selected})"

    @property
    def selected(self) -> int | None:
        return self._cursor.index

    def selected_row(self) -> GraphemeRow | None:
        return self._cursor.current_item()

    def selected_code_point(self) -> str | None:
        row = self.selected_row()
        return row.code_point if row is not None else None

    def select_next(self) -> None:
        index = self._cursor.index
        if index is not None and index in self.cluster_ends:
            self._cursor.select_next()
        self._cursor.select_next()

    def select_previous(self) -> None:
        index = self._cursor.index
        if index is not None and index in self.cluster_starts:
            self._cursor.select_previous()
        self._cursor.select_previous()

    def select_next_n(self, count: int) -> None:
        for _ in range(count):
            self.select_next()

    def select_previous_n(self, count: int) -> None:
        for _ in range(count):
            self.select_previous()

    def navigate(self, direction: Direction, steps: int = 1) -> None:
        if direction is Direction.NEXT:
            self.select_next_n(steps)
        else:
            self.select_previous_n(steps)


__all__ = ["SEPARATOR", "Direction", "GraphemeIndex", "GraphemeRow", "build_rows"]
