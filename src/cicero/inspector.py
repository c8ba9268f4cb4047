"""State of an interactive inspection session.

The inspector owns the text being inspected, its :class:`GraphemeIndex`, and
the optional character detail (properties plus font preview) of the selected
row. The font chosen in the detail is remembered across characters so
browsing a text keeps previewing it while it remains a candidate.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cicero.graphemes import Direction, GraphemeIndex
from cicero.preview.catalog import FontDescriptor
from cicero.preview.session import CharacterPreview
from cicero.settings import Settings
from cicero.ucd.properties import CharacterProperties


logger = logging.getLogger(__name__)

PAGE_STEP = 10


class Inspector:
    """Text input, grapheme navigation and the character detail panel."""

    def __init__(self, settings: Settings, text: str = "") -> None:
        self.settings = settings
        self.text = text
        self.graphemes = GraphemeIndex(text)
        self.detail: CharacterPreview | None = None
        self.selected_font_path: Path | None = None

    def __repr__(self) -> str:
        return f"Inspector(text={self.text!r}, detail={self.detail!r})"

    @property
    def detail_open(self) -> bool:
        return self.detail is not None

    def detail_properties(self) -> CharacterProperties | None:
        if self.detail is None:
            return None
        return CharacterProperties.of(self.detail.char)

    def set_text(self, text: str) -> None:
        self.text = text
        self.graphemes = GraphemeIndex(text)

    def type_text(self, text: str) -> None:
        self.set_text(self.text + text)

    def backspace(self) -> None:
        if self.text:
            self.set_text(self.text[:-1])

    def navigate(self, direction: Direction, steps: int = 1) -> None:
        self.graphemes.navigate(direction, steps)
        if self.detail is not None:
            self.open_detail()

    def select_next(self) -> None:
        self.navigate(Direction.NEXT)

    def select_previous(self) -> None:
        self.navigate(Direction.PREVIOUS)

    def page_down(self) -> None:
        self.navigate(Direction.NEXT, PAGE_STEP)

    def page_up(self) -> None:
        self.navigate(Direction.PREVIOUS, PAGE_STEP)

    def open_detail(self) -> CharacterPreview | None:
        """Show the detail of the selected code point.

        Separator rows and empty text leave the current detail untouched.
        """
        char = self.graphemes.selected_code_point()
        if char is None:
            return self.detail
        self.detail = CharacterPreview(char, self.settings, self.selected_font_path)
        logger.debug("Opened detail for %r with %d font(s)", char, len(self.detail.fonts))
        return self.detail

    def close_detail(self) -> None:
        self.detail = None

    def _remember_font(self, font: FontDescriptor | None) -> None:
        self.selected_font_path = font.path if font is not None else None

    def next_font(self) -> FontDescriptor | None:
        if self.detail is None:
            return None
        font = self.detail.select_next_font()
        self._remember_font(font)
        return font

    def previous_font(self) -> FontDescriptor | None:
        if self.detail is None:
            return None
        font = self.detail.select_previous_font()
        self._remember_font(font)
        return font


__all__ = ["PAGE_STEP", "Inspector"]
