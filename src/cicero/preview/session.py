"""Font selection for the character shown in the detail panel."""

from __future__ import annotations

import logging
from pathlib import Path

from cicero.core.exceptions import RasterizationFailed
from cicero.settings import Settings
from cicero.ucd.notation import code_point_to_string

from .catalog import FontDescriptor, fonts_for
from .cursor import SelectionCursor
from .rasterizer import RenderedCharacter, RenderSize, render, render_tofu


logger = logging.getLogger(__name__)


class CharacterPreview:
    """Candidate fonts for one character and the currently selected one.

    The first candidate is selected initially; when ``selected_font_path`` names
    a font that is still a candidate it is selected instead, so a font chosen
    for a previous character survives navigation.
    """

    def __init__(
        self,
        char: str,
        settings: Settings,
        selected_font_path: str | Path | None = None,
    ) -> None:
        self.char = char
        self.fonts: list[FontDescriptor] = fonts_for(char, settings)
        self._cursor: SelectionCursor[FontDescriptor] = SelectionCursor(self.fonts, 0)
        if selected_font_path is not None:
            self._cursor.select_if_found(FontDescriptor.for_path(selected_font_path))

    def __repr__(self) -> str:
        return f"CharacterPreview({code_point_to_string(self.char)}, fonts={len(self.fonts)})"

    @property
    def cursor(self) -> SelectionCursor[FontDescriptor]:
        return self._cursor

    def current_font(self) -> FontDescriptor | None:
        return self._cursor.current_item()

    def has_previous_font(self) -> bool:
        return self._cursor.has_previous()

    def select_previous_font(self) -> FontDescriptor | None:
        self._cursor.select_previous()
        return self.current_font()

    def has_next_font(self) -> bool:
        return self._cursor.has_next()

    def select_next_font(self) -> FontDescriptor | None:
        self._cursor.select_next()
        return self.current_font()

    def render(self, size: RenderSize) -> RenderedCharacter:
        """Render with the current font; raises ``RasterizationFailed`` on failure."""
        font = self.current_font()
        if font is None:
            return render_tofu(size)
        return render(font, self.char, size)

    def render_or_placeholder(
        self,
        size: RenderSize,
        previous: RenderedCharacter | None = None,
    ) -> RenderedCharacter:
        """Render with the current font, keeping ``previous`` or tofu when that fails."""
        font = self.current_font()
        if font is None:
            return render_tofu(size)
        try:
            return render(font, self.char, size)
        except RasterizationFailed as exc:
            logger.debug("Preview of %s with %s failed: %s", self.char, font.path, exc)
            if previous is not None and previous.size == size:
                return previous
            return render_tofu(size)


__all__ = ["CharacterPreview"]
