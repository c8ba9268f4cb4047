"""Font discovery, font selection and glyph rasterization."""

from __future__ import annotations

from .catalog import (
    DirectoryScanSource,
    FontconfigSource,
    FontDescriptor,
    FontSource,
    filter_preview_fonts,
    fonts_for,
    select_font_source,
)
from .cursor import CursorState, SelectionCursor
from .rasterizer import (
    RenderedCharacter,
    RenderSize,
    centering_padding,
    render,
    render_or_tofu,
    render_tofu,
)
from .session import CharacterPreview


__all__ = [
    "CharacterPreview",
    "CursorState",
    "DirectoryScanSource",
    "FontDescriptor",
    "FontSource",
    "FontconfigSource",
    "RenderSize",
    "RenderedCharacter",
    "SelectionCursor",
    "centering_padding",
    "filter_preview_fonts",
    "fonts_for",
    "render",
    "render_or_tofu",
    "render_tofu",
    "select_font_source",
]
