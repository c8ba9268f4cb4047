"""Scoped access to parsed font faces."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fontTools.ttLib import TTFont


FULL_NAME_ID = 4
POSTSCRIPT_NAME_ID = 6


@contextmanager
def open_face(path: str | Path) -> Iterator[TTFont]:
    """Parse the first face of ``path`` and close it when the block exits.

    Collections (``.ttc``/``.otc``) open their first face. Parse errors from
    fontTools propagate to the caller.
    """
    font = TTFont(str(path), fontNumber=0, lazy=True)
    try:
        yield font
    finally:
        font.close()


def has_glyph(font: TTFont, code_point: int) -> bool:
    """Return True when ``code_point`` maps to a glyph other than ``.notdef``."""
    cmap = font.getBestCmap() or {}
    glyph_name = cmap.get(code_point)
    if glyph_name is None:
        return False
    return font.getGlyphID(glyph_name) != 0


def face_names(font: TTFont, fallback: str) -> tuple[str, str]:
    """Return ``(family_name, full_name)`` for a parsed face.

    The full name falls back to the PostScript name, then to the family name.
    """
    if "name" not in font:
        return fallback, fallback
    table = font["name"]
    family = table.getBestFamilyName() or fallback
    full_name = (
        table.getDebugName(FULL_NAME_ID) or table.getDebugName(POSTSCRIPT_NAME_ID) or family
    )
    return family, full_name


__all__ = ["face_names", "has_glyph", "open_face"]
