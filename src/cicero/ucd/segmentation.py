"""Extended grapheme cluster segmentation."""

from __future__ import annotations

import regex


_GRAPHEME_PATTERN = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters (UAX #29)."""
    return _GRAPHEME_PATTERN.findall(text)


__all__ = ["split_graphemes"]
