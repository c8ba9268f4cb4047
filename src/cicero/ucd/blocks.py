"""Unicode block helpers backed by fontTools' UCD tables."""

from __future__ import annotations

from functools import lru_cache

from fontTools import unicodedata as ft_unicodedata
from fontTools.unicodedata import Blocks


_NO_BLOCK = "No_Block"


def normalize_block_name(name: str) -> str:
    """Return a lookup key that ignores case, spaces, hyphens and underscores."""
    return "".join(ch for ch in name.casefold() if ch not in {" ", "-", "_"})


def block_of(char: str | int) -> str | None:
    """Return the block name for a character, ``None`` outside any block."""
    character = char if isinstance(char, str) else chr(char)
    name = ft_unicodedata.block(character)
    if not name or name == _NO_BLOCK:
        return None
    return name


@lru_cache(maxsize=1)
def _block_index() -> dict[str, str]:
    return {
        normalize_block_name(name): name for name in Blocks.VALUES if name and name != _NO_BLOCK
    }


def block_names() -> tuple[str, ...]:
    """Return every known block name in code point order."""
    return tuple(_block_index().values())


def canonical_block_name(name: str) -> str | None:
    """Return the canonical spelling of ``name`` or ``None`` when unknown."""
    return _block_index().get(normalize_block_name(name))


__all__ = ["block_names", "block_of", "canonical_block_name", "normalize_block_name"]
