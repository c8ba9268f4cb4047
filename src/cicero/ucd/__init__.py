"""Wrappers around the Unicode Character Database.

Lookups that the standard :mod:`unicodedata` module does not cover (planes,
blocks, scripts) are answered from fontTools' bundled UCD tables; grapheme
segmentation comes from the ``regex`` module.
"""

from __future__ import annotations

from .blocks import block_names, block_of, canonical_block_name, normalize_block_name
from .notation import (
    CODE_POINT_STR_PADDING,
    MAX_CODE_POINT,
    characters_from_code_points,
    code_point_description,
    code_point_to_string,
    parse_character,
    string_to_code_point,
)
from .plane import PLANE_COUNT, PLANE_SIZE, CodePointSpan, Plane, plane_names
from .properties import CharacterProperties, Decomposition, GraphemeProperties
from .segmentation import split_graphemes


__all__ = [
    "CODE_POINT_STR_PADDING",
    "MAX_CODE_POINT",
    "PLANE_COUNT",
    "PLANE_SIZE",
    "CharacterProperties",
    "CodePointSpan",
    "Decomposition",
    "GraphemeProperties",
    "Plane",
    "block_names",
    "block_of",
    "canonical_block_name",
    "characters_from_code_points",
    "code_point_description",
    "code_point_to_string",
    "normalize_block_name",
    "parse_character",
    "plane_names",
    "split_graphemes",
    "string_to_code_point",
]
