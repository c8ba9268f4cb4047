"""``U+XXXX`` notation helpers."""

from __future__ import annotations

import string


MAX_CODE_POINT = 0x10FFFF
CODE_POINT_STR_PADDING = 8


def code_point_to_string(char: str | int) -> str:
    """Return the ``U+XXXX`` notation for a character or code point."""
    value = char if isinstance(char, int) else ord(char)
    return f"U+{value:04X}"


def code_point_description(char: str | int) -> str:
    """Return ``U+XXXX`` right-aligned so list rows line up."""
    return code_point_to_string(char).rjust(CODE_POINT_STR_PADDING)


def string_to_code_point(value: str) -> str | None:
    """Parse ``U+XXXX`` (case-insensitive) into a character.

    Returns ``None`` for malformed input, surrogates, and values above U+10FFFF.
    """
    text = value.strip()
    digits = text[2:]
    if not text.lower().startswith("u+") or not digits:
        return None
    if not all(ch in string.hexdigits for ch in digits):
        return None
    code_point = int(digits, 16)
    if code_point > MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return None
    return chr(code_point)


def parse_character(value: str) -> str | None:
    """Accept either a single literal character or a ``U+XXXX`` value."""
    if len(value) == 1:
        return value
    return string_to_code_point(value)


def characters_from_code_points(value: str) -> list[str]:
    """Parse a comma separated ``U+XXXX`` list, skipping invalid items."""
    characters: list[str] = []
    for component in value.split(","):
        character = string_to_code_point(component)
        if character is not None:
            characters.append(character)
    return characters


__all__ = [
    "CODE_POINT_STR_PADDING",
    "MAX_CODE_POINT",
    "characters_from_code_points",
    "code_point_description",
    "code_point_to_string",
    "parse_character",
    "string_to_code_point",
]
