"""Helpers shared by the CLI commands."""

from __future__ import annotations

import typer

from cicero.ucd.notation import parse_character


def resolve_character(value: str) -> str:
    """Return the character named by ``value`` or fail with a usage error."""
    char = parse_character(value)
    if char is None:
        raise typer.BadParameter(
            f"Expected a single character or a U+XXXX code point, got '{value}'.",
            param_hint="CHAR",
        )
    return char


__all__ = ["resolve_character"]
