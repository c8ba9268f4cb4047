"""Describe the grapheme clusters and code points of some text."""

from __future__ import annotations

import json
from typing import Annotated

import typer

from cicero.ucd.notation import characters_from_code_points
from cicero.ucd.properties import GraphemeProperties

from .._options import InputType, InputTypeOption, OutputFormat, OutputFormatOption


def _input_text(value: str, input_type: InputType) -> str:
    if input_type is InputType.CODE_POINTS:
        return "".join(characters_from_code_points(value))
    return value


def describe(
    value: Annotated[
        str,
        typer.Argument(
            metavar="INPUT",
            help="Text to describe, or comma separated U+XXXX values with --input-type code-points.",
        ),
    ],
    input_type: InputTypeOption = InputType.STRING,
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """Print the Unicode properties of every code point, grouped by grapheme."""
    graphemes = GraphemeProperties.from_string(_input_text(value, input_type))
    if output_format is OutputFormat.JSON:
        payload = [grapheme.to_dict() for grapheme in graphemes]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    typer.echo("\n".join(str(grapheme) for grapheme in graphemes))


__all__ = ["describe"]
