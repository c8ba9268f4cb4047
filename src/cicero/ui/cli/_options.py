"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


INPUT_PANEL = "Input"
OUTPUT_PANEL = "Output"
FONT_PANEL = "Fonts"
DIAGNOSTICS_PANEL = "Diagnostics"

DEFAULT_PREVIEW_SIZE = 32


class InputType(str, Enum):
    STRING = "string"
    CODE_POINTS = "code-points"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


CharacterArgument = Annotated[
    str,
    typer.Argument(
        metavar="CHAR",
        help="A single character or its U+XXXX code point.",
        rich_help_panel=INPUT_PANEL,
    ),
]

SettingsOption = Annotated[
    Path | None,
    typer.Option(
        "--settings",
        help="Settings file to use instead of the one in the user config directory.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=FONT_PANEL,
    ),
]

InputTypeOption = Annotated[
    InputType,
    typer.Option(
        "--input-type",
        help="Interpret INPUT as literal text or as comma separated U+XXXX values.",
        case_sensitive=False,
        rich_help_panel=INPUT_PANEL,
    ),
]

OutputFormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--output-format",
        help="Print the description as text or JSON.",
        case_sensitive=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

SizeOption = Annotated[
    int,
    typer.Option(
        "--size",
        min=1,
        help="Edge length of the rendered bitmap in pixels.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

FontOption = Annotated[
    Path | None,
    typer.Option(
        "--font",
        help="Render with this font file instead of the first candidate.",
        exists=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=FONT_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "DEFAULT_PREVIEW_SIZE",
    "CharacterArgument",
    "DebugOption",
    "FontOption",
    "InputType",
    "InputTypeOption",
    "OutputFormat",
    "OutputFormatOption",
    "SettingsOption",
    "SizeOption",
    "VerboseOption",
]
