"""List the fonts able to render a character."""

from __future__ import annotations

from rich import box
from rich.table import Table
import typer

from cicero.core.exceptions import FontSourceUnavailable
from cicero.preview.catalog import fonts_for
from cicero.settings import load_settings
from cicero.ucd.notation import code_point_to_string

from .._options import CharacterArgument, SettingsOption
from ..state import emit_error, emit_warning, get_cli_state
from ._common import resolve_character


def list_fonts(char: CharacterArgument, settings_path: SettingsOption = None) -> None:
    """Print a table of the fonts that provide a glyph for CHAR."""
    character = resolve_character(char)
    settings = load_settings(settings_path)
    label = code_point_to_string(character)

    try:
        fonts = fonts_for(character, settings)
    except FontSourceUnavailable as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if not fonts:
        emit_warning(f"No installed font can render {label}.")
        return

    console = get_cli_state().console
    table = Table(
        title=f"Fonts for {label} {character}",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Family", style="magenta")
    table.add_column("Full name", style="green")
    table.add_column("Path", overflow="fold")
    for font in fonts:
        table.add_row(font.family_name, font.full_name, str(font.path))
    console.print(table)
    console.print(f"{len(fonts)} font(s) can render {label}.")


__all__ = ["list_fonts"]
