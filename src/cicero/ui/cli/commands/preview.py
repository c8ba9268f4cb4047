"""Render a character to the terminal with braille dots."""

from __future__ import annotations

from collections.abc import Sequence

import typer

from cicero.core.exceptions import FontSourceUnavailable
from cicero.preview.rasterizer import (
    RenderedCharacter,
    RenderSize,
    centering_padding,
    render_or_tofu,
)
from cicero.preview.session import CharacterPreview
from cicero.settings import load_settings
from cicero.ucd.notation import code_point_to_string

from .._options import (
    DEFAULT_PREVIEW_SIZE,
    CharacterArgument,
    FontOption,
    SettingsOption,
    SizeOption,
)
from ..state import emit_error, emit_warning, get_cli_state
from ._common import resolve_character


BRAILLE_BASE = 0x2800
BRAILLE_CELL_WIDTH = 2
BRAILLE_CELL_HEIGHT = 4
# Dot bit for each (x, y) position inside a braille cell.
BRAILLE_DOTS = {
    (0, 0): 0x01,
    (0, 1): 0x02,
    (0, 2): 0x04,
    (1, 0): 0x08,
    (1, 1): 0x10,
    (1, 2): 0x20,
    (0, 3): 0x40,
    (1, 3): 0x80,
}
INK_THRESHOLD = 0x80


def centered_grid(rendered: RenderedCharacter) -> list[list[bool]]:
    """Return the inked pixels of ``rendered`` with the glyph centred on its canvas."""
    size = rendered.size
    x_padding, y_padding = centering_padding(size, rendered.glyph_size)
    grid = [[False] * size.width for _ in range(size.height)]
    for y, row in enumerate(rendered.bitmap):
        target_y = y + y_padding
        if target_y >= size.height:
            break
        for x, value in enumerate(row):
            target_x = x + x_padding
            if target_x >= size.width:
                break
            grid[target_y][target_x] = value >= INK_THRESHOLD
    return grid


def braille_lines(grid: Sequence[Sequence[bool]]) -> list[str]:
    """Pack a boolean grid into lines of braille characters."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    lines: list[str] = []
    for top in range(0, height, BRAILLE_CELL_HEIGHT):
        cells: list[str] = []
        for left in range(0, width, BRAILLE_CELL_WIDTH):
            bits = 0
            for (dx, dy), bit in BRAILLE_DOTS.items():
                y, x = top + dy, left + dx
                if y < height and x < width and grid[y][x]:
                    bits |= bit
            cells.append(chr(BRAILLE_BASE + bits))
        lines.append("".join(cells))
    return lines


def preview(
    char: CharacterArgument,
    size: SizeOption = DEFAULT_PREVIEW_SIZE,
    font: FontOption = None,
    settings_path: SettingsOption = None,
) -> None:
    """Render CHAR with the selected font, or the first font able to render it."""
    character = resolve_character(char)
    label = code_point_to_string(character)
    render_size = RenderSize.square(size)
    console = get_cli_state().console

    if font is not None:
        rendered = render_or_tofu(font, character, render_size)
        font_label = font.name
    else:
        try:
            session = CharacterPreview(character, load_settings(settings_path))
        except FontSourceUnavailable as exc:
            emit_error(str(exc), exception=exc)
            raise typer.Exit(code=1) from exc
        current = session.current_font()
        rendered = session.render_or_placeholder(render_size)
        font_label = current.display_name if current is not None else "no font"

    if rendered.placeholder:
        emit_warning(f"Unable to render {label} with {font_label}, showing a placeholder.")
    console.print(f"{label} {character}  [{font_label}]", markup=False, highlight=False)
    for line in braille_lines(centered_grid(rendered)):
        typer.echo(line)


__all__ = ["braille_lines", "centered_grid", "preview"]
