"""Render a character with a given font into a fixed-size coverage bitmap.

The glyph is rasterized at its natural extent by FreeType (through Pillow),
then copied into the top-left corner of a canvas of exactly the requested
size: larger glyphs are cropped, smaller ones are zero padded. The natural
extent is returned as well so callers can centre the glyph with
:func:`centering_padding`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from cicero.core.exceptions import RasterizationFailed
from cicero.ucd.notation import code_point_to_string

from .catalog import FontDescriptor
from .faces import has_glyph, open_face


logger = logging.getLogger(__name__)

FULL_COVERAGE = 0xFF


@dataclass(frozen=True, slots=True)
class RenderSize:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Render size must not be negative: {self.width}x{self.height}")

    @classmethod
    def square(cls, length: int) -> RenderSize:
        return cls(length, length)


@dataclass(frozen=True, slots=True)
class RenderedCharacter:
    """Coverage bitmap (one ``bytes`` object per row) plus the glyph's natural size."""

    bitmap: tuple[bytes, ...]
    size: RenderSize
    glyph_size: RenderSize
    placeholder: bool = False

    def pixel(self, x: int, y: int) -> int:
        return self.bitmap[y][x]


def centering_padding(canvas: RenderSize, glyph: RenderSize) -> tuple[int, int]:
    """Return the ``(x, y)`` offsets that centre ``glyph`` inside ``canvas``."""
    x_padding = (canvas.width - glyph.width) // 2 if glyph.width < canvas.width else 0
    y_padding = (canvas.height - glyph.height) // 2 if glyph.height < canvas.height else 0
    return x_padding, y_padding


def render_tofu(size: RenderSize) -> RenderedCharacter:
    """Return the filled square shown when no glyph can be rendered."""
    row = bytes([FULL_COVERAGE]) * size.width
    return RenderedCharacter(
        bitmap=tuple(row for _ in range(size.height)),
        size=size,
        glyph_size=size,
        placeholder=True,
    )


def _fit_to_canvas(data: bytes, glyph_size: RenderSize, size: RenderSize) -> tuple[bytes, ...]:
    copy_width = min(size.width, glyph_size.width)
    copy_height = min(size.height, glyph_size.height)
    padding = bytes(size.width - copy_width)
    rows: list[bytes] = []
    for y in range(size.height):
        if y < copy_height:
            start = y * glyph_size.width
            rows.append(data[start : start + copy_width] + padding)
        else:
            rows.append(bytes(size.width))
    return tuple(rows)


def _rasterize_glyph(path: Path, char: str, size: RenderSize) -> Image.Image:
    font = ImageFont.truetype(str(path), size=size.height)
    left, top, right, bottom = font.getbbox(char)
    image = Image.new("L", (max(0, right - left), max(0, bottom - top)), 0)
    if image.width and image.height:
        ImageDraw.Draw(image).text((-left, -top), char, font=font, fill=FULL_COVERAGE)
        # FreeType pixel sizes are square in Pillow; stretch for non-square requests.
        if size.width != size.height:
            width = max(1, round(image.width * size.width / size.height))
            image = image.resize((width, image.height))
    return image


def render(font: FontDescriptor | str | Path, char: str, size: RenderSize) -> RenderedCharacter:
    """Rasterize ``char`` with ``font`` into a ``size`` canvas.

    Raises :class:`RasterizationFailed` when the font cannot be sized, has no
    glyph for the character, or the backend reports an error.
    """
    path = font.path if isinstance(font, FontDescriptor) else Path(font)
    label = code_point_to_string(char)
    if size.width == 0 or size.height == 0:
        raise RasterizationFailed(
            f"Cannot size {path.name} to {size.width}x{size.height}",
            font_path=str(path),
            char=char,
        )

    try:
        with open_face(path) as face:
            covered = has_glyph(face, ord(char))
    except Exception as exc:
        raise RasterizationFailed(
            f"Unable to read {path}", font_path=str(path), char=char
        ) from exc
    if not covered:
        raise RasterizationFailed(
            f"{path.name} has no glyph for {label}", font_path=str(path), char=char
        )

    try:
        glyph = _rasterize_glyph(path, char, size)
    except (OSError, ValueError) as exc:
        logger.debug("Rendering %s with %s failed: %s", label, path, exc)
        raise RasterizationFailed(
            f"Unable to render {label} with {path.name}", font_path=str(path), char=char
        ) from exc

    glyph_size = RenderSize(glyph.width, glyph.height)
    return RenderedCharacter(
        bitmap=_fit_to_canvas(glyph.tobytes(), glyph_size, size),
        size=size,
        glyph_size=glyph_size,
    )


def render_or_tofu(
    font: FontDescriptor | str | Path | None, char: str, size: RenderSize
) -> RenderedCharacter:
    """Render ``char`` or return the tofu placeholder when that is impossible."""
    if font is None:
        return render_tofu(size)
    try:
        return render(font, char, size)
    except RasterizationFailed as exc:
        logger.debug("Falling back to tofu: %s", exc)
        return render_tofu(size)


__all__ = [
    "FULL_COVERAGE",
    "RenderSize",
    "RenderedCharacter",
    "centering_padding",
    "render",
    "render_or_tofu",
    "render_tofu",
]
