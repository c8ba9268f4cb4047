from collections.abc import Callable, Iterable, Iterator, Mapping
import logging
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
import pytest

from cicero.settings import Settings


UPEM = 1000
ASCENT = 900
DESCENT = -200

Box = tuple[int, int, int, int]
FontFactory = Callable[..., Path]

# Ink box filling most of the em square.
DEFAULT_BOX: Box = (100, 0, 900, 700)


def _rect_glyph(box: Box):
    x0, y0, x1, y1 = box
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x1, y0))
    pen.lineTo((x1, y1))
    pen.lineTo((x0, y1))
    pen.closePath()
    return pen.glyph()


def build_font(
    path: Path,
    family: str,
    glyphs: Mapping[int, Box],
    *,
    advance: int = UPEM,
    style: str = "Regular",
    notdef_code_points: Iterable[int] = (),
) -> Path:
    """Write a TrueType font mapping each code point to a filled rectangle.

    ``notdef_code_points`` are present in the cmap but point at ``.notdef``.
    """
    names = {code_point: f"uni{code_point:04X}" for code_point in glyphs}
    glyph_order = [".notdef", *names.values()]
    cmap = dict(names)
    cmap.update({code_point: ".notdef" for code_point in notdef_code_points})

    fb = FontBuilder(UPEM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    outlines = {".notdef": _rect_glyph((50, 0, 450, 700))}
    outlines.update({names[cp]: _rect_glyph(box) for cp, box in glyphs.items()})
    fb.setupGlyf(outlines)
    metrics = {name: (advance, 0) for name in glyph_order}
    metrics[".notdef"] = (500, 0)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": f"{family.replace(' ', '')}-{style}",
        }
    )
    fb.setupPost()
    fb.setupMaxp()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


@pytest.fixture
def font_factory(tmp_path: Path) -> FontFactory:
    def factory(
        name: str,
        family: str,
        code_points: Mapping[int, Box] | list[int],
        **kwargs,
    ) -> Path:
        glyphs = (
            dict(code_points)
            if isinstance(code_points, Mapping)
            else {cp: DEFAULT_BOX for cp in code_points}
        )
        return build_font(tmp_path / "fonts" / name, family, glyphs, **kwargs)

    return factory


@pytest.fixture
def font_dir(font_factory: FontFactory) -> Path:
    """Three fonts, two of them covering ``A``, plus files that are not fonts."""
    first = font_factory("Alpha-Regular.ttf", "Alpha", [ord("A"), ord("B")])
    font_factory("nested/Beta-Regular.ttf", "Beta", [ord("A")])
    font_factory("Gamma-Regular.ttf", "Gamma", [ord("B"), 0x00E9])
    root = first.parent
    (root / "broken.ttf").write_bytes(b"definitely not a font")
    (root / "README.txt").write_text("fonts for tests\n", encoding="utf-8")
    return root


@pytest.fixture
def scan_settings(font_dir: Path) -> Settings:
    return Settings(use_fontconfig=False, font_search_paths=[font_dir])


@pytest.fixture(autouse=True)
def _isolated_user_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CICERO_HOME", str(tmp_path / "config"))


@pytest.fixture(autouse=True)
def _restore_cicero_logger() -> Iterator[None]:
    logger = logging.getLogger("cicero")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
