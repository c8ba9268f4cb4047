"""Discover the installed fonts able to render a character.

Two discovery strategies implement the :class:`FontSource` protocol:

: `FontconfigSource` asks the system font index (``fc-list``) for every face
  whose charset covers the character.
: `DirectoryScanSource` walks the configured search paths and parses every
  file with fontTools, keeping faces that map the character to a real glyph.

`select_font_source` picks one of them from the settings, and `fonts_for`
applies the ``preview_fonts`` rules on top of the selected strategy.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
import shutil
import subprocess
from typing import Protocol, runtime_checkable

from cicero.core.exceptions import FontSourceUnavailable
from cicero.settings import PreviewFontSetting, Settings
from cicero.ucd.notation import code_point_to_string

from .faces import face_names, has_glyph, open_face


logger = logging.getLogger(__name__)

FC_LIST_FORMAT = "%{file}\t%{family[0]}\t%{fullname[0]}\t%{postscriptname}\n"


@dataclass(frozen=True, slots=True)
class FontDescriptor:
    """A discovered font. Two descriptors are equal when their paths are."""

    path: Path
    family_name: str = field(default="", compare=False)
    full_name: str = field(default="", compare=False)

    @classmethod
    def for_path(cls, path: str | Path) -> FontDescriptor:
        """Return a lookup key matching any descriptor of ``path``."""
        return cls(path=Path(path))

    @property
    def display_name(self) -> str:
        if self.full_name and self.full_name != self.family_name:
            return f"{self.family_name} - {self.full_name}"
        return self.family_name or self.path.name

    def matches_pattern(self, pattern: str) -> bool:
        return pattern in self.family_name or pattern in self.full_name


@runtime_checkable
class FontSource(Protocol):
    """Capability to list the fonts that cover a character."""

    name: str

    def fonts_for(self, char: str) -> list[FontDescriptor]: ...


def _unique_by_path(fonts: Iterable[FontDescriptor]) -> list[FontDescriptor]:
    seen: set[Path] = set()
    unique: list[FontDescriptor] = []
    for font in fonts:
        if font.path in seen:
            continue
        seen.add(font.path)
        unique.append(font)
    return unique


class FontconfigSource:
    """Query the fontconfig index through ``fc-list``."""

    name = "fontconfig"

    def __init__(self, executable: str = "fc-list") -> None:
        self.executable = executable

    def fonts_for(self, char: str) -> list[FontDescriptor]:
        pattern = f":charset={ord(char):x}"
        try:
            proc = subprocess.run(
                [self.executable, "-f", FC_LIST_FORMAT, pattern],
                check=True,
                capture_output=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise FontSourceUnavailable(f"Unable to query fontconfig: {exc}") from exc

        fonts: list[FontDescriptor] = []
        for line in proc.stdout.splitlines():
            parts = line.split("\t")
            if len(parts) != 4 or not parts[0]:
                continue
            file_part, family, full_name, postscript_name = (part.strip() for part in parts)
            path = Path(file_part)
            family = family or path.stem
            fonts.append(
                FontDescriptor(
                    path=path,
                    family_name=family,
                    full_name=full_name or postscript_name or family,
                )
            )
        fonts.sort(key=lambda font: (str(font.path), font.family_name, font.full_name))
        return _unique_by_path(fonts)


class DirectoryScanSource:
    """Parse every file below the search paths and keep faces covering the character."""

    name = "directory-scan"

    def __init__(self, search_paths: Sequence[Path]) -> None:
        self.search_paths = [Path(path).expanduser() for path in search_paths]

    def _iter_files(self) -> Iterable[Path]:
        for root in self.search_paths:
            if not root.is_dir():
                logger.debug("Skipping font search path %s: not a directory", root)
                continue
            yield from sorted(path for path in root.rglob("*") if path.is_file())

    def fonts_for(self, char: str) -> list[FontDescriptor]:
        code_point = ord(char)
        fonts: list[FontDescriptor] = []
        for path in self._iter_files():
            try:
                with open_face(path) as face:
                    if not has_glyph(face, code_point):
                        continue
                    family, full_name = face_names(face, fallback=path.stem)
            except Exception as exc:
                logger.debug("Skipping %s: %s", path, exc)
                continue
            fonts.append(FontDescriptor(path=path, family_name=family, full_name=full_name))
        return _unique_by_path(fonts)


def select_font_source(settings: Settings) -> FontSource:
    """Pick the discovery strategy for ``settings``.

    Fontconfig is used when enabled and ``fc-list`` is installed; otherwise
    the configured search paths are scanned. Raises
    :class:`FontSourceUnavailable` when neither is possible.
    """
    if settings.use_fontconfig:
        executable = shutil.which("fc-list")
        if executable is not None:
            return FontconfigSource(executable)
        logger.debug("fc-list is not available, falling back to the directory scan")
    if not settings.font_search_paths:
        raise FontSourceUnavailable()
    return DirectoryScanSource(settings.font_search_paths)


def filter_preview_fonts(
    fonts: Sequence[FontDescriptor],
    char: str,
    rules: Sequence[PreviewFontSetting] | None,
) -> list[FontDescriptor]:
    """Keep fonts named by a rule whose range contains ``char``.

    An empty rule list keeps every font; rules that match nothing yield an
    empty list.
    """
    if not rules:
        return list(fonts)
    patterns = [rule.font_name_pattern for rule in rules if rule.applies_to(char)]
    return [font for font in fonts if any(font.matches_pattern(p) for p in patterns)]


def fonts_for(char: str, settings: Settings) -> list[FontDescriptor]:
    """Return the ordered fonts able to render ``char`` under ``settings``.

    A failing ``fc-list`` query falls back to the search paths when any are
    configured.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    source = select_font_source(settings)
    try:
        candidates = source.fonts_for(char)
    except FontSourceUnavailable as exc:
        if not isinstance(source, FontconfigSource) or not settings.font_search_paths:
            raise
        logger.debug("Fontconfig query failed, scanning the search paths instead: %s", exc)
        source = DirectoryScanSource(settings.font_search_paths)
        candidates = source.fonts_for(char)
    fonts = filter_preview_fonts(candidates, char, settings.preview_fonts)
    logger.debug(
        "%s: %d candidate font(s) from %s, %d after preview rules",
        code_point_to_string(char),
        len(candidates),
        source.name,
        len(fonts),
    )
    return fonts


__all__ = [
    "FC_LIST_FORMAT",
    "DirectoryScanSource",
    "FontDescriptor",
    "FontSource",
    "FontconfigSource",
    "filter_preview_fonts",
    "fonts_for",
    "select_font_source",
]
