"""Inspect Unicode text and the installed fonts able to render it."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from cicero.core.exceptions import (
    CiceroError,
    FontSourceUnavailable,
    RasterizationFailed,
    SettingsError,
)
from cicero.graphemes import Direction, GraphemeIndex, GraphemeRow, build_rows
from cicero.inspector import PAGE_STEP, Inspector
from cicero.preview import (
    CharacterPreview,
    CursorState,
    FontDescriptor,
    RenderedCharacter,
    RenderSize,
    SelectionCursor,
    centering_padding,
    fonts_for,
    render,
    render_tofu,
)
from cicero.settings import (
    CodePointRange,
    PreviewFontSetting,
    Settings,
    dump_settings,
    load_settings,
    parse_settings,
)


try:
    __version__ = _pkg_version("cicero")
except PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "PAGE_STEP",
    "CharacterPreview",
    "CiceroError",
    "CodePointRange",
    "CursorState",
    "Direction",
    "FontDescriptor",
    "FontSourceUnavailable",
    "GraphemeIndex",
    "GraphemeRow",
    "Inspector",
    "PreviewFontSetting",
    "RasterizationFailed",
    "RenderSize",
    "RenderedCharacter",
    "SelectionCursor",
    "Settings",
    "SettingsError",
    "__version__",
    "build_rows",
    "centering_padding",
    "dump_settings",
    "fonts_for",
    "load_settings",
    "parse_settings",
    "render",
    "render_tofu",
]
