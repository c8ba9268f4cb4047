"""User settings controlling font discovery.

Settings

`use_fontconfig` (`bool`)
: Query the system font index (``fc-list``) for fonts covering a character.
  Defaults to `True` on POSIX platforms. When `fc-list` is not installed the
  directory scan is used instead.

`font_search_paths` (`list[Path] | None`)
: Directories scanned recursively for font files when fontconfig is not used.

`preview_fonts` (`list[PreviewFontSetting] | None`)
: Restrict previews to fonts whose family or full name contains `font_name`.
  Each rule may be limited to a `code_point_range`, given either as an
  inclusive range (`"U+0020..U+00FF"`), a plane name
  (`"Basic Multilingual Plane"`) or a block name (`"Basic Latin"`).

Settings are read from ``settings.toml`` in the user config directory::

    use_fontconfig = false
    font_search_paths = ["/usr/share/fonts"]

    [[preview_fonts]]
    code_point_range = "Basic Latin"
    font_name = "DejaVu"
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import tomllib
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_serializer,
    model_validator,
)
import tomli_w

from cicero.core.exceptions import SettingsError
from cicero.core.user_dir import get_user_dir
from cicero.ucd.blocks import block_of, canonical_block_name, normalize_block_name
from cicero.ucd.notation import code_point_to_string, string_to_code_point
from cicero.ucd.plane import Plane, plane_names


logger = logging.getLogger(__name__)

CODE_POINT_RANGE_SEPARATOR = ".."


def _default_use_fontconfig() -> bool:
    return os.name == "posix"


class CodePointRange(BaseModel):
    """A raw inclusive range, a Unicode plane, or a Unicode block."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["raw", "plane", "block"]
    first: int | None = None
    last: int | None = None
    name: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _parse_string(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        parsed = cls.parse(value)
        return {
            "kind": parsed.kind,
            "first": parsed.first,
            "last": parsed.last,
            "name": parsed.name,
        }

    @classmethod
    def parse(cls, value: str) -> CodePointRange:
        """Parse the string form used in ``settings.toml``."""
        if CODE_POINT_RANGE_SEPARATOR in value:
            first_str, last_str = value.split(CODE_POINT_RANGE_SEPARATOR, 1)
            first = string_to_code_point(first_str)
            if first is None:
                raise ValueError(f"Invalid first code point for range: '{first_str}'")
            last = string_to_code_point(last_str)
            if last is None:
                raise ValueError(f"Invalid last code point for range: '{last_str}'")
            if ord(first) > ord(last):
                raise ValueError(f"Empty code point range: '{value}'")
            return cls.model_construct(kind="raw", first=ord(first), last=ord(last))

        if value in plane_names():
            return cls.model_construct(kind="plane", name=value)

        block = canonical_block_name(value)
        if block is not None:
            return cls.model_construct(kind="block", name=block)

        raise ValueError(f"Unrecognized code point range: '{value}'")

    def contains(self, char: str | int) -> bool:
        code_point = char if isinstance(char, int) else ord(char)
        if self.kind == "raw":
            return self.first is not None and self.last is not None and (
                self.first <= code_point <= self.last
            )
        if self.kind == "plane":
            return Plane.of(code_point).name == self.name
        block = block_of(code_point)
        return (
            block is not None
            and self.name is not None
            and normalize_block_name(block) == normalize_block_name(self.name)
        )

    @model_serializer(mode="plain")
    def _serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.kind == "raw":
            return (
                f"{code_point_to_string(self.first or 0)}"
                f"{CODE_POINT_RANGE_SEPARATOR}"
                f"{code_point_to_string(self.last or 0)}"
            )
        return self.name or ""


class PreviewFontSetting(BaseModel):
    """Keep fonts whose names contain ``font_name_pattern`` for matching characters."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    code_point_range: CodePointRange | None = None
    font_name_pattern: str = Field(alias="font_name")

    def applies_to(self, char: str) -> bool:
        return self.code_point_range is None or self.code_point_range.contains(char)


class Settings(BaseModel):
    """Configuration passed explicitly to every font discovery call."""

    model_config = ConfigDict(extra="forbid")

    use_fontconfig: bool = Field(default_factory=_default_use_fontconfig)
    font_search_paths: list[Path] | None = None
    preview_fonts: list[PreviewFontSetting] | None = None


def parse_settings(text: str) -> Settings:
    """Parse the TOML settings payload, raising :class:`SettingsError` on failure."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsError(f"Invalid settings TOML: {exc}") from exc
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path`` (default: the user settings file).

    Missing or unreadable files and invalid payloads fall back to defaults.
    """
    target = path or get_user_dir().settings_path
    try:
        text = target.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", target)
        return Settings()
    except OSError as exc:
        logger.warning("Unable to read settings file %s: %s", target, exc)
        return Settings()
    try:
        return parse_settings(text)
    except SettingsError as exc:
        logger.warning("Ignoring settings file %s: %s", target, exc)
        return Settings()


def dump_settings(settings: Settings) -> str:
    """Render settings in the TOML form accepted by :func:`parse_settings`."""
    payload = settings.model_dump(mode="json", by_alias=True, exclude_none=True)
    return tomli_w.dumps(payload)


__all__ = [
    "CODE_POINT_RANGE_SEPARATOR",
    "CodePointRange",
    "PreviewFontSetting",
    "Settings",
    "dump_settings",
    "load_settings",
    "parse_settings",
]
