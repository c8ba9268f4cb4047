"""Custom exception hierarchy for font discovery and glyph previews."""

from __future__ import annotations


class CiceroError(RuntimeError):
    """Base exception for Cicero failures."""


class FontSourceUnavailable(CiceroError):
    """Raised when neither the system font index nor search paths are configured."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "No font source available: enable fontconfig or configure font_search_paths."
        )


class RasterizationFailed(CiceroError):
    """Raised when a glyph cannot be rendered with the requested font and size."""

    def __init__(self, message: str, *, font_path: str | None = None, char: str | None = None):
        super().__init__(message)
        self.font_path = font_path
        self.char = char


class SettingsError(CiceroError):
    """Raised when a settings payload cannot be parsed."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "CiceroError",
    "FontSourceUnavailable",
    "RasterizationFailed",
    "SettingsError",
    "exception_hint",
    "exception_messages",
]
