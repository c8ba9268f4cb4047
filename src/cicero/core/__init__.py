"""Shared building blocks: exceptions and user directory resolution."""

from __future__ import annotations

from .exceptions import (
    CiceroError,
    FontSourceUnavailable,
    RasterizationFailed,
    SettingsError,
    exception_hint,
    exception_messages,
)
from .user_dir import CiceroUserDir, get_user_dir


__all__ = [
    "CiceroError",
    "CiceroUserDir",
    "FontSourceUnavailable",
    "RasterizationFailed",
    "SettingsError",
    "exception_hint",
    "exception_messages",
    "get_user_dir",
]
