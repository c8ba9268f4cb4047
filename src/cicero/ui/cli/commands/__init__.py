"""CLI command implementations exposed via `cicero.ui.cli`."""

from __future__ import annotations

from .describe import describe
from .fonts import list_fonts
from .preview import preview
from .settings import show_settings


__all__ = ["describe", "list_fonts", "preview", "show_settings"]
