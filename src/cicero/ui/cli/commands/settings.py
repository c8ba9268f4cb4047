"""Print the effective settings."""

from __future__ import annotations

import typer

from cicero.core.user_dir import get_user_dir
from cicero.settings import dump_settings, load_settings

from .._options import SettingsOption
from ..state import get_cli_state


def show_settings(settings_path: SettingsOption = None) -> None:
    """Print the settings in effect, in the TOML form read from disk."""
    path = settings_path or get_user_dir().settings_path
    get_cli_state().err_console.print(f"# {path}", highlight=False)
    typer.echo(dump_settings(load_settings(settings_path)), nl=False)


__all__ = ["show_settings"]
