"""Resolution of the Cicero user configuration directory."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path


__all__ = [
    "SETTINGS_FILENAME",
    "CiceroUserDir",
    "get_user_dir",
]

SETTINGS_FILENAME = "settings.toml"


def _resolve_root(root: str | Path | None) -> tuple[Path, bool]:
    if root is not None:
        return Path(root).expanduser(), True
    env_root = os.environ.get("CICERO_HOME")
    if env_root:
        return Path(env_root).expanduser(), True
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config).expanduser() / "cicero", True
    return Path.home() / ".config" / "cicero", False


@dataclass(frozen=True, slots=True)
class CiceroUserDir:
    """Resolved configuration root plus helpers to address files below it."""

    root: Path
    root_is_explicit: bool = False

    def config_path(self, *parts: str | Path, create: bool = False) -> Path:
        """Return a path under the config root, creating parent directories if asked."""
        target = self.root.joinpath(*parts)
        if create:
            target.parent.mkdir(parents=True, exist_ok=True)
        return target

    @property
    def settings_path(self) -> Path:
        return self.config_path(SETTINGS_FILENAME)


def get_user_dir(root: str | Path | None = None) -> CiceroUserDir:
    """Resolve the user dir from ``root`` or the environment on every call."""
    resolved, explicit = _resolve_root(root)
    return CiceroUserDir(root=resolved, root_is_explicit=explicit)
