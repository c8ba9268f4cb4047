from __future__ import annotations

from pathlib import Path

from cicero.core.user_dir import SETTINGS_FILENAME, get_user_dir


def test_user_dir_respects_cicero_home(monkeypatch, tmp_path: Path) -> None:
    env_home = tmp_path / "home-root"
    monkeypatch.setenv("CICERO_HOME", str(env_home))

    user_dir = get_user_dir()
    assert user_dir.root == env_home
    assert user_dir.root_is_explicit
    assert user_dir.settings_path == env_home / SETTINGS_FILENAME


def test_user_dir_falls_back_to_xdg_config(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CICERO_HOME", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert get_user_dir().root == tmp_path / "xdg" / "cicero"


def test_user_dir_defaults_under_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CICERO_HOME", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    user_dir = get_user_dir()
    assert user_dir.root == tmp_path / "home" / ".config" / "cicero"
    assert not user_dir.root_is_explicit


def test_config_path_creates_parents(tmp_path: Path) -> None:
    user_dir = get_user_dir(tmp_path / "custom")
    target = user_dir.config_path("nested", "settings.toml", create=True)
    assert target == tmp_path / "custom" / "nested" / "settings.toml"
    assert target.parent.is_dir()
    assert not target.exists()
