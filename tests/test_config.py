"""Tests for layered settings resolution."""

from __future__ import annotations

from pathlib import Path

from ctr_core.config import SettingsResolver
from ctr_core.paths import UserDirs


def _resolver(tmp_path: Path, **kwargs) -> SettingsResolver:
    user_dirs = UserDirs(
        config_dir_override=tmp_path / "config",
        data_dir_override=tmp_path / "data",
    )
    return SettingsResolver(user_dirs=user_dirs, **kwargs)


def test_store_path_defaults_to_data_dir(tmp_path: Path) -> None:
    resolver = _resolver(tmp_path, env={})

    assert resolver.store_path() == tmp_path / "data" / "registries.json"


def test_config_file_beats_default(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        f'store_path = "{(tmp_path / "from-config.json").as_posix()}"\nlog_level = "info"\n'
    )
    resolver = _resolver(tmp_path, env={})

    assert resolver.store_path() == tmp_path / "from-config.json"
    assert resolver.log_level() == "INFO"


def test_env_beats_config_file(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('store_path = "/ignored.json"\n')
    env = {"CTR_STORE_PATH": str(tmp_path / "env.json"), "CTR_LOG_LEVEL": "debug"}
    resolver = _resolver(tmp_path, env=env)

    assert resolver.store_path() == tmp_path / "env.json"
    assert resolver.log_level() == "DEBUG"


def test_override_beats_env(tmp_path: Path) -> None:
    env = {"CTR_STORE_PATH": str(tmp_path / "env.json")}
    resolver = _resolver(
        tmp_path, env=env, overrides={"store_path": str(tmp_path / "cli.json")}
    )

    assert resolver.store_path() == tmp_path / "cli.json"


def test_empty_override_is_ignored(tmp_path: Path) -> None:
    resolver = _resolver(tmp_path, env={}, overrides={"store_path": None})

    assert resolver.store_path() == tmp_path / "data" / "registries.json"


def test_unreadable_config_falls_back(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("store_path = [unterminated\n")
    resolver = _resolver(tmp_path, env={})

    assert resolver.log_level() == "WARNING"


def test_user_dirs_prefer_overrides(tmp_path: Path) -> None:
    pinned = UserDirs(config_dir_override=tmp_path / "c", data_dir_override=tmp_path / "d")
    default = UserDirs()

    assert pinned.config_dir() == tmp_path / "c"
    assert pinned.data_dir() == tmp_path / "d"
    assert "ctr" in default.config_dir().parts
    assert "ctr" in default.data_dir().parts
