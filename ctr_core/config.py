"""Layered settings for ctr: overrides, environment, user config file, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import tomllib

from .paths import UserDirs

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.toml"
STORE_FILE_NAME = "registries.json"

_DEFAULTS: dict[str, str] = {
    "log_level": "WARNING",
}
_ENV_KEY_MAP: dict[str, str] = {
    "store_path": "CTR_STORE_PATH",
    "log_level": "CTR_LOG_LEVEL",
}


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config file %s: %s", path, exc)
        return {}
    return {key: str(value) for key, value in data.items() if not isinstance(value, dict)}


@dataclass
class SettingsResolver:
    """Resolve settings using override, env, user config, defaults order."""

    user_dirs: UserDirs | None = None
    overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    defaults: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.overrides = {key: value for key, value in (self.overrides or {}).items() if value}
        self.env = self.env if self.env is not None else os.environ
        base_defaults = dict(_DEFAULTS)
        if self.defaults:
            base_defaults.update(self.defaults)
        self.defaults = base_defaults

    @property
    def config_path(self) -> Path:
        return self.user_dirs.config_dir() / CONFIG_FILE_NAME

    def resolve(self, key: str) -> str | None:
        if value := self.overrides.get(key):
            return value
        alias = _ENV_KEY_MAP.get(key)
        if alias and (value := self.env.get(alias)):
            return value
        if value := _load_config_from_file(self.config_path).get(key):
            return value
        return self.defaults.get(key)

    def store_path(self) -> Path:
        """Return the credential store file location."""

        configured = self.resolve("store_path")
        if configured:
            return Path(configured).expanduser()
        return self.user_dirs.data_dir() / STORE_FILE_NAME

    def log_level(self) -> str:
        return (self.resolve("log_level") or "WARNING").upper()
