"""Where ctr keeps its user config and registry data."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "ctr"
APP_AUTHOR = "ctr-registry"


@dataclass(frozen=True)
class UserDirs:
    """Per-user directories, each pinnable to a fixed path (tests, sandboxes)."""

    app_name: str = APP_NAME
    app_author: str = APP_AUTHOR
    config_dir_override: Path | None = None
    data_dir_override: Path | None = None

    def config_dir(self) -> Path:
        """Directory holding ``config.toml``."""

        if self.config_dir_override is not None:
            return self.config_dir_override
        return Path(user_config_dir(self.app_name, appauthor=self.app_author))

    def data_dir(self) -> Path:
        """Directory holding the default registry store file."""

        if self.data_dir_override is not None:
            return self.data_dir_override
        return Path(user_data_dir(self.app_name, appauthor=self.app_author))
