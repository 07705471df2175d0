"""Core pieces for managing container registry logins."""

from .config import SettingsResolver
from .paths import UserDirs

__all__ = ["SettingsResolver", "UserDirs"]
