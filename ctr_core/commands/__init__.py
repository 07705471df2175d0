"""Command catalog used by the ctr CLI dispatcher."""

from .catalog import CommandCatalog
from .entry import CommandEntry
from .errors import (
    AmbiguousCommandError,
    CommandCatalogError,
    CommandCollisionError,
    CommandNotFoundError,
)

__all__ = [
    "CommandCatalog",
    "CommandEntry",
    "CommandCatalogError",
    "CommandCollisionError",
    "CommandNotFoundError",
    "AmbiguousCommandError",
]
