"""Helper utilities for registering built-in ctr commands."""

from __future__ import annotations

from typing import Sequence

from ctr_core.commands import CommandCatalog, CommandEntry

from .registry import (
    RegistryAddCommand,
    RegistryCheckCommand,
    RegistryListCommand,
    RegistryRemoveCommand,
)

__all__ = ["register_builtin_commands", "build_catalog"]

_BUILTIN_COMMANDS: Sequence[type] = (
    RegistryListCommand,
    RegistryAddCommand,
    RegistryRemoveCommand,
    RegistryCheckCommand,
)


def register_builtin_commands(catalog: CommandCatalog) -> None:
    """Register the built-in command classes with the supplied catalog."""

    for command in _BUILTIN_COMMANDS:
        metadata = getattr(command, "__ctr_command__", None)
        if metadata is None:
            continue
        catalog.register(
            CommandEntry(
                group=metadata["group"],
                name=str(metadata["name"]),
                target=command,
                aliases=tuple(metadata["aliases"]),
            )
        )


def build_catalog() -> CommandCatalog:
    catalog = CommandCatalog()
    register_builtin_commands(catalog)
    return catalog
