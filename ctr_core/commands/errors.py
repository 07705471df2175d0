"""Errors raised while registering or looking up ctr commands."""

from __future__ import annotations

from typing import Sequence


class CommandCatalogError(Exception):
    """Root of the command lookup failures."""


class CommandCollisionError(CommandCatalogError):
    """A ``group:name`` or ``group:alias`` is claimed by two commands."""


class CommandNotFoundError(CommandCatalogError):
    """No command answers to the requested name."""


class AmbiguousCommandError(CommandCatalogError):
    """A bare name or alias exists in several groups; ``group:name`` is needed."""

    def __init__(self, name: str, candidates: Sequence[str]) -> None:
        super().__init__(f"{name!r} exists in several groups: {', '.join(candidates)}")
        self.name = name
        self.candidates = tuple(candidates)
