"""Catalog entry describing one ctr command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Type


@dataclass(frozen=True)
class CommandEntry:
    """Immutable descriptor for a registered command."""

    group: str
    name: str
    target: Type[Any]
    aliases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "group", self._validate_component("group", self.group))
        object.__setattr__(self, "name", self._validate_component("name", self.name))
        object.__setattr__(
            self,
            "aliases",
            tuple(self._validate_component("alias", alias) for alias in self.aliases),
        )
        if not isinstance(self.target, type):
            raise TypeError("target must be a class type.")

    @staticmethod
    def _validate_component(label: str, value: str) -> str:
        if not value:
            raise ValueError(f"{label} cannot be empty.")
        if ":" in value:
            raise ValueError(f"{label} may not contain ':'.")
        return value

    @property
    def qualified_name(self) -> str:
        """Return the ``group:name`` identifier for this entry."""

        return f"{self.group}:{self.name}"

    def qualified_names(self) -> tuple[str, ...]:
        """Return the qualified name followed by every ``group:alias``."""

        return (self.qualified_name, *(f"{self.group}:{alias}" for alias in self.aliases))
