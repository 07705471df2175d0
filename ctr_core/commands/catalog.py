"""In-memory catalog of ctr commands."""

from __future__ import annotations

from .entry import CommandEntry
from .errors import (
    AmbiguousCommandError,
    CommandCollisionError,
    CommandNotFoundError,
)


class CommandCatalog:
    """Tracks commands by qualified name, alias, and simple name."""

    def __init__(self) -> None:
        self._entries: dict[str, CommandEntry] = {}
        self._by_qualified: dict[str, CommandEntry] = {}
        self._by_name: dict[str, list[CommandEntry]] = {}

    def register(self, entry: CommandEntry) -> None:
        """Register an entry, raising on qualified name or alias collisions."""

        names = entry.qualified_names()
        for qualified in names:
            if qualified in self._by_qualified:
                raise CommandCollisionError(f"{qualified} is already registered.")
        self._entries[entry.qualified_name] = entry
        for qualified in names:
            self._by_qualified[qualified] = entry
        for simple in (entry.name, *entry.aliases):
            self._by_name.setdefault(simple, []).append(entry)

    def resolve(self, name_or_qualified: str) -> CommandEntry:
        """Resolve either a simple name or a qualified ``group:name``."""

        if ":" in name_or_qualified:
            entry = self._by_qualified.get(name_or_qualified)
            if entry is None:
                raise CommandNotFoundError(f"{name_or_qualified} is not a known command.")
            return entry
        candidates = self._by_name.get(name_or_qualified)
        if not candidates:
            raise CommandNotFoundError(f"{name_or_qualified} is not a known command.")
        if len(candidates) > 1:
            sorted_candidates = sorted(entry.qualified_name for entry in candidates)
            raise AmbiguousCommandError(name_or_qualified, sorted_candidates)
        return candidates[0]

    def qualified_names(self) -> set[str]:
        """Every resolvable ``group:name`` including aliases."""

        return set(self._by_qualified)

    def entries(self) -> tuple[CommandEntry, ...]:
        """Return all registered entries in qualified order."""

        return tuple(sorted(self._entries.values(), key=lambda entry: entry.qualified_name))
