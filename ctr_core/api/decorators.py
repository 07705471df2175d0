"""Decorator that marks ctr command classes with catalog metadata."""

from __future__ import annotations

from typing import Any, Callable, Sequence, Type

from .abc import CtrAbstractCommand

_CommandCandidate = Type[Any]


def _attach_command_metadata(
    cls: type, *, name: str | None, group: str | None, aliases: Sequence[str]
) -> type:
    metadata = {
        "name": name or cls.__name__,
        "group": group or "ctr",
        "aliases": tuple(aliases),
    }
    metadata["qualified_name"] = f"{metadata['group']}:{metadata['name']}"
    setattr(cls, "__ctr_command__", metadata)
    return cls


def ctrcommand(
    cls: _CommandCandidate | None = None,
    *,
    name: str | None = None,
    group: str | None = None,
    aliases: Sequence[str] = (),
) -> Callable[[_CommandCandidate], _CommandCandidate] | _CommandCandidate:
    """Mark a :class:`CtrAbstractCommand` subclass for catalog registration."""

    def wrap(target: _CommandCandidate) -> _CommandCandidate:
        if not isinstance(target, type) or not issubclass(target, CtrAbstractCommand):
            raise TypeError(f"{target!r} must subclass CtrAbstractCommand to be a command.")
        return _attach_command_metadata(target, name=name, group=group, aliases=aliases)

    if cls is None:
        return wrap
    return wrap(cls)
