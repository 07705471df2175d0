"""Capability shared by every resource kind listed by management tooling."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


class ResourceLabelKeys:
    """Well-known label keys."""

    ROLE = "ctr.resource.role"


@runtime_checkable
class ManagedResource(Protocol):
    """Uniform identity and metadata exposed by a managed resource.

    Resource kinds satisfy this structurally, no subclassing required.
    """

    id: str
    name: str
    creation_date: datetime
    labels: dict[str, str]
