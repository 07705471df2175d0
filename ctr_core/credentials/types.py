"""Records returned by credential stores."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RegistryInfo:
    """Raw facts a credential store keeps about one registry login."""

    hostname: str
    username: str
    created_date: datetime
    modified_date: datetime
