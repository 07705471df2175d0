"""Credential stores holding the set of registry logins, keyed by hostname."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from .errors import CorruptStoreError
from .types import RegistryInfo

logger = logging.getLogger(__name__)

STORE_VERSION = 1


class CredentialStore(ABC):
    """Abstract access to registry login records.

    Implementations make no promise about the order ``list`` returns records in.
    """

    @abstractmethod
    def list(self) -> list[RegistryInfo]:
        """Return every stored registry record."""

    @abstractmethod
    def get(self, hostname: str) -> RegistryInfo | None:
        """Return the record for ``hostname`` or ``None``."""

    @abstractmethod
    def save(self, hostname: str, username: str, *, now: datetime | None = None) -> RegistryInfo:
        """Create or update the record for ``hostname``.

        Updating keeps the original creation date and bumps the modified date.
        """

    @abstractmethod
    def remove(self, hostname: str) -> bool:
        """Delete the record for ``hostname``; return whether one existed."""


def _merge_record(
    existing: RegistryInfo | None, hostname: str, username: str, now: datetime | None
) -> RegistryInfo:
    stamp = now or datetime.now(tz=UTC)
    created = existing.created_date if existing is not None else stamp
    return RegistryInfo(
        hostname=hostname,
        username=username,
        created_date=created,
        modified_date=stamp,
    )


class MemoryCredentialStore(CredentialStore):
    """In-process store, mostly useful for tests and embedding."""

    def __init__(self, records: list[RegistryInfo] | None = None) -> None:
        self._records: dict[str, RegistryInfo] = {}
        for record in records or []:
            self._records[record.hostname] = record

    def list(self) -> list[RegistryInfo]:
        return list(self._records.values())

    def get(self, hostname: str) -> RegistryInfo | None:
        return self._records.get(hostname)

    def save(self, hostname: str, username: str, *, now: datetime | None = None) -> RegistryInfo:
        record = _merge_record(self._records.get(hostname), hostname, username, now)
        self._records[hostname] = record
        return record

    def remove(self, hostname: str) -> bool:
        return self._records.pop(hostname, None) is not None


class FileCredentialStore(CredentialStore):
    """JSON file store: ``{"version": 1, "registries": [...]}``.

    Only hostnames, usernames and timestamps are written; secrets never are.
    A missing file is an empty store.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def list(self) -> list[RegistryInfo]:
        return list(self._read().values())

    def get(self, hostname: str) -> RegistryInfo | None:
        return self._read().get(hostname)

    def save(self, hostname: str, username: str, *, now: datetime | None = None) -> RegistryInfo:
        records = self._read()
        record = _merge_record(records.get(hostname), hostname, username, now)
        records[hostname] = record
        self._write(records)
        return record

    def remove(self, hostname: str) -> bool:
        records = self._read()
        if records.pop(hostname, None) is None:
            return False
        self._write(records)
        return True

    def _read(self) -> dict[str, RegistryInfo]:
        if not self.path.exists():
            logger.debug("credential store %s does not exist yet", self.path)
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CorruptStoreError(f"unable to read credential store {self.path}: {exc}") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("registries"), list):
            raise CorruptStoreError(f"credential store {self.path} has no 'registries' list")
        records: dict[str, RegistryInfo] = {}
        for item in payload["registries"]:
            record = _record_from_dict(item, self.path)
            records[record.hostname] = record
        logger.debug("loaded %s registry records from %s", len(records), self.path)
        return records

    def _write(self, records: dict[str, RegistryInfo]) -> None:
        payload = {
            "version": STORE_VERSION,
            "registries": [_record_to_dict(record) for record in records.values()],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("wrote %s registry records to %s", len(records), self.path)


def _record_to_dict(record: RegistryInfo) -> dict[str, Any]:
    return {
        "hostname": record.hostname,
        "username": record.username,
        "createdDate": record.created_date.isoformat(),
        "modifiedDate": record.modified_date.isoformat(),
    }


def _record_from_dict(item: Any, path: Path) -> RegistryInfo:
    if not isinstance(item, dict):
        raise CorruptStoreError(f"credential store {path} contains a non-object record")
    try:
        hostname = item["hostname"]
        username = item["username"]
        created = datetime.fromisoformat(item["createdDate"])
        modified = datetime.fromisoformat(item["modifiedDate"])
    except (KeyError, TypeError, ValueError) as exc:
        raise CorruptStoreError(f"credential store {path} has a malformed record: {exc}") from exc
    if not isinstance(hostname, str) or not isinstance(username, str):
        raise CorruptStoreError(f"credential store {path} has a record with non-string fields")
    return RegistryInfo(
        hostname=hostname,
        username=username,
        created_date=created,
        modified_date=modified,
    )
