"""Registry resource model and its JSON wire form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Iterable, Mapping

from ctr_core.credentials.types import RegistryInfo

from .errors import MalformedEncodingError

_IMMUTABLE_FIELDS = frozenset({"id", "username", "creation_date"})
_UTC_OFFSET_SUFFIX = "+00:00"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _row_timestamp(value: datetime) -> str:
    text = value.isoformat(timespec="seconds")
    if text.endswith(_UTC_OFFSET_SUFFIX):
        return text[: -len(_UTC_OFFSET_SUFFIX)] + "Z"
    return text


def _copy_labels(labels: Mapping[str, str] | None) -> dict[str, str]:
    copied: dict[str, str] = {}
    for key, value in (labels or {}).items():
        if value is None:
            raise ValueError(f"label {key!r} has no value")
        copied[str(key)] = str(value)
    return copied


@dataclass
class RegistryResource:
    """A configured container registry endpoint.

    ``id`` is the registry hostname and never changes once the resource is
    built. ``name`` starts out equal to it but is only a display alias:
    reassigning ``name`` does not change the identity of the resource.
    ``username`` and ``creation_date`` are fixed as well; ``modification_date``
    and ``labels`` are maintained by whoever owns the resource collection.
    """

    id: str
    name: str
    username: str
    creation_date: datetime
    modification_date: datetime
    labels: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "creation_date", _as_utc(self.creation_date))
        self.modification_date = _as_utc(self.modification_date)
        self.labels = _copy_labels(self.labels)

    def __setattr__(self, key: str, value: Any) -> None:
        if key in _IMMUTABLE_FIELDS and key in self.__dict__:
            raise AttributeError(f"{key} cannot be changed after creation")
        super().__setattr__(key, value)

    @classmethod
    def create(
        cls,
        hostname: str,
        username: str,
        creation_date: datetime,
        modified_date: datetime,
        labels: Mapping[str, str] | None = None,
    ) -> "RegistryResource":
        """Build a resource whose ``id`` and ``name`` are ``hostname``.

        The hostname is stored as given; use
        :func:`ctr_core.resource.is_valid_host_reference` to check it.
        """

        return cls(
            id=hostname,
            name=hostname,
            username=username,
            creation_date=creation_date,
            modification_date=modified_date,
            labels=dict(labels or {}),
        )

    @classmethod
    def from_registry_info(cls, info: RegistryInfo) -> "RegistryResource":
        """Build a resource from a credential store record.

        Labels are not part of the record and always start out empty.
        """

        return cls.create(
            hostname=info.hostname,
            username=info.username,
            creation_date=info.created_date,
            modified_date=info.modified_date,
        )

    @property
    def hostname(self) -> str:
        return self.id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "creationDate": self.creation_date.isoformat(),
            "modifiedDate": self.modification_date.isoformat(),
            "labels": dict(self.labels),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegistryResource":
        if not isinstance(data, Mapping):
            raise MalformedEncodingError(
                f"registry entry must be an object, got {type(data).__name__}"
            )
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            username=_require_str(data, "username"),
            creation_date=_require_timestamp(data, "creationDate"),
            modification_date=_require_timestamp(data, "modifiedDate"),
            labels=_require_labels(data),
        )

    def as_row(self) -> list[str]:
        """Return the ``HOSTNAME USERNAME MODIFIED CREATED`` table cells."""

        return [
            self.name,
            self.username,
            _row_timestamp(self.modification_date),
            _row_timestamp(self.creation_date),
        ]


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise MalformedEncodingError(f"registry entry is missing '{key}'")
    return data[key]


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise MalformedEncodingError(
            f"registry entry field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _require_timestamp(data: Mapping[str, Any], key: str) -> datetime:
    raw = _require_str(data, key)
    try:
        return _as_utc(datetime.fromisoformat(raw))
    except (ValueError, OverflowError) as exc:
        raise MalformedEncodingError(
            f"registry entry field '{key}' is not a usable ISO 8601 timestamp: {raw!r}"
        ) from exc


def _require_labels(data: Mapping[str, Any]) -> dict[str, str]:
    labels = _require(data, "labels")
    if not isinstance(labels, Mapping):
        raise MalformedEncodingError("registry entry field 'labels' must be an object")
    for key, value in labels.items():
        if not isinstance(value, str):
            raise MalformedEncodingError(f"label {key!r} must map to a string")
    return dict(labels)


def encode_registry(resource: RegistryResource, *, indent: int | None = None) -> str:
    return json.dumps(resource.to_dict(), ensure_ascii=False, indent=indent)


def encode_registries(
    resources: Iterable[RegistryResource], *, indent: int | None = None
) -> str:
    return json.dumps(
        [resource.to_dict() for resource in resources], ensure_ascii=False, indent=indent
    )


def _load_json(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedEncodingError(f"invalid registry JSON: {exc}") from exc


def decode_registry(text: str | bytes) -> RegistryResource:
    return RegistryResource.from_dict(_load_json(text))


def decode_registries(text: str | bytes) -> list[RegistryResource]:
    payload = _load_json(text)
    if not isinstance(payload, list):
        raise MalformedEncodingError("registry list must be a JSON array")
    return [RegistryResource.from_dict(item) for item in payload]
