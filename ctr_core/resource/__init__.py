"""Registry resource model, managed-resource capability, and host validation."""

from .errors import MalformedEncodingError, ResourceError
from .hostname import is_valid_host_reference
from .managed import ManagedResource, ResourceLabelKeys
from .registry import (
    RegistryResource,
    decode_registries,
    decode_registry,
    encode_registries,
    encode_registry,
)

__all__ = [
    "ManagedResource",
    "ResourceLabelKeys",
    "RegistryResource",
    "ResourceError",
    "MalformedEncodingError",
    "is_valid_host_reference",
    "encode_registry",
    "encode_registries",
    "decode_registry",
    "decode_registries",
]
