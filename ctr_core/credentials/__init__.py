"""Credential store package for registry logins."""

from .errors import CorruptStoreError, CredentialStoreError
from .store import CredentialStore, FileCredentialStore, MemoryCredentialStore
from .types import RegistryInfo

__all__ = [
    "RegistryInfo",
    "CredentialStore",
    "FileCredentialStore",
    "MemoryCredentialStore",
    "CredentialStoreError",
    "CorruptStoreError",
]
