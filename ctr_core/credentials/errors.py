"""Typed credential store errors."""

from __future__ import annotations


class CredentialStoreError(RuntimeError):
    """Base credential store error."""


class CorruptStoreError(CredentialStoreError):
    """The backing file exists but cannot be read as a registry store."""
