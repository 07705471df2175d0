"""Typed errors raised by registry resource helpers."""

from __future__ import annotations


class ResourceError(Exception):
    """Base class for resource errors."""


class MalformedEncodingError(ResourceError, ValueError):
    """Raised when an encoded resource is missing fields or has the wrong shape."""
