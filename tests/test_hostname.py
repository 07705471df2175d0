"""Tests for registry host reference validation."""

from __future__ import annotations

import pytest

from ctr_core.resource import is_valid_host_reference


@pytest.mark.parametrize(
    "candidate",
    [
        "docker.io",
        "ghcr.io",
        "registry.example.com",
        "registry.k8s.io",
        "localhost",
        "localhost:5000",
        "a",
        "a-b.c",
        "Registry.Example.COM",
        "10.0.0.1:443",
        "[::1]",
        "[::1]:5000",
        "[2001:db8::1]:8080",
        "registry:999999",
    ],
)
def test_valid_references(candidate: str) -> None:
    assert is_valid_host_reference(candidate)


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "-invalid.com",
        "invalid-.com",
        "invalid..com",
        ".invalid.com",
        "invalid.com.",
        "host:",
        "host:port",
        "host:50:00",
        "[]",
        "[::g]",
        "::1",
        "[::1]:",
        "docker.io/library",
        "https://docker.io",
        "under_score.io",
        "dockér.io",
        "docker.io\n",
        " docker.io",
        "localhost:５０００",
    ],
)
def test_invalid_references(candidate: str) -> None:
    assert not is_valid_host_reference(candidate)


def test_non_string_input_is_invalid() -> None:
    assert not is_valid_host_reference(None)  # type: ignore[arg-type]
    assert not is_valid_host_reference(5000)  # type: ignore[arg-type]
