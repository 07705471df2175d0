"""Registry host reference validation.

Mirrors the domain part of the OCI distribution reference grammar::

    domain-component := [a-zA-Z0-9] | [a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9]
    domain-name      := domain-component ("." domain-component)*
    ipv6-literal     := "[" [a-fA-F0-9:]+ "]"
    reference        := (domain-name | ipv6-literal) (":" [0-9]+)?
"""

from __future__ import annotations

import re

_DOMAIN_COMPONENT = r"(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])"
_DOMAIN_NAME = rf"{_DOMAIN_COMPONENT}(?:\.{_DOMAIN_COMPONENT})*"
_IPV6_LITERAL = r"\[[a-fA-F0-9:]+\]"
_OPTIONAL_PORT = r"(?::[0-9]+)?"
_HOST_REFERENCE_RE = re.compile(rf"(?:{_DOMAIN_NAME}|{_IPV6_LITERAL}){_OPTIONAL_PORT}")


def is_valid_host_reference(candidate: str) -> bool:
    """Return ``True`` when ``candidate`` is a syntactically valid registry host.

    Accepts DNS names, bracketed IPv6 literals, and either form followed by
    ``:<port>`` (e.g. ``docker.io``, ``localhost:5000``, ``[::1]:5000``).
    The IPv6 contents and the port value are only checked by character class.
    """

    if not isinstance(candidate, str):
        return False
    return _HOST_REFERENCE_RE.fullmatch(candidate) is not None
