"""Validation utilities for the Velox URL shortener."""

import re
from urllib.parse import urlsplit

from ..errors import InvalidURLError


SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")

# Schemes whose URLs must carry an authority ("scheme://host")
AUTHORITY_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

FORBIDDEN_HOST_CHARS = set(" %<>\\^|")


def _unsendable(char: str) -> bool:
    code = ord(char)
    return code < 0x20 or code == 0x7F or 0xD800 <= code <= 0xDFFF


def validate_url(candidate: str) -> None:
    """Validate that a string is a syntactically valid absolute URL.

    Any scheme is accepted. Schemes that name a network host (http, https,
    ftp, ws, wss) must be followed by ``//`` and a non-empty host, so
    ``ftp:/bad`` is rejected. Reachability is not checked.

    The URL is stored and later sent back verbatim in a Location header, so
    control characters, lone surrogates and leading or trailing spaces are
    rejected. Spaces inside the path or query are allowed.

    Args:
        candidate: The URL to validate

    Raises:
        InvalidURLError: If the string is not a valid absolute URL
    """
    if not candidate or not isinstance(candidate, str):
        raise InvalidURLError()

    if candidate != candidate.strip(" "):
        raise InvalidURLError()

    if any(_unsendable(c) for c in candidate):
        raise InvalidURLError()

    scheme, sep, _ = candidate.partition(":")
    if not sep or not SCHEME_RE.match(scheme):
        raise InvalidURLError()

    try:
        parts = urlsplit(candidate)
        # Malformed IPv6 brackets and bad ports raise ValueError
        parts.port
    except ValueError:
        raise InvalidURLError()

    if scheme.lower() not in AUTHORITY_SCHEMES:
        return

    host = parts.hostname
    if not host:
        raise InvalidURLError()

    if "[" not in parts.netloc and FORBIDDEN_HOST_CHARS & set(host):
        raise InvalidURLError()
