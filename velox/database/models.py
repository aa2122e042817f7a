"""Data models for the Velox URL shortener."""

from dataclasses import dataclass


@dataclass(frozen=True)
class URLMapping:
    """A short code and the original URL it resolves to.

    The short code is the store key and the original URL the stored value.
    """

    short_code: str
    original: str
