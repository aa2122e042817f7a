"""Common utilities for the Velox URL shortener."""

from .validators import validate_url
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "validate_url",
    "build_short_url",
    "setup_logging",
]
