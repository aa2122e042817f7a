"""Core business logic for the Velox URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .context import AppContext

__all__ = ["ShortCodeGenerator", "URLShortenerService", "AppContext"]
