"""Business logic service for the Velox URL shortener."""

import logging
from typing import Optional

from .shortcode import ShortCodeGenerator
from .database.base import KeyValueStore
from .database.models import URLMapping
from .common.validators import validate_url
from .errors import StoreError


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: KeyValueStore,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL shortener service.

        Args:
            store: Key-value store holding the URL mappings
            short_code_generator: Optional short code generator
            logger: Optional logger
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)

    async def create_short_url(self, original_url: str) -> URLMapping:
        """Create a new short URL.

        The generated code is written without checking for an existing
        mapping, so a colliding code overwrites the older one.

        Args:
            original_url: The original long URL

        Returns:
            The stored URL mapping

        Raises:
            InvalidURLError: If the URL is not well formed
            StoreError: If the mapping could not be stored
        """
        validate_url(original_url)

        short_code = self.generator.generate()
        await self.store.put(short_code, original_url)

        self.logger.info(f"Created shortened URL: {short_code} -> {original_url}")

        return URLMapping(short_code=short_code, original=original_url)

    async def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found
        """
        original_url = await self.store.get(short_code)

        if original_url is None:
            self.logger.debug(f"Short code not found: {short_code}")
        else:
            self.logger.debug(f"Retrieved URL: {short_code} -> {original_url}")

        return original_url

    async def health_check(self) -> bool:
        """Check whether the store can be reached."""
        try:
            await self.store.ping()
        except StoreError as e:
            self.logger.warning(f"Health check failed: {e}")
            return False
        return True

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
