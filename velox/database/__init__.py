"""Storage layer for the Velox URL shortener."""

from .base import KeyValueStore
from .redis_store import RedisStore
from .models import URLMapping

__all__ = ["KeyValueStore", "RedisStore", "URLMapping"]
