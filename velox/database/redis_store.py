"""Redis implementation of the key-value store."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from .base import KeyValueStore
from ..errors import StoreQueryError, StoreUnavailableError


class RedisStore(KeyValueStore):
    """Redis-backed store for URL mappings.

    Each command borrows a connection from a bounded pool and returns it
    when the command completes, on success or failure. A full pool fails
    immediately instead of waiting, and failed commands are not retried.
    """

    def __init__(
        self,
        redis_url: str,
        max_connections: int = 16,
        connect_timeout: Optional[float] = 5.0,
        logger: Optional[logging.Logger] = None,
        client: Optional[redis.Redis] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            max_connections: Maximum size of the connection pool
            connect_timeout: Socket connect timeout in seconds
            logger: Optional logger instance
            client: Optional pre-built client, used instead of creating a pool
        """
        self.redis_url = redis_url
        self.logger = logger or logging.getLogger(__name__)

        if client is not None:
            self.pool = client.connection_pool
            self.client = client
        else:
            self.pool = redis.ConnectionPool.from_url(
                redis_url,
                max_connections=max_connections,
                socket_connect_timeout=connect_timeout,
                retry=Retry(NoBackoff(), 0),
                encoding="utf-8",
                decode_responses=True,
            )
            self.client = redis.Redis(connection_pool=self.pool)

        self.logger.debug(
            f"Redis store configured for {redis_url} "
            f"(max_connections={max_connections})"
        )

    @asynccontextmanager
    async def _command(self, name: str):
        """Translate redis-py failures raised by a command into store errors."""
        try:
            yield
        except (RedisConnectionError, RedisTimeoutError) as e:
            self.logger.error(f"Redis unavailable during {name}: {e}")
            raise StoreUnavailableError(str(e)) from e
        except RedisError as e:
            self.logger.error(f"Redis {name} failed: {e}")
            raise StoreQueryError(str(e)) from e

    async def put(self, key: str, value: str) -> None:
        """Store value at key, overwriting any existing value."""
        async with self._command("SET"):
            await self.client.set(key, value)

    async def get(self, key: str) -> Optional[str]:
        """Get the value at key, or None if it does not exist."""
        async with self._command("GET"):
            return await self.client.get(key)

    async def ping(self) -> None:
        """Check that a pooled connection can be obtained."""
        async with self._command("PING"):
            await self.client.ping()

    async def close(self) -> None:
        """Close the client and disconnect pooled connections."""
        await self.client.aclose()
        await self.pool.disconnect()
        self.logger.info("Redis connection pool closed")
