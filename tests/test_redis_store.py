"""Tests for the Redis store adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import (
    AuthenticationError,
    ConnectionError as RedisConnectionError,
    ResponseError,
    TimeoutError as RedisTimeoutError,
)

from velox.database.redis_store import RedisStore
from velox.errors import StoreQueryError, StoreUnavailableError


@pytest.fixture
def redis_client():
    """Mocked redis.asyncio client."""
    client = MagicMock()
    client.set = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=None)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    client.connection_pool.disconnect = AsyncMock()
    return client


@pytest.fixture
def redis_store(redis_client, logger):
    return RedisStore(redis_url="redis://127.0.0.1:6379/0", client=redis_client, logger=logger)


class TestRedisStore:
    """Test command dispatch and error translation."""

    async def test_put_sets_key(self, redis_store, redis_client):
        """put issues a plain SET with no expiry."""
        await redis_store.put("abc123", "https://example.com")

        redis_client.set.assert_awaited_once_with("abc123", "https://example.com")

    async def test_get_returns_value(self, redis_store, redis_client):
        redis_client.get.return_value = "https://example.com"

        assert await redis_store.get("abc123") == "https://example.com"
        redis_client.get.assert_awaited_once_with("abc123")

    async def test_get_missing_key_returns_none(self, redis_store):
        """A missing key is not an error."""
        assert await redis_store.get("missing") is None

    async def test_ping(self, redis_store, redis_client):
        await redis_store.ping()

        redis_client.ping.assert_awaited_once()

    @pytest.mark.parametrize("error", [
        RedisConnectionError("Error 111 connecting to 127.0.0.1:6379. Connection refused."),
        RedisConnectionError("Too many connections"),
        RedisTimeoutError("Timeout connecting to server"),
        AuthenticationError("invalid password"),
    ])
    async def test_connection_failures_are_unavailable(self, redis_store, redis_client, error):
        """Connectivity and pool failures become StoreUnavailableError."""
        redis_client.set.side_effect = error
        redis_client.get.side_effect = error
        redis_client.ping.side_effect = error

        with pytest.raises(StoreUnavailableError):
            await redis_store.put("abc123", "https://example.com")
        with pytest.raises(StoreUnavailableError):
            await redis_store.get("abc123")
        with pytest.raises(StoreUnavailableError):
            await redis_store.ping()

    async def test_command_failure_is_query_error(self, redis_store, redis_client):
        """Errors returned by Redis become StoreQueryError."""
        redis_client.set.side_effect = ResponseError("OOM command not allowed")
        redis_client.get.side_effect = ResponseError("WRONGTYPE Operation against a key")

        with pytest.raises(StoreQueryError):
            await redis_store.put("abc123", "https://example.com")
        with pytest.raises(StoreQueryError):
            await redis_store.get("abc123")

    async def test_close_disconnects_pool(self, redis_store, redis_client):
        await redis_store.close()

        redis_client.aclose.assert_awaited_once()
        redis_client.connection_pool.disconnect.assert_awaited_once()


class TestRedisStorePool:
    """Test pool construction."""

    async def test_pool_from_url(self, logger):
        """The store builds a bounded pool from the URL without connecting."""
        store = RedisStore(
            redis_url="redis://redis.internal:6380/2",
            max_connections=4,
            logger=logger,
        )

        assert store.pool.max_connections == 4
        assert store.pool.connection_kwargs["host"] == "redis.internal"
        assert store.pool.connection_kwargs["port"] == 6380
        assert store.pool.connection_kwargs["db"] == 2
        assert store.pool.connection_kwargs["decode_responses"] is True

        await store.close()

    async def test_unreachable_store_is_unavailable(self, logger):
        """Pointing at a closed port surfaces as StoreUnavailableError."""
        store = RedisStore(
            redis_url="redis://127.0.0.1:1/0",
            connect_timeout=1.0,
            logger=logger,
        )

        with pytest.raises(StoreUnavailableError):
            await store.ping()

        await store.close()
