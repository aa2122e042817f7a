"""Pytest configuration and fixtures."""

from typing import Dict, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from velox.context import AppContext
from velox.database.base import KeyValueStore
from velox.errors import StoreQueryError, StoreUnavailableError
from velox.service import URLShortenerService
from velox.shortcode import ShortCodeGenerator
from velox.common.logging_config import setup_logging
from web_app import create_app


class InMemoryStore(KeyValueStore):
    """Dict-backed store that can simulate Redis outages."""

    def __init__(self):
        self.data: Dict[str, str] = {}
        self.unavailable = False
        self.query_error = False
        self.closed = False

    def _check(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError("connection refused")
        if self.query_error:
            raise StoreQueryError("WRONGTYPE Operation against a key")

    async def put(self, key: str, value: str) -> None:
        self._check()
        self.data[key] = value

    async def get(self, key: str) -> Optional[str]:
        self._check()
        return self.data.get(key)

    async def ping(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError("connection refused")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store():
    """Create in-memory store."""
    return InMemoryStore()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator()


@pytest.fixture
def service(store, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(base_url="http://testserver")


@pytest.fixture
def app(config, store, service):
    """Create test FastAPI app."""
    context = AppContext(config=config, store=store, service=service)
    return create_app(context)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/page",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
