"""Application context shared by every request handler."""

from dataclasses import dataclass

from config import Config
from .database.base import KeyValueStore
from .service import URLShortenerService


@dataclass(frozen=True)
class AppContext:
    """Startup-built, read-only bundle of configuration and store handles."""

    config: Config
    store: KeyValueStore
    service: URLShortenerService

    @classmethod
    def build(cls, config: Config, store: KeyValueStore, logger=None) -> "AppContext":
        """Wire a service around store and bundle it with config."""
        service = URLShortenerService(store=store, logger=logger)
        return cls(config=config, store=store, service=service)
