"""Abstract base class for key-value store implementations."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Flat key to value store holding short code -> original URL."""

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store a value, overwriting any existing value at key.

        Args:
            key: The key to write
            value: The value to store

        Raises:
            StoreUnavailableError: If no connection could be obtained
            StoreQueryError: If the write command failed
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the value stored at key.

        Args:
            key: The key to look up

        Returns:
            The stored value, or None if key does not exist

        Raises:
            StoreUnavailableError: If no connection could be obtained
            StoreQueryError: If the read command failed
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Check that a connection can currently be obtained.

        Raises:
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
