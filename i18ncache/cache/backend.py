"""Cache backend abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class CacheBackend(ABC):
    """Abstract base class for translation cache backends.

    Defines the minimal key/value contract the translator relies on. A
    backend may be process-local memory or a shared network cache that
    evicts entries on its own; the translator never assumes an entry it
    wrote is still present.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the value stored under key.

        Args:
            key: Cache key.

        Returns:
            Stored value or None if absent.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, overwriting any existing value.

        Args:
            key: Cache key.
            value: Value to store.

        Raises:
            CacheBackendError: If the backend cannot be written.
        """
        pass

    @abstractmethod
    def set_many(self, mapping: Mapping[str, Any]) -> None:
        """Store every key/value pair of mapping, overwriting on conflict.

        Args:
            mapping: Keys and values to store in one batch.

        Raises:
            CacheBackendError: If the backend cannot be written.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry owned by this backend."""
        pass
