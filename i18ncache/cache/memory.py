"""In-memory cache backend."""

from collections import OrderedDict
from typing import Any, Mapping, Optional

from i18ncache.cache.backend import CacheBackend
from i18ncache.core.logging import get_module_logger

logger = get_module_logger()


class InMemoryCache(CacheBackend):
    """Process-local cache backend.

    Suitable for single-process deployments and tests. When max_entries is
    set, the least recently used entry is evicted once the bound is
    exceeded, which makes it behave like a shared evicting cache.

    Attributes:
        max_entries: Optional size bound (None means unbounded).
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be a positive integer")

        self.max_entries = max_entries
        self._data: "OrderedDict[str, Any]" = OrderedDict()
        logger.info("initialized_memory_cache", max_entries=max_entries)

    def get(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        self._data.move_to_end(key)
        return self._data[key]

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._data.move_to_end(key)
        self._evict()

    def set_many(self, mapping: Mapping[str, Any]) -> None:
        for key, value in mapping.items():
            self._data[key] = value
            self._data.move_to_end(key)
        self._evict()

    def clear(self) -> None:
        self._data.clear()
        logger.debug("memory_cache_cleared")

    def delete(self, key: str) -> bool:
        """Remove a single entry.

        Args:
            key: Cache key.

        Returns:
            True if an entry was removed.
        """
        return self._data.pop(key, None) is not None

    def _evict(self) -> None:
        if self.max_entries is None:
            return
        while len(self._data) > self.max_entries:
            key, _ = self._data.popitem(last=False)
            logger.debug("memory_cache_evicted", key=key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
