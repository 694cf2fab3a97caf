"""Redis/Valkey cache backend.

Stores translations in a shared Redis database so several processes can
reuse one parsed catalog. Entries may be evicted by the server at any time;
the translator detects this and reloads.

Usage:
    from i18ncache.cache.redis_cache import RedisCache

    cache = RedisCache(prefix="myapp-i18n")
    translator = Translator(cache=cache)
"""

from typing import Any, Mapping, Optional

from redis import ConnectionPool, Redis, RedisError  # type: ignore
from redis.exceptions import ConnectionError, TimeoutError  # type: ignore

from i18ncache.cache.backend import CacheBackend
from i18ncache.core.config import CacheSettings, settings
from i18ncache.core.exceptions import CacheBackendError
from i18ncache.core.logging import get_module_logger

logger = get_module_logger()


def create_redis_client(cache_settings: Optional[CacheSettings] = None) -> Redis:
    """Create a Redis client with connection pooling.

    Args:
        cache_settings: Connection settings (default: global settings.cache).

    Returns:
        Redis: client decoding responses to str
    """
    cache_settings = cache_settings or settings.cache
    pool = ConnectionPool(
        host=cache_settings.redis_host,
        port=cache_settings.redis_port,
        db=cache_settings.redis_db,
        decode_responses=True,
        max_connections=10,
        socket_timeout=5,
        socket_connect_timeout=5,
        retry_on_timeout=True,
        health_check_interval=30,
    )
    logger.info(
        "redis_connection_pool_created",
        host=cache_settings.redis_host,
        port=cache_settings.redis_port,
        db=cache_settings.redis_db,
    )
    return Redis(connection_pool=pool)


class RedisCache(CacheBackend):
    """Redis-backed translation cache.

    Every key is namespaced with ``<prefix>:`` so clear() only removes the
    translator's own entries from a shared database. Values come back as
    strings; integers written as freshness records must be converted by the
    reader.

    Read failures are logged and reported as a miss. Write failures are
    logged and raised as CacheBackendError.

    Attributes:
        client: Redis client.
        prefix: Key namespace.
        ttl_seconds: Optional expiry applied to every write.
    """

    def __init__(
        self,
        client: Optional[Redis] = None,
        prefix: str = "i18n",
        ttl_seconds: Optional[int] = None,
    ):
        self.client = client if client is not None else create_redis_client()
        self.prefix = prefix
        self.ttl_seconds = ttl_seconds
        logger.info(
            "initialized_redis_cache",
            prefix=prefix,
            ttl_seconds=ttl_seconds,
        )

    def _make_key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    def get(self, key: str) -> Optional[Any]:
        """Get a value, treating connection failures as a miss.

        Args:
            key: Cache key (without prefix).

        Returns:
            Stored string or None if absent or unreachable.
        """
        try:
            return self.client.get(self._make_key(key))
        except (ConnectionError, TimeoutError) as e:
            logger.error("redis_get_connection_error", key=key, error=str(e))
            return None
        except RedisError as e:
            logger.error("redis_get_error", key=key, error=str(e))
            return None

    def set(self, key: str, value: Any) -> None:
        try:
            if self.ttl_seconds:
                self.client.setex(self._make_key(key), self.ttl_seconds, value)
            else:
                self.client.set(self._make_key(key), value)
        except RedisError as e:
            logger.error("redis_set_error", key=key, error=str(e))
            raise CacheBackendError(f"Redis write failed for key {key}: {e}") from e

    def set_many(self, mapping: Mapping[str, Any]) -> None:
        if not mapping:
            return
        try:
            pipe = self.client.pipeline(transaction=False)
            for key, value in mapping.items():
                if self.ttl_seconds:
                    pipe.setex(self._make_key(key), self.ttl_seconds, value)
                else:
                    pipe.set(self._make_key(key), value)
            pipe.execute()
            logger.debug("redis_set_many", count=len(mapping))
        except RedisError as e:
            logger.error("redis_set_many_error", count=len(mapping), error=str(e))
            raise CacheBackendError(f"Redis batch write of {len(mapping)} keys failed: {e}") from e

    def clear(self) -> None:
        try:
            deleted = 0
            for redis_key in self.client.scan_iter(match=f"{self.prefix}:*"):
                deleted += self.client.delete(redis_key)
            logger.info("redis_cache_cleared", prefix=self.prefix, deleted=deleted)
        except RedisError as e:
            logger.error("redis_clear_error", prefix=self.prefix, error=str(e))
            raise CacheBackendError(f"Redis clear failed for prefix {self.prefix}: {e}") from e
