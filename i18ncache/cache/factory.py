"""Cache backend factory."""

from typing import Optional

from i18ncache.cache.backend import CacheBackend
from i18ncache.cache.memory import InMemoryCache
from i18ncache.core.config import CacheSettings, settings
from i18ncache.core.logging import get_module_logger
from i18ncache.core.exceptions import ConfigurationError

logger = get_module_logger()

SUPPORTED_BACKENDS = ("none", "memory", "redis")


def create_cache_backend(
    cache_settings: Optional[CacheSettings] = None,
) -> Optional[CacheBackend]:
    """Build the cache backend selected by configuration.

    Args:
        cache_settings: Cache settings (default: global settings.cache).

    Returns:
        A CacheBackend, or None when translations stay in translator memory.

    Raises:
        ConfigurationError: If the backend name is not supported.
    """
    cache_settings = cache_settings or settings.cache
    backend = cache_settings.backend.lower()

    if backend == "none":
        logger.info("cache_backend_disabled")
        return None

    if backend == "memory":
        return InMemoryCache(max_entries=cache_settings.max_entries)

    if backend == "redis":
        # Imported lazily so the redis client is only created when selected
        from i18ncache.cache.redis_cache import RedisCache, create_redis_client

        return RedisCache(
            client=create_redis_client(cache_settings),
            prefix=cache_settings.redis_prefix,
            ttl_seconds=cache_settings.redis_ttl_seconds,
        )

    raise ConfigurationError(
        f"Unsupported cache backend: {cache_settings.backend} "
        f"(expected one of {', '.join(SUPPORTED_BACKENDS)})"
    )
