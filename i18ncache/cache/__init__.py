"""Translation cache backends.

Provides the minimal key/value contract consumed by the translator and the
concrete backends shipped with the library.

Usage:

    from i18ncache.cache import InMemoryCache

    cache = InMemoryCache()
    cache.set_many({"Yes.dom1.es": "Si"})
    cache.get("Yes.dom1.es")
"""

from i18ncache.cache.backend import CacheBackend
from i18ncache.cache.factory import create_cache_backend
from i18ncache.cache.memory import InMemoryCache

__all__ = [
    "CacheBackend",
    "InMemoryCache",
    "create_cache_backend",
]
