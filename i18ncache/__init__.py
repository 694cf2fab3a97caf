"""i18n-cache: gettext catalog translation with cache-backed loading.

Example:
    from i18ncache import InMemoryCache, Translator

    translator = Translator(cache=InMemoryCache())
    translator.bind_domain("dom1", "locale/dom1")
    translator.set_language("es")
    translator.translate("Yes", "dom1")
"""

from i18ncache.cache import CacheBackend, InMemoryCache, create_cache_backend
from i18ncache.core.exceptions import (
    CacheBackendError,
    ConfigurationError,
    I18nError,
    SerializationError,
)
from i18ncache.i18n import (
    LoadTier,
    LookupResult,
    Translator,
    create_translator,
    get_key,
)

__all__ = [
    "CacheBackend",
    "CacheBackendError",
    "ConfigurationError",
    "I18nError",
    "InMemoryCache",
    "LoadTier",
    "LookupResult",
    "SerializationError",
    "Translator",
    "create_cache_backend",
    "create_translator",
    "get_key",
]
