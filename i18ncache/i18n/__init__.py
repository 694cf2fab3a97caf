"""i18n system - gettext catalog translation with cache-backed loading.

Main components:
- keys: get_key() building bounded, backend-safe cache keys
- sources: CatalogSourceReader and the polib-based POCatalogReader
- snapshots: SnapshotStore for compiled catalog snapshots
- freshness: StalenessTracker comparing source mtimes with cached records
- loader: DomainCatalogLoader choosing snapshot, cached or source data
- plurals: plural offset rules
- translator: Translator service
- factory: create_translator() from settings
"""

from i18ncache.i18n.factory import create_translator
from i18ncache.i18n.freshness import StalenessTracker
from i18ncache.i18n.keys import get_key
from i18ncache.i18n.loader import DomainCatalogLoader
from i18ncache.i18n.models import (
    INVALID_ENTRY,
    LoadTier,
    LookupResult,
    TranslationEntry,
    clean_domain,
    compose_locale,
)
from i18ncache.i18n.plurals import default_plural_rule, locale_plural_rule
from i18ncache.i18n.snapshots import SnapshotStore
from i18ncache.i18n.sources import CatalogSourceReader, POCatalogReader
from i18ncache.i18n.translator import Translator

__all__ = [
    "INVALID_ENTRY",
    "CatalogSourceReader",
    "DomainCatalogLoader",
    "LoadTier",
    "LookupResult",
    "POCatalogReader",
    "SnapshotStore",
    "StalenessTracker",
    "TranslationEntry",
    "Translator",
    "clean_domain",
    "compose_locale",
    "create_translator",
    "default_plural_rule",
    "get_key",
    "locale_plural_rule",
]
