"""Domain catalog loading.

Moves one domain's catalog for the active locale into the cache backend (or
the translator's in-memory catalog when no backend is configured), choosing
the cheapest tier that yields current data:

1. Compiled snapshot, when it is strictly newer than the source file.
2. Nothing at all, when the backend's freshness record matches the source.
3. The source file itself, parsed by the catalog source reader.
"""

from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

from i18ncache.cache.backend import CacheBackend
from i18ncache.core.logging import get_module_logger
from i18ncache.i18n.freshness import StalenessTracker, source_mtime
from i18ncache.i18n.keys import get_key
from i18ncache.i18n.models import LoadTier, TranslationEntry
from i18ncache.i18n.snapshots import SnapshotStore
from i18ncache.i18n.sources import CatalogSourceReader, POCatalogReader

logger = get_module_logger()


class DomainCatalogLoader:
    """Loads domain catalogs through the snapshot, freshness and source tiers.

    Attributes:
        reader: Catalog source reader (defaults to PO files).
        cache: Cache backend, or None to fill ``catalog`` instead.
        requires_cleaning: Whether generated keys must be backend-safe.
        snapshots: Snapshot store enabling the compiled tier, or None.
        tracker: Freshness record reader/writer bound to ``cache``.
        catalog: In-memory key -> string mapping used without a backend.
    """

    def __init__(
        self,
        reader: Optional[CatalogSourceReader] = None,
        cache: Optional[CacheBackend] = None,
        requires_cleaning: bool = True,
        snapshots: Optional[SnapshotStore] = None,
    ):
        self.reader = reader or POCatalogReader()
        self.cache = cache
        self.requires_cleaning = requires_cleaning
        self.snapshots = snapshots
        self.tracker = StalenessTracker(cache)
        self.catalog: Dict[str, str] = {}

    def set_cache(self, cache: Optional[CacheBackend], requires_cleaning: bool) -> None:
        """Switch the data path to a different backend."""
        self.cache = cache
        self.requires_cleaning = requires_cleaning
        self.tracker = StalenessTracker(cache)

    def reset_catalog(self) -> None:
        """Discard the in-memory catalog."""
        self.catalog = {}

    def load(
        self,
        domain: str,
        directory: Union[str, Path],
        locale: str,
        force: bool = False,
    ) -> LoadTier:
        """Load one domain's catalog for a locale.

        Args:
            domain: Normalized domain name.
            directory: Directory holding the domain's source files.
            locale: Active locale.
            force: Ignore the backend's freshness record (used after an
                entry was evicted while the record survived).

        Returns:
            The tier that satisfied the load.

        Raises:
            ValueError: If the source file cannot be parsed.
            SerializationError: If the snapshot cannot be encoded.
            CacheBackendError: If the backend cannot be written.
        """
        source = Path(directory) / self.reader.filename(locale)
        log = logger.bind(domain=domain, locale=locale, source=str(source))

        try:
            mtime = source_mtime(source)
        except FileNotFoundError:
            log.debug("catalog_source_missing")
            return LoadTier.MISSING

        if self.snapshots is not None:
            snapshot_mtime = self.snapshots.modified_time(locale, domain, self._raw_keys)
            if snapshot_mtime is not None and snapshot_mtime > mtime:
                if not force and self._is_fresh(domain, locale, mtime):
                    log.debug("catalog_already_cached")
                    return LoadTier.FRESH

                data = self.snapshots.read(locale, domain, self._raw_keys)
                if data is not None:
                    self._store(data)
                    self.tracker.mark_loaded(domain, locale, mtime)
                    log.info("catalog_loaded_from_snapshot", entry_count=len(data))
                    return LoadTier.SNAPSHOT

                log.warning("catalog_snapshot_ignored")

        if not force and self._is_fresh(domain, locale, mtime):
            log.debug("catalog_already_cached")
            return LoadTier.FRESH

        data = self.compile(domain, locale, self.reader.read(source))
        self._store(data)
        self.tracker.mark_loaded(domain, locale, mtime)
        log.info("catalog_loaded_from_source", entry_count=len(data))

        if self.snapshots is not None:
            self.snapshots.write(locale, domain, data, raw_keys=self._raw_keys)

        return LoadTier.SOURCE

    def compile(
        self,
        domain: str,
        locale: str,
        entries: Iterable[TranslationEntry],
    ) -> Dict[str, str]:
        """Turn catalog entries into cache keys and translated strings.

        The singular form is stored under the msgid key. Plural forms 1..n
        are stored under the msgid_plural key with the form index as offset.
        Entries without any translation and empty plural forms are skipped.

        Args:
            domain: Normalized domain name.
            locale: Locale the entries belong to.
            entries: Parsed catalog entries.

        Returns:
            Key -> translated string mapping.
        """
        data: Dict[str, str] = {}
        skipped = 0

        for entry in entries:
            if not entry.has_translation:
                skipped += 1
                continue

            singular = entry.translations[0]
            if singular:
                key = self._key(entry.msgid, domain, entry.context, locale, None)
                data[key] = singular

            if entry.is_plural:
                for offset in range(1, len(entry.translations)):
                    text = entry.translations[offset]
                    if not text:
                        continue
                    key = self._key(entry.msgid_plural, domain, entry.context, locale, offset)
                    data[key] = text

        if skipped:
            logger.debug(
                "untranslated_entries_skipped",
                domain=domain,
                locale=locale,
                count=skipped,
            )

        return data

    def _key(
        self,
        msg_id: str,
        domain: str,
        context: Optional[str],
        locale: str,
        offset: Optional[int],
    ) -> str:
        return get_key(msg_id, domain, context, locale, offset, self.requires_cleaning)

    @property
    def _raw_keys(self) -> bool:
        return not self.requires_cleaning

    def _is_fresh(self, domain: str, locale: str, mtime: int) -> bool:
        return self.cache is not None and self.tracker.is_fresh(domain, locale, mtime)

    def _store(self, data: Mapping[str, str]) -> None:
        if self.cache is not None:
            self.cache.set_many(data)
        else:
            self.catalog.update(data)
