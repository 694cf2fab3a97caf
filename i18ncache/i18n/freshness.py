"""Staleness tracking for cached catalogs.

The backend keeps one record per locale and domain holding the source file
modification time the catalog was loaded from. Processes sharing a backend
agree on freshness without coordinating: a catalog is fresh only when the
record equals the current mtime exactly.
"""

import os
from pathlib import Path
from typing import Optional, Union

from i18ncache.cache.backend import CacheBackend
from i18ncache.core.logging import get_module_logger
from i18ncache.i18n.keys import freshness_key

logger = get_module_logger()


def source_mtime(path: Union[str, Path]) -> int:
    """Modification time of a source file in integer nanoseconds."""
    return os.stat(path).st_mtime_ns


class StalenessTracker:
    """Compares source file mtimes against the backend's freshness records.

    Attributes:
        cache: Backend holding the records, or None (everything is stale).
    """

    def __init__(self, cache: Optional[CacheBackend] = None):
        self.cache = cache

    def loaded_mtime(self, domain: str, locale: str) -> Optional[int]:
        """Source mtime recorded at the last full load, or None.

        Backends that only store strings hand the value back as text, so it
        is converted; an unparseable record counts as absent.
        """
        if self.cache is None:
            return None

        stored = self.cache.get(freshness_key(locale, domain))
        if stored is None:
            return None

        try:
            return int(stored)
        except (TypeError, ValueError):
            logger.warning(
                "invalid_freshness_record",
                domain=domain,
                locale=locale,
                value=repr(stored),
            )
            return None

    def is_fresh(self, domain: str, locale: str, mtime: int) -> bool:
        """Check whether the backend holds the catalog loaded from mtime.

        Args:
            domain: Domain name.
            locale: Active locale.
            mtime: Current source file mtime.

        Returns:
            True only if a record exists and equals mtime.
        """
        return self.loaded_mtime(domain, locale) == mtime

    def mark_loaded(self, domain: str, locale: str, mtime: int) -> None:
        """Record that the backend now holds the catalog loaded from mtime."""
        if self.cache is None:
            return
        self.cache.set(freshness_key(locale, domain), mtime)
        logger.debug("freshness_recorded", domain=domain, locale=locale, mtime=mtime)
