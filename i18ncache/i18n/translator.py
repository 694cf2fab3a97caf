"""Translator service resolving message ids to localized strings.

Core component of the i18n system: owns the domain registry and the active
locale, drives the domain catalog loader whenever the locale changes, and
fetches translations from the cache backend with self-healing when a shared
cache has evicted an entry.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from i18ncache.cache.backend import CacheBackend
from i18ncache.core.exceptions import CacheBackendError, ConfigurationError
from i18ncache.core.logging import get_module_logger
from i18ncache.i18n.keys import get_key
from i18ncache.i18n.loader import DomainCatalogLoader
from i18ncache.i18n.models import (
    INVALID_ENTRY,
    LoadTier,
    LookupResult,
    clean_domain,
    compose_locale,
)
from i18ncache.i18n.plurals import PluralRule, default_plural_rule
from i18ncache.i18n.snapshots import SnapshotStore
from i18ncache.i18n.sources import CatalogSourceReader

logger = get_module_logger()


class Translator:
    """Service for translating messages from gettext catalogs.

    Translations live either in a cache backend (shared, possibly evicting)
    or, without one, in an in-memory catalog rebuilt on every locale change.
    Never both.

    Usage:
        translator = Translator(cache=InMemoryCache())
        translator.bind_domain("dom1", "/app/locale/dom1").set_default_domain("dom1")
        translator.set_language("es")

        translator.translate("Yes")                               # "Si"
        translator.translate_plural("1 item", "%d items", 5)      # "%d artículos"

    Attributes:
        plural_rule: Callable mapping (count, locale) to a plural offset.
    """

    def __init__(
        self,
        cache: Optional[CacheBackend] = None,
        requires_cleaning: bool = True,
        reader: Optional[CatalogSourceReader] = None,
        plural_rule: Optional[PluralRule] = None,
    ):
        """Initialize Translator.

        Args:
            cache: Cache backend; None keeps translations in local memory.
            requires_cleaning: True if the backend only accepts short, safe keys.
            reader: Catalog source reader (default: PO files).
            plural_rule: Plural offset policy (default: two-form rule).
        """
        self._loader = DomainCatalogLoader(
            reader=reader,
            cache=cache,
            requires_cleaning=requires_cleaning,
        )
        self._domains: Dict[str, Path] = {}
        self._default_domain: Optional[str] = None
        self._locale: Optional[str] = None
        self.plural_rule: PluralRule = plural_rule or default_plural_rule

        logger.info(
            "initialized_translator",
            cache=type(cache).__name__ if cache is not None else None,
            requires_cleaning=requires_cleaning,
        )

    @property
    def cache(self) -> Optional[CacheBackend]:
        return self._loader.cache

    @property
    def requires_cleaning(self) -> bool:
        return self._loader.requires_cleaning

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @property
    def default_domain(self) -> Optional[str]:
        return self._default_domain

    @property
    def domains(self) -> Dict[str, Path]:
        return dict(self._domains)

    @property
    def loader(self) -> DomainCatalogLoader:
        return self._loader

    def set_cache(self, cache: CacheBackend, requires_cleaning: bool = True) -> "Translator":
        """Attach a cache backend.

        Args:
            cache: Backend to use from now on.
            requires_cleaning: True if the backend only accepts short, safe keys.

        Returns:
            self, for chaining.
        """
        self._loader.set_cache(cache, requires_cleaning)
        self._loader.reset_catalog()
        logger.info(
            "translator_cache_set",
            cache=type(cache).__name__,
            requires_cleaning=requires_cleaning,
        )
        if self._locale:
            self._load_all()
        return self

    def bind_domain(self, domain: str, directory: Union[str, Path]) -> "Translator":
        """Register the directory holding a domain's catalogs.

        The directory contains one ``<locale>.po`` file per locale. If a
        locale is already active the domain is loaded immediately.

        Args:
            domain: Domain name; ``/`` and ``\\`` are replaced by ``.``.
            directory: Directory of the domain's source files.

        Returns:
            self, for chaining.

        Raises:
            ConfigurationError: If the directory does not exist.
        """
        name = clean_domain(domain)
        path = Path(directory)

        if not path.is_dir():
            logger.error("domain_directory_not_found", domain=name, directory=str(path))
            raise ConfigurationError(f"i18n directory does not exist: {path}")

        self._domains[name] = path
        logger.info("domain_bound", domain=name, directory=str(path))

        if self._locale:
            self._loader.load(name, path, self._locale)

        return self

    def set_default_domain(self, domain: Optional[str]) -> "Translator":
        """Set the domain used when translate calls omit one."""
        self._default_domain = clean_domain(domain)
        return self

    def set_temp_dir(self, directory: Union[str, Path]) -> "Translator":
        """Enable compiled snapshots stored under directory.

        Raises:
            ConfigurationError: If the directory does not exist.
        """
        self._loader.snapshots = SnapshotStore(directory)
        return self

    def set_language(self, language: Optional[str], country: Optional[str] = None) -> "Translator":
        """Activate a locale and load every bound domain for it.

        Setting the already active locale does nothing. A None or empty
        language turns translation off.

        Args:
            language: Language code (e.g. "es").
            country: Optional country code (e.g. "MX").

        Returns:
            self, for chaining.
        """
        locale = compose_locale(language, country)
        if locale == self._locale:
            return self

        logger.info("locale_changed", previous=self._locale, locale=locale)
        self._locale = locale
        self._loader.reset_catalog()

        if locale:
            self._load_all()

        return self

    def load_domain(self, domain: str, force: bool = False) -> LoadTier:
        """Load a bound domain's catalog for the active locale.

        Args:
            domain: Bound domain name.
            force: Reload even if the backend reports the catalog fresh.

        Returns:
            The tier that satisfied the load (MISSING without an active
            locale or for an unbound domain).
        """
        name = clean_domain(domain)
        directory = self._domains.get(name)
        if directory is None or not self._locale:
            return LoadTier.MISSING
        return self._loader.load(name, directory, self._locale, force=force)

    def clear_cache(self) -> None:
        """Drop every loaded translation and freshness record."""
        if self.cache is not None:
            self.cache.clear()
        self._loader.reset_catalog()
        logger.info("translation_cache_cleared")

    def translate(
        self,
        msg_id: str,
        domain: Optional[str] = None,
        context: Optional[str] = None,
    ) -> str:
        """Translate a message.

        Args:
            msg_id: Source-language message.
            domain: Domain (defaults to the default domain).
            context: Optional message context.

        Returns:
            Translated string, or msg_id if no translation is available.
        """
        return self.lookup(msg_id, domain, context).text

    def translate_plural(
        self,
        msg_id: str,
        msg_id_plural: str,
        count: int,
        domain: Optional[str] = None,
        context: Optional[str] = None,
    ) -> str:
        """Translate a message with plural forms.

        Args:
            msg_id: Source-language singular message.
            msg_id_plural: Source-language plural message.
            count: Number selecting the plural form.
            domain: Domain (defaults to the default domain).
            context: Optional message context.

        Returns:
            Translated form, or msg_id when count is 1 and msg_id_plural
            otherwise if no translation is available.
        """
        return self.lookup_plural(msg_id, msg_id_plural, count, domain, context).text

    def lookup(
        self,
        msg_id: str,
        domain: Optional[str] = None,
        context: Optional[str] = None,
    ) -> LookupResult:
        """Like translate(), reporting whether a translation was found."""
        if not self._locale:
            return LookupResult(msg_id, False)

        domain = self._resolve_domain(domain)
        key = get_key(msg_id, domain, context, self._locale, None, self.requires_cleaning)
        return self._get_entry(key, msg_id, domain)

    def lookup_plural(
        self,
        msg_id: str,
        msg_id_plural: str,
        count: int,
        domain: Optional[str] = None,
        context: Optional[str] = None,
    ) -> LookupResult:
        """Like translate_plural(), reporting whether a translation was found."""
        fallback = msg_id if count == 1 else msg_id_plural
        if not self._locale:
            return LookupResult(fallback, False)

        domain = self._resolve_domain(domain)
        offset = self.plural_rule(count, self._locale)

        if not offset:
            key = get_key(msg_id, domain, context, self._locale, None, self.requires_cleaning)
        else:
            key = get_key(
                msg_id_plural, domain, context, self._locale, offset, self.requires_cleaning
            )

        return self._get_entry(key, fallback, domain)

    def _resolve_domain(self, domain: Optional[str]) -> Optional[str]:
        if domain:
            return clean_domain(domain)
        return self._default_domain

    def _load_all(self) -> None:
        for name, directory in self._domains.items():
            self._loader.load(name, directory, self._locale)

    def _get_entry(self, key: str, fallback: str, domain: Optional[str]) -> LookupResult:
        """Fetch a translation, reloading once if the backend lost it.

        A backend miss is ambiguous: the entry may have been evicted or may
        never have existed. The domain is reloaded once; if the key is still
        absent it is marked invalid so later lookups skip the reload. A
        backend that cannot be written during the reload yields the fallback.
        """
        cache = self.cache

        if cache is None:
            text = self._loader.catalog.get(key)
            if text is None:
                self._log_missing(key, domain)
                return LookupResult(fallback, False)
            return LookupResult(text, True)

        value = cache.get(key)
        if value == INVALID_ENTRY:
            return LookupResult(fallback, False)
        if value is not None:
            return LookupResult(value, True)

        logger.debug("cache_entry_missing_reloading", key=key, domain=domain)
        try:
            if domain:
                self.load_domain(domain, force=True)

            value = cache.get(key)
            if value is None or value == INVALID_ENTRY:
                cache.set(key, INVALID_ENTRY)
                self._log_missing(key, domain)
                return LookupResult(fallback, False)
        except CacheBackendError as e:
            logger.warning(
                "cache_backend_unavailable",
                key=key,
                domain=domain,
                locale=self._locale,
                error=str(e),
            )
            return LookupResult(fallback, False)

        return LookupResult(value, True)

    def _log_missing(self, key: str, domain: Optional[str]) -> None:
        logger.debug(
            "translation_not_found",
            key=key,
            domain=domain,
            locale=self._locale,
        )
