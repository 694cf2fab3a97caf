"""Factory functions for creating i18n components.

Builds a fully configured Translator from settings so applications construct
the service once at startup and pass it to the code that needs it.
"""

from typing import Optional

from i18ncache.cache.backend import CacheBackend
from i18ncache.cache.factory import create_cache_backend
from i18ncache.core.config import Settings, settings as default_settings
from i18ncache.core.logging import configure_logging, get_module_logger
from i18ncache.i18n.plurals import PluralRule
from i18ncache.i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    settings: Optional[Settings] = None,
    cache: Optional[CacheBackend] = None,
    plural_rule: Optional[PluralRule] = None,
    setup_logging: bool = False,
) -> Translator:
    """Create and configure a Translator instance.

    Order matters: domains and the snapshot directory are configured before
    the language so the first load sees every domain.

    Args:
        settings: Configuration (default: global settings).
        cache: Explicit backend; when None one is built from settings.cache.
        plural_rule: Optional plural offset policy.
        setup_logging: Also configure structlog and stdlib logging from
            settings, for applications without a logging setup of their own.

    Returns:
        Translator: Configured translator instance

    Raises:
        ConfigurationError: If a configured directory does not exist or the
            cache backend is unknown.

    Usage:
        # Use environment configuration
        translator = create_translator()

        # Tests: explicit settings and backend
        translator = create_translator(Settings(i18n=I18nSettings(...)), cache=InMemoryCache())
    """
    settings = settings or default_settings
    i18n = settings.i18n

    if setup_logging:
        configure_logging(settings.LOG_LEVEL, settings.is_production)

    if cache is None:
        cache = create_cache_backend(settings.cache)

    translator = Translator(
        cache=cache,
        requires_cleaning=i18n.key_cleaning,
        plural_rule=plural_rule,
    )

    for domain, directory in i18n.domains.items():
        translator.bind_domain(domain, directory)

    if i18n.default_domain:
        translator.set_default_domain(i18n.default_domain)

    if i18n.snapshot_dir:
        translator.set_temp_dir(i18n.snapshot_dir)

    if i18n.language:
        translator.set_language(i18n.language, i18n.country)

    logger.info(
        "translator_created",
        domain_count=len(i18n.domains),
        locale=translator.locale,
        snapshots=bool(i18n.snapshot_dir),
    )
    return translator
