"""Custom exceptions for the translation system.

Configuration and serialization errors are hard failures that abort the
triggering bind or load operation. Missing translations are never raised;
they resolve to the source-language message.
"""


class I18nError(Exception):
    """Base exception for all translation system errors.

    Example:
        try:
            translator.bind_domain("app", "/missing/dir")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ConfigurationError(I18nError):
    """Raised when the translator is configured with an unusable value.

    Covers binding a domain to a directory that does not exist, pointing the
    snapshot tier at a missing directory, and selecting an unknown cache
    backend.

    Example:
        >>> translator.set_temp_dir("/nonexistent")
        Traceback (most recent call last):
        ...
        ConfigurationError: Snapshot directory does not exist: /nonexistent
    """

    pass


class SerializationError(I18nError):
    """Raised when a loaded catalog cannot be encoded as a compiled snapshot.

    Signals a corrupt or unencodable translated value in the source catalog.
    """

    pass


class CacheBackendError(I18nError):
    """Raised when a cache backend cannot complete a write.

    Backends wrap their client errors in this type so callers can handle an
    unreachable backend without knowing which client is in use.
    """

    pass
