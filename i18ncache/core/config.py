"""i18n-cache configuration settings."""

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ComponentSettings(BaseSettings):
    """Base class for component settings.

    All settings sections inherit from this class to ensure consistent
    configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class I18nSettings(ComponentSettings):
    """Translator configuration.

    Environment Variables:
        I18N_DEFAULT_DOMAIN: Domain used when translate calls omit one
        I18N_DOMAINS: JSON object mapping domain names to catalog directories
        I18N_SNAPSHOT_DIR: Directory for compiled catalog snapshots (optional)
        I18N_LANGUAGE: Language code activated at startup (optional)
        I18N_COUNTRY: Country code activated at startup (optional)
        I18N_KEY_CLEANING: Clean cache keys for restricted backends (default: True)

    Example:
        ```python
        from i18ncache.core.config import settings

        domains = settings.i18n.domains
        snapshot_dir = settings.i18n.snapshot_dir
        ```
    """

    default_domain: Optional[str] = Field(default=None, alias="I18N_DEFAULT_DOMAIN")
    domains: Dict[str, str] = Field(default_factory=dict, alias="I18N_DOMAINS")
    snapshot_dir: Optional[str] = Field(default=None, alias="I18N_SNAPSHOT_DIR")
    language: Optional[str] = Field(default=None, alias="I18N_LANGUAGE")
    country: Optional[str] = Field(default=None, alias="I18N_COUNTRY")
    key_cleaning: bool = Field(
        default=True,
        alias="I18N_KEY_CLEANING",
        description="Restrict cache keys to 64 safe characters",
    )


class CacheSettings(ComponentSettings):
    """Cache backend configuration.

    Environment Variables:
        CACHE_BACKEND: Backend type - 'none', 'memory' or 'redis' (default: none)
        CACHE_MAX_ENTRIES: Size bound for the memory backend (optional)
        REDIS_HOST: Redis/Valkey endpoint
        REDIS_PORT: Redis port (default: 6379)
        REDIS_DB: Redis database number (default: 0)
        REDIS_PREFIX: Key prefix isolating translator entries (default: i18n)
        REDIS_TTL_SECONDS: Expiry for written entries (optional)

    Cache Backends:
        - none: translations kept in the translator's own memory
        - memory: process-local backend implementing the cache contract
        - redis: shared network cache across processes
    """

    backend: str = Field(default="none", alias="CACHE_BACKEND")
    max_entries: Optional[int] = Field(default=None, alias="CACHE_MAX_ENTRIES")
    redis_host: str = Field(default="localhost", alias="REDIS_HOST")
    redis_port: int = Field(default=6379, alias="REDIS_PORT")
    redis_db: int = Field(default=0, alias="REDIS_DB")
    redis_prefix: str = Field(default="i18n", alias="REDIS_PREFIX")
    redis_ttl_seconds: Optional[int] = Field(default=None, alias="REDIS_TTL_SECONDS")


class Settings(BaseSettings):
    """i18n-cache configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings
    cache: CacheSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
            "cache": CacheSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
