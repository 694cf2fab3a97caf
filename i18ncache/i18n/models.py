"""Translation models for the i18n system.

Defines core data structures shared by the loader and the translator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Reserved cache value meaning "confirmed absent from the source catalog".
INVALID_ENTRY = "\x00i18n:invalid\x00"


@dataclass(frozen=True)
class TranslationEntry:
    """A single message read from a catalog source file.

    Attributes:
        msgid: Source-language message identifier.
        translations: Translated strings indexed by plural form (0 = singular).
        msgid_plural: Source-language plural identifier, if any.
        context: Disambiguating context (msgctxt), if any.
    """

    msgid: str
    translations: List[str] = field(default_factory=list)
    msgid_plural: Optional[str] = None
    context: Optional[str] = None

    @property
    def is_plural(self) -> bool:
        """True if the entry carries a plural message id."""
        return bool(self.msgid_plural)

    @property
    def has_translation(self) -> bool:
        """True if at least one plural form is translated."""
        return any(self.translations)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a translation lookup.

    Attributes:
        text: Translated string, or the source-language fallback.
        found: True if the text came from the active catalog.
    """

    text: str
    found: bool

    def __str__(self) -> str:
        return self.text


class LoadTier(str, Enum):
    """Which tier satisfied a domain catalog load."""

    SNAPSHOT = "snapshot"
    FRESH = "fresh"
    SOURCE = "source"
    MISSING = "missing"


def clean_domain(domain: Optional[str]) -> Optional[str]:
    """Normalize a domain name so it cannot be mistaken for a path.

    Package-style names such as ``vendor/package`` become ``vendor.package``.

    Args:
        domain: Raw domain name.

    Returns:
        Normalized name, or the input unchanged when empty.
    """
    if not domain:
        return domain
    return domain.replace("\\", ".").replace("/", ".")


def compose_locale(language: Optional[str], country: Optional[str] = None) -> Optional[str]:
    """Build a locale string such as ``es`` or ``es_MX``.

    Args:
        language: Language code; empty disables translation.
        country: Optional country code.

    Returns:
        Locale string, or None when no language is given.
    """
    if not language:
        return None
    if country:
        return f"{language}_{country}"
    return language
