"""Cache key generation for translated messages."""

import hashlib
import re
from typing import Optional

MAX_KEY_LENGTH = 64
TRUNCATED_PREFIX_LENGTH = 31

_STRAY_PREFIX = re.compile(r"^[A-Z][a-z][0-9.]\s")
_WHITESPACE = re.compile(r"\s+")


def get_key(
    msg_id: str,
    domain: Optional[str] = None,
    context: Optional[str] = None,
    locale: Optional[str] = None,
    plural_offset: Optional[int] = None,
    requires_cleaning: bool = False,
) -> str:
    """Build the cache key for one translated string.

    Components are joined with periods in a fixed order: message id,
    domain, context, locale (underscores become periods), plural offset.
    Offset 1 is the default plural form and is never encoded.

    When ``requires_cleaning`` is set the key is made safe for caches that
    only accept short keys: whitespace runs become underscores, and keys that
    are too long or start with a stray ``Xx1 `` prefix are cut to 31
    characters and suffixed with the md5 of the raw key, so the result never
    exceeds 64 characters.

    Example:
        >>> get_key("Yes", "dom1", None, "es_MX")
        'Yes.dom1.es.MX'
        >>> get_key("%d items", "dom1", None, "ru", 2)
        '%d items.dom1.ru.2'

    Args:
        msg_id: Source-language message id.
        domain: Domain name.
        context: Message context.
        locale: Active locale.
        plural_offset: Plural form index for plural lookups.
        requires_cleaning: True if the backend restricts keys.

    Returns:
        Cache key string.
    """
    key = msg_id

    if domain:
        key += "." + domain

    if context:
        key += "." + context

    if locale:
        key += "." + locale.replace("_", ".")

    if plural_offset and plural_offset > 1:
        key += "." + str(plural_offset)

    if not requires_cleaning:
        return key

    cleaned, stripped = _STRAY_PREFIX.subn("", key, count=1)
    cleaned = _WHITESPACE.sub("_", cleaned)

    if stripped or len(cleaned) > MAX_KEY_LENGTH:
        digest = hashlib.md5(key.encode("utf-8")).hexdigest()
        cleaned = cleaned[:TRUNCATED_PREFIX_LENGTH] + "." + digest

    if cleaned:
        key = cleaned

    return key


def freshness_key(locale: str, domain: str) -> str:
    """Key of the record holding the source mtime a catalog was loaded from."""
    return f"{locale}.{domain}"
