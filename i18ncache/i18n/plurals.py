"""Plural form selection.

A plural rule maps a count (and the active locale) to the plural form index
used as offset into a catalog entry: 0 selects the singular form, 1..n the
plural forms. Rules are plain callables so translators can be given any
policy.
"""

from typing import Callable, Dict, Optional

PluralRule = Callable[[int, Optional[str]], int]


def default_plural_rule(count: int, locale: Optional[str] = None) -> int:
    """Two-form rule: singular for exactly one, plural otherwise."""
    return 0 if count == 1 else 1


def _slavic_east(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 in (2, 3, 4) and n % 100 not in (12, 13, 14):
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if n % 10 in (2, 3, 4) and n % 100 not in (12, 13, 14):
        return 1
    return 2


def _arabic(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n % 100 <= 10:
        return 3
    if n % 100 >= 11:
        return 4
    return 5


# Form selection per language, matching the Plural-Forms header gettext
# catalogs use for these languages.
PLURAL_RULES: Dict[str, Callable[[int], int]] = {
    "fr": lambda n: 0 if n <= 1 else 1,
    "pt_BR": lambda n: 0 if n <= 1 else 1,
    "ru": _slavic_east,
    "uk": _slavic_east,
    "be": _slavic_east,
    "pl": _polish,
    "ar": _arabic,
    "ja": lambda n: 0,
    "ko": lambda n: 0,
    "zh": lambda n: 0,
}


def locale_plural_rule(count: int, locale: Optional[str] = None) -> int:
    """Select the plural form from the locale's language rule.

    Looks up the full locale first (``pt_BR``), then its language code,
    and falls back to the two-form default.
    """
    if locale:
        rule = PLURAL_RULES.get(locale) or PLURAL_RULES.get(locale.split("_")[0])
        if rule is not None:
            return rule(abs(count))
    return default_plural_rule(count, locale)
