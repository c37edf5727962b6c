"""Locale resolution package.

Submodules:
    types    - Semantic type aliases (LocaleCode, LocaleTag, LocaleKey)
    resolver - parse_locale, fallback, fallback_chain, negotiate,
               negotiate_many, suggest, levenshtein_distance

Python 3.11+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localeengine.locale_utils import get_system_locale, normalize_locale
from localeengine.localization.resolver import (
    fallback,
    fallback_chain,
    levenshtein_distance,
    negotiate,
    negotiate_many,
    parse_locale,
    suggest,
)
from localeengine.localization.types import LocaleCode, LocaleKey, LocaleTag

__all__ = [
    # Parsing
    "parse_locale",
    "normalize_locale",
    "get_system_locale",
    # Fallback relation
    "fallback",
    "fallback_chain",
    "negotiate",
    "negotiate_many",
    # Fuzzy matching
    "suggest",
    "levenshtein_distance",
    # Type aliases
    "LocaleCode",
    "LocaleKey",
    "LocaleTag",
]
