"""Locale context for catalog-scoped formatting.

This module pairs a resolved LocaleId with its metadata record so callers
can format repeatedly without re-resolving the locale string.

Architecture:
    - LocaleContext: Immutable (locale id, record) container
    - Formatters are pure functions over LocaleData (numbers, currency, dates)
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per (normalized code, catalog)

Design Principles:
    - Explicit over implicit (resolved locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (the cache is the only shared mutable state)

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime
from threading import RLock
from typing import ClassVar

from localeengine.catalog import LocaleCatalog, LocaleData, LocaleId, default_catalog
from localeengine.constants import DEFAULT_LOCALE_TAG, MAX_LOCALE_CACHE_SIZE
from localeengine.diagnostics import CatalogError, ErrorTemplate, UnknownLocaleError
from localeengine.locale_utils import normalize_locale
from localeengine.localization import parse_locale

from .currency import format_currency
from .dates import CalendarFields, format_date, format_datetime_pattern, format_time
from .numbers import format_number

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() (lenient) or LocaleContext.create_or_raise()
    (strict) to construct instances from locale strings.

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse. Use class
        methods for cache management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_currency(-50.0)
        '-50,-\\xa0€'

        >>> # Unknown locales fall back to "en" with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.locale_code  # Original code preserved
        'invalid-locale'
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable and may be shared between threads. Cache
        operations are protected by RLock.
    """

    # Class-level cache for LocaleContext instances (identity caching)
    # OrderedDict provides LRU semantics with O(1) operations
    # Note: ClassVar is excluded from dataclass fields
    _cache: ClassVar[OrderedDict[tuple[str, LocaleCatalog], LocaleContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    locale_id: LocaleId
    data: LocaleData
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached normalized codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> LocaleContext.create('en-GB')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en-gb',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(code for code, _ in cls._cache),
            }

    @classmethod
    def create(cls, locale_code: str, *, catalog: LocaleCatalog | None = None) -> LocaleContext:
        """Create LocaleContext with graceful fallback for unknown locales.

        Unknown codes log a warning and use the "en" record (or the first
        catalog entry when the catalog has no "en"), with ``is_fallback`` set.
        This method always succeeds for a non-empty catalog; use
        create_or_raise() for strict resolution.

        Args:
            locale_code: Locale string (e.g., 'en-GB', 'de_DE', 'zh-hans-hk')
            catalog: Catalog to resolve against (default: default_catalog())

        Returns:
            Cached LocaleContext. The original locale_code is preserved.

        Raises:
            CatalogError: If the catalog is empty
        """
        table = default_catalog() if catalog is None else catalog
        # "en_GB", "EN-gb" and "en-GB" share one cache entry per catalog.
        cache_key = (normalize_locale(locale_code), table)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            locale_id = parse_locale(locale_code, catalog=table)
        except UnknownLocaleError as e:
            locale_id = cls._fallback_id(table, locale_code)
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s",
                locale_code,
                e.diagnostic.message if e.diagnostic else e,
                locale_id,
            )
            used_fallback = True

        ctx = cls(
            locale_code=locale_code,
            locale_id=locale_id,
            data=table[locale_id],
            is_fallback=used_fallback,
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(
        cls, locale_code: str, *, catalog: LocaleCatalog | None = None
    ) -> LocaleContext:
        """Create LocaleContext or raise for unknown locales.

        Args:
            locale_code: Locale string (e.g., 'en-GB', 'de_DE')
            catalog: Catalog to resolve against (default: default_catalog())

        Raises:
            UnknownLocaleError: If the code matches no catalog entry
        """
        table = default_catalog() if catalog is None else catalog
        locale_id = parse_locale(locale_code, catalog=table)
        return cls(locale_code=locale_code, locale_id=locale_id, data=table[locale_id])

    @staticmethod
    def _fallback_id(table: LocaleCatalog, locale_code: str) -> LocaleId:
        if DEFAULT_LOCALE_TAG in table:
            return LocaleId(DEFAULT_LOCALE_TAG)
        if not table.ids:
            raise CatalogError(ErrorTemplate.empty_catalog(locale_code))
        return table.ids[0]

    def format_number(self, value: int | float) -> str:
        """Format a number with this locale's separators, grouping and digits."""
        return format_number(value, self.data)

    def format_currency(self, value: int | float) -> str:
        """Format an amount in this locale's currency."""
        return format_currency(value, self.data)

    def format_date(self, value: CalendarFields | date | datetime) -> str:
        """Format with this locale's date pattern."""
        return format_date(value, self.data)

    def format_time(self, value: CalendarFields | date | datetime) -> str:
        """Format with this locale's time pattern."""
        return format_time(value, self.data)

    def format_pattern(self, pattern: str, value: CalendarFields | date | datetime) -> str:
        """Format with an explicit date/time pattern and this locale's names.

        Example:
            >>> LocaleContext.create('en').format_pattern("EEEE", date(2024, 1, 1))
            'Monday'
        """
        fields = value if isinstance(value, CalendarFields) else CalendarFields.from_datetime(value)
        return format_datetime_pattern(pattern, fields, self.data)
