"""Locale-string convenience functions.

One-call formatting for code that holds a locale string rather than a
LocaleContext. Each call resolves the string through LocaleContext.create(),
so unknown locales fall back (with a logged warning) instead of raising.

Example:
    number_format(1234567, "en")         -> "1,234,567"
    currency_format(-1.99, "en")         -> "-$1.99"
    date_format(date(2024, 1, 5), "en")  -> "Jan 5, 2024"

Python 3.11+.
"""

from __future__ import annotations

from datetime import date, datetime

from localeengine.catalog import LocaleCatalog

from .dates import CalendarFields
from .locale_context import LocaleContext

__all__ = [
    "currency_format",
    "date_format",
    "datetime_pattern_format",
    "number_format",
    "time_format",
]


def number_format(
    value: int | float,
    locale_code: str = "en",
    *,
    catalog: LocaleCatalog | None = None,
) -> str:
    """Format a number for a locale string.

    Args:
        value: Number to format
        locale_code: Locale string (e.g., 'en', 'de_DE', 'hi-IN')
        catalog: Catalog to resolve against (default: default_catalog())

    Examples:
        >>> number_format(1234567, "en")
        '1,234,567'
        >>> number_format(10000000, "hi")
        '1,00,00,000'
    """
    return LocaleContext.create(locale_code, catalog=catalog).format_number(value)


def currency_format(
    value: int | float,
    locale_code: str = "en",
    *,
    catalog: LocaleCatalog | None = None,
) -> str:
    """Format an amount in the locale's currency.

    Examples:
        >>> currency_format(100, "en")
        '$100,-'
        >>> currency_format(1234567.89, "en")
        '$1,234,567.89'
    """
    return LocaleContext.create(locale_code, catalog=catalog).format_currency(value)


def date_format(
    value: CalendarFields | date | datetime,
    locale_code: str = "en",
    *,
    catalog: LocaleCatalog | None = None,
) -> str:
    """Format a date with the locale's date pattern."""
    return LocaleContext.create(locale_code, catalog=catalog).format_date(value)


def time_format(
    value: CalendarFields | date | datetime,
    locale_code: str = "en",
    *,
    catalog: LocaleCatalog | None = None,
) -> str:
    """Format a time with the locale's time pattern."""
    return LocaleContext.create(locale_code, catalog=catalog).format_time(value)


def datetime_pattern_format(
    value: CalendarFields | date | datetime,
    pattern: str,
    locale_code: str = "en",
    *,
    catalog: LocaleCatalog | None = None,
) -> str:
    """Format with an explicit pattern using the locale's names and digits.

    Example:
        >>> datetime_pattern_format(date(2023, 5, 1), "y 'o''clock' MMMM", "en")
        "2023 o'clock May"
    """
    return LocaleContext.create(locale_code, catalog=catalog).format_pattern(pattern, value)
