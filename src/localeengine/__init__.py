"""LocaleEngine - data-driven locale formatting for numbers, currency and dates.

Resolves free-form locale strings against a closed catalog of locale records
and renders values with textually exact, per-locale output. Every locale
difference comes from catalog data (built from Babel's CLDR tables or loaded
from a JSON file); the algorithms contain no per-locale branching.

Public API:
    LocaleContext - Resolved locale with format_number/currency/date/time
    parse_locale - Resolve a locale string to a LocaleId
    fallback, fallback_chain, negotiate, negotiate_many, suggest - Locale navigation
    format_number, format_currency, format_datetime_pattern - Record-level formatters
    number_format, currency_format, date_format, time_format - Locale-string helpers
    CalendarFields - Calendar field set for date/time formatting
    LocaleCatalog, LocaleData, LocaleId - Catalog types
    default_catalog - Process-wide catalog

Exceptions:
    LocaleEngineError - Base exception class
    UnknownLocaleError - Locale string matches no catalog entry
    CatalogError - Locale data violates the record contract

Submodules:
    localeengine.catalog - Catalog types, JSON tables, CLDR builder
    localeengine.localization - Locale resolution
    localeengine.runtime - Formatters and LocaleContext
    localeengine.diagnostics - Diagnostics, templates and exceptions
"""

# Essential Public API - Minimal exports for clean namespace
from .catalog import LocaleCatalog, LocaleData, LocaleId, default_catalog
from .diagnostics import CatalogError, LocaleEngineError, UnknownLocaleError
from .localization import (
    fallback,
    fallback_chain,
    negotiate,
    negotiate_many,
    parse_locale,
    suggest,
)
from .runtime import (
    CalendarFields,
    LocaleContext,
    currency_format,
    date_format,
    format_currency,
    format_datetime_pattern,
    format_number,
    number_format,
    time_format,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: pip install -e .
    __version__ = "0.0.0+dev"

__all__ = [
    "CalendarFields",
    "CatalogError",
    "LocaleCatalog",
    "LocaleContext",
    "LocaleData",
    "LocaleEngineError",
    "LocaleId",
    "UnknownLocaleError",
    "__version__",
    "currency_format",
    "date_format",
    "default_catalog",
    "fallback",
    "fallback_chain",
    "format_currency",
    "format_datetime_pattern",
    "format_number",
    "negotiate",
    "negotiate_many",
    "number_format",
    "parse_locale",
    "suggest",
    "time_format",
]
