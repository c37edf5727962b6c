"""Shared constants for LocaleEngine.

This module provides centralized configuration constants used across the
catalog, localization and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Catalog defaults: Values substituted when locale data lacks a field
- Formatting literals: Fixed strings emitted by the formatters
- Resolution limits: Bounds for fuzzy locale suggestion
- Cache limits: Memory bounds for caching subsystems
- Environment: Variable names read at startup

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog defaults
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_TIME_PATTERN",
    "DEFAULT_AM_MARKER",
    "DEFAULT_PM_MARKER",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_GROUPING_SEPARATOR",
    "DEFAULT_MINUS_SIGN",
    "DEFAULT_GROUPING_SIZES",
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CURRENCY_PATTERN",
    "DEFAULT_LOCALE_TAG",
    "NO_GROUPING",
    # Formatting literals
    "CURRENCY_PLACEHOLDER",
    "WHOLE_UNIT_SUFFIX",
    "NAN_LITERAL",
    "INFINITY_LITERAL",
    # Resolution limits
    "MAX_SUGGESTIONS",
    "MAX_SUGGESTION_DISTANCE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Environment
    "CATALOG_PATH_ENV_VAR",
]

# ============================================================================
# CATALOG DEFAULTS
# ============================================================================
#
# Locales lacking source data still receive a complete record. The defaults
# below are documented fallback values, not error conditions.

DEFAULT_DATE_PATTERN: str = "y-MM-dd"
DEFAULT_TIME_PATTERN: str = "HH:mm:ss"

DEFAULT_AM_MARKER: str = "AM"
DEFAULT_PM_MARKER: str = "PM"

DEFAULT_DECIMAL_SEPARATOR: str = "."
DEFAULT_GROUPING_SEPARATOR: str = ","
DEFAULT_MINUS_SIGN: str = "-"

# Uniform 3-digit grouping (1,000,000).
DEFAULT_GROUPING_SIZES: tuple[int, ...] = (3,)

# Designated "no grouping" sentinel for grouping_sizes.
NO_GROUPING: tuple[int, ...] = (0,)

DEFAULT_CURRENCY_CODE: str = "USD"
DEFAULT_CURRENCY_PATTERN: str = "\xa4#,##0.00"

# Used by LocaleContext.create() when an unknown locale code is requested.
DEFAULT_LOCALE_TAG: str = "en"

# ============================================================================
# FORMATTING LITERALS
# ============================================================================

# CLDR currency sign (U+00A4), replaced by the locale's currency symbol.
CURRENCY_PLACEHOLDER: str = "\xa4"

# Whole-unit currency notation: "100,-" means exactly 100 units, no minor units.
# Always a comma-dash regardless of the locale's decimal separator.
WHOLE_UNIT_SUFFIX: str = ",-"

NAN_LITERAL: str = "NaN"
INFINITY_LITERAL: str = "inf"

# ============================================================================
# RESOLUTION LIMITS
# ============================================================================

# suggest() returns at most this many locales.
MAX_SUGGESTIONS: int = 5

# suggest() keeps catalog tags within this edit distance of the input.
MAX_SUGGESTION_DISTANCE: int = 3

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# Prevents unbounded memory growth in multi-locale applications.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Path to a JSON catalog file (see catalog.serialization). When set,
# default_catalog() loads it instead of building from Babel CLDR data.
CATALOG_PATH_ENV_VAR: str = "LOCALEENGINE_CATALOG"
