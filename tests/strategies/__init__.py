"""Hypothesis strategies for LocaleEngine property-based testing.

Usage:
    from tests.strategies import locale_records, calendar_fields
    from tests.strategies.locale_data import pattern_strings
"""

from .locale_data import (
    calendar_fields,
    grouping_sizes,
    locale_records,
    locale_tags,
    native_digit_sets,
    pattern_strings,
    separators,
)

__all__ = [
    "calendar_fields",
    "grouping_sizes",
    "locale_records",
    "locale_tags",
    "native_digit_sets",
    "pattern_strings",
    "separators",
]
