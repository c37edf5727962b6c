"""Runtime formatting engine.

Pure formatting functions over LocaleData records, plus LocaleContext for
locale-string callers.

Submodules:
    numbers        - format_number, group_integer, translate_digits
    currency       - format_currency
    dates          - CalendarFields, format_datetime_pattern, format_date,
                     format_time, weekday_index
    locale_context - LocaleContext (resolved locale + record, cached)
    functions      - number_format, currency_format, date_format, time_format

Python 3.11+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .currency import apply_currency_pattern, format_currency, round_to_minor_units
from .dates import (
    CalendarFields,
    format_date,
    format_datetime_pattern,
    format_time,
    weekday_index,
)
from .functions import (
    currency_format,
    date_format,
    datetime_pattern_format,
    number_format,
    time_format,
)
from .locale_context import LocaleContext
from .numbers import format_number, group_integer, split_float, translate_digits

__all__ = [
    # Numbers
    "format_number",
    "group_integer",
    "split_float",
    "translate_digits",
    # Currency
    "format_currency",
    "apply_currency_pattern",
    "round_to_minor_units",
    # Dates
    "CalendarFields",
    "format_datetime_pattern",
    "format_date",
    "format_time",
    "weekday_index",
    # Context
    "LocaleContext",
    # Locale-string convenience
    "number_format",
    "currency_format",
    "date_format",
    "time_format",
    "datetime_pattern_format",
]
