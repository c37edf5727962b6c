"""Currency formatting on top of the numeric formatter.

Amounts are rounded to whole minor units (cents) first and split second,
so 1.999 becomes exactly 2 units rather than "1.99" or "1.999":

    format_currency(100.0, en)   -> "$100,-"
    format_currency(1.999, en)   -> "$2,-"
    format_currency(-1.99, en)   -> "-$1.99"
    format_currency(1234.5, de)  -> "1.234,50 €"

Whole amounts always use the ",-" notation, independent of the locale's
decimal separator; downstream consumers rely on that exact form.

Python 3.11+.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from localeengine.catalog import LocaleData
from localeengine.constants import (
    CURRENCY_PLACEHOLDER,
    INFINITY_LITERAL,
    NAN_LITERAL,
    WHOLE_UNIT_SUFFIX,
)

from .numbers import group_integer, translate_digits

__all__ = [
    "apply_currency_pattern",
    "format_currency",
    "round_to_minor_units",
]

# Digit/grouping placeholder run of a CLDR number pattern ("#,##0.00").
_NUMBER_PLACEHOLDER = re.compile(r"[#0,.]+")

_MINOR_UNITS = 100


def round_to_minor_units(magnitude: int | float) -> int:
    """Round a non-negative, finite amount to whole hundredths.

    Rounds half away from zero on ``magnitude * 100``. Floats are scaled in
    decimal starting from their shortest round-trip form, so the product
    carries no binary drift: 1e22 is exactly 10**24 hundredths, as
    format_number(1e22) shows it.

    Example:
        >>> round_to_minor_units(1.999)
        200
        >>> round_to_minor_units(2.675)
        268
    """
    if isinstance(magnitude, int):
        return magnitude * _MINOR_UNITS
    scaled = Decimal(repr(magnitude)).scaleb(2)
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))


def apply_currency_pattern(pattern: str, number: str, symbol: str) -> str:
    """Substitute a formatted number and symbol into a currency pattern.

    Only the positive subpattern (before ";") is used. The first digit
    placeholder run is replaced by ``number`` and every "¤" by ``symbol``.
    A pattern without a placeholder run gets the number appended.

    Example:
        >>> apply_currency_pattern("#,##0.00\\xa0¤", "1.234,50", "€")
        '1.234,50\\xa0€'
    """
    positive = pattern.split(";", 1)[0]
    match = _NUMBER_PLACEHOLDER.search(positive)
    if match is None:
        composed = positive + number
    else:
        composed = positive[: match.start()] + number + positive[match.end() :]
    return composed.replace(CURRENCY_PLACEHOLDER, symbol)


def _amount_text(value: int | float, data: LocaleData) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return NAN_LITERAL
        if math.isinf(value):
            return INFINITY_LITERAL

    units, minor = divmod(round_to_minor_units(abs(value)), _MINOR_UNITS)
    grouped = group_integer(str(units), data)
    if minor == 0:
        return f"{grouped}{WHOLE_UNIT_SUFFIX}"
    return f"{grouped}{data.decimal_separator}{minor:02d}"


def format_currency(value: int | float, data: LocaleData) -> str:
    """Format a monetary amount in the locale's currency.

    Steps: round ``|value|`` to hundredths (half away from zero); render
    whole amounts as "<grouped>,-" and others as
    "<grouped><decimal_separator><2 digits>"; translate digits; substitute
    into ``currency_pattern`` with ``currency_symbol``; prefix
    ``minus_sign`` to the whole result for negative values.

    NaN and infinities are substituted into the pattern as "NaN"/"inf".

    Args:
        value: Amount in major units (e.g., dollars)
        data: Locale metadata record

    Returns:
        Formatted string. Never raises for int or float input.

    Example:
        >>> format_currency(1234567.89, en_data)
        '$1,234,567.89'
    """
    number = translate_digits(_amount_text(value, data), data)
    result = apply_currency_pattern(data.currency_pattern, number, data.currency_symbol)
    if value < 0:
        return f"{data.minus_sign}{result}"
    return result
