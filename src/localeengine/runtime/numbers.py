"""Numeric formatting driven by locale metadata records.

Renders integers and floats as grouped, locale-punctuated strings:

    format_number(1234567, en)    -> "1,234,567"
    format_number(-1234.5, de)    -> "-1.234,5"
    format_number(10000000, hi)   -> "1,00,00,000"     (grouping 3, 2, 2, ...)
    format_number(0, ar_EG)       -> "٠"               (native digits)

No rounding happens at this layer: a float's fraction digits are those of
its shortest round-trip decimal form. All behavior comes from the record;
there is no per-locale branching.

Python 3.11+.
"""

from __future__ import annotations

import math
from decimal import Decimal
from functools import lru_cache

from localeengine.catalog import LocaleData
from localeengine.constants import INFINITY_LITERAL, NAN_LITERAL

__all__ = [
    "format_number",
    "group_integer",
    "split_float",
    "translate_digits",
]


def group_integer(digits: str, data: LocaleData) -> str:
    """Insert grouping separators into a run of ASCII digits.

    Groups are taken right-to-left using ``grouping_sizes``; once the sizes
    are exhausted the last one repeats. ``(0,)`` disables grouping, and a
    number no longer than the first group is left untouched.

    Example:
        >>> group_integer("10000000", hi_data)  # grouping_sizes (3, 2)
        '1,00,00,000'
    """
    sizes = data.grouping_sizes
    if sizes[0] == 0 or len(digits) <= sizes[0]:
        return digits

    groups: list[str] = []
    end = len(digits)
    index = 0
    while end > 0:
        size = sizes[min(index, len(sizes) - 1)]
        start = max(0, end - size)
        groups.append(digits[start:end])
        end = start
        index += 1
    return data.grouping_separator.join(reversed(groups))


@lru_cache(maxsize=64)
def _digit_table(native_digits: tuple[str, ...]) -> dict[int, str]:
    return {ord("0") + value: glyph for value, glyph in enumerate(native_digits)}


def translate_digits(text: str, data: LocaleData) -> str:
    """Replace ASCII digits with the locale's native glyphs.

    Every other character (separators, signs, letters) is kept. Returns
    ``text`` unchanged when the locale uses ASCII digits.
    """
    if data.native_digits is None:
        return text
    return text.translate(_digit_table(data.native_digits))


def split_float(magnitude: float) -> tuple[str, str]:
    """Integer and fraction digits of a finite, non-negative float.

    Uses the shortest decimal string that round-trips to the same float,
    written positionally (never in exponent form). Integral floats have an
    empty fraction.

    Example:
        >>> split_float(1234.5)
        ('1234', '5')
        >>> split_float(1e16)
        ('10000000000000000', '')
        >>> split_float(1.5e-07)
        ('0', '00000015')
    """
    text = format(Decimal(repr(magnitude)), "f")
    integer_part, _, fraction = text.partition(".")
    if magnitude.is_integer():
        return integer_part, ""
    return integer_part, fraction


def format_number(value: int | float, data: LocaleData) -> str:
    """Format an integer or float using a locale record.

    The sign is handled separately from the magnitude: the magnitude is
    grouped and punctuated, then ``minus_sign`` is prefixed for negative
    values, and native digits (if any) replace ASCII digits last.

    Floats: NaN renders as "NaN", infinities as "inf" (with the minus sign
    when negative). Negative zero keeps its sign. Booleans format as 0/1.

    Args:
        value: Number to format
        data: Locale metadata record

    Returns:
        Formatted string. Never raises for int or float input.

    Example:
        >>> format_number(-1234567, en_data)
        '-1,234,567'
    """
    if isinstance(value, int):
        negative = value < 0
        body = group_integer(str(abs(int(value))), data)
    else:
        if math.isnan(value):
            return NAN_LITERAL
        negative = math.copysign(1.0, value) < 0
        magnitude = abs(value)
        if math.isinf(magnitude):
            body = INFINITY_LITERAL
        else:
            integer_part, fraction = split_float(magnitude)
            body = group_integer(integer_part, data)
            if fraction:
                body = f"{body}{data.decimal_separator}{fraction}"

    text = f"{data.minus_sign}{body}" if negative else body
    return translate_digits(text, data)
