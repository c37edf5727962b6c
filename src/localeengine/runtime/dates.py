"""Date/time pattern interpretation.

Implements a small CLDR-style pattern language over already-resolved
calendar fields. No timezone handling and no calendar arithmetic beyond
deriving the weekday.

Pattern syntax:
    y    year; "yy" keeps the last two digits, other widths zero-pad
    M    month; M/MM numeric, MMM abbreviated name, MMMM+ wide name
    d    day of month, zero-padded
    H    hour 0-23, zero-padded
    h    hour 1-12, zero-padded
    m    minute, zero-padded
    s    second, zero-padded
    a    AM/PM marker
    E    wide weekday name
    '…'  quoted literal text; '' is a literal apostrophe (inside or outside quotes)

Any other character is copied through unchanged, so separators and
unsupported letters never cause errors. Native digit translation applies to
the whole composed string, literal text included.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from localeengine.catalog import LocaleData
from localeengine.enums import PatternField

from .numbers import translate_digits

__all__ = [
    "CalendarFields",
    "format_date",
    "format_datetime_pattern",
    "format_time",
    "weekday_index",
]

_QUOTE = "'"

# Sakamoto's month offsets for the Gregorian day-of-week formula.
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Resolved calendar fields to render.

    Values are not validated: out-of-range fields produce odd output, never
    an exception.

    Attributes:
        year: Proleptic Gregorian year
        month: 1-12
        day: 1-31
        hour: 0-23
        minute: 0-59
        second: 0-59
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_datetime(cls, value: date | datetime) -> CalendarFields:
        """Fields of a date (midnight) or datetime (wall-clock, tz ignored)."""
        if isinstance(value, datetime):
            return cls(
                value.year, value.month, value.day, value.hour, value.minute, value.second
            )
        return cls(value.year, value.month, value.day)


def weekday_index(year: int, month: int, day: int) -> int:
    """Day of week, 0 = Sunday, by Sakamoto's method.

    Valid for any proleptic Gregorian date.

    Raises:
        ValueError: If month is outside 1-12

    Example:
        >>> weekday_index(2024, 1, 1)  # Monday
        1
    """
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise ValueError(msg)
    if month < 3:
        year -= 1
    return (
        year + year // 4 - year // 100 + year // 400 + _MONTH_OFFSETS[month - 1] + day
    ) % 7


def _pad(value: int, width: int) -> str:
    return f"{value:0{width}d}"


def _month_name(names: tuple[str, ...], month: int) -> str:
    return names[month - 1] if 1 <= month <= 12 else ""


def _render_field(letter: str, count: int, fields: CalendarFields, data: LocaleData) -> str:
    match letter:
        case PatternField.YEAR:
            year_text = str(fields.year)
            if count == 2 and len(year_text) > 2:
                return year_text[-2:]
            return _pad(fields.year, count)
        case PatternField.MONTH:
            if count >= 4:
                return _month_name(data.months_wide, fields.month)
            if count == 3:
                return _month_name(data.months_abbreviated, fields.month)
            return _pad(fields.month, count)
        case PatternField.DAY:
            return _pad(fields.day, count)
        case PatternField.HOUR_24:
            return _pad(fields.hour, count)
        case PatternField.HOUR_12:
            return _pad(fields.hour % 12 or 12, count)
        case PatternField.MINUTE:
            return _pad(fields.minute, count)
        case PatternField.SECOND:
            return _pad(fields.second, count)
        case PatternField.PERIOD:
            return data.am_marker if fields.hour < 12 else data.pm_marker
        case PatternField.WEEKDAY:
            if not 1 <= fields.month <= 12:
                return ""
            return data.days_wide[weekday_index(fields.year, fields.month, fields.day)]
        case _:
            return letter * count


def format_datetime_pattern(pattern: str, fields: CalendarFields, data: LocaleData) -> str:
    """Render ``fields`` through a date/time pattern.

    Single pass over the pattern with a quoted/unquoted state. Outside
    quotes, each run of identical characters is one directive whose width is
    the run length.

    Args:
        pattern: Pattern string (e.g., "d MMM y", "h:mm a")
        fields: Calendar fields to render
        data: Locale metadata record (names, markers, digits)

    Returns:
        Formatted string. Never raises, including for malformed patterns
        (an unterminated quote simply quotes to the end).

    Example:
        >>> format_datetime_pattern("y 'o''clock' MMMM", CalendarFields(2023, 5, 1), en)
        "2023 o'clock May"
    """
    output: list[str] = []
    quoted = False
    index = 0
    length = len(pattern)

    while index < length:
        char = pattern[index]

        if char == _QUOTE:
            if index + 1 < length and pattern[index + 1] == _QUOTE:
                output.append(_QUOTE)
                index += 2
            else:
                quoted = not quoted
                index += 1
            continue

        if quoted:
            output.append(char)
            index += 1
            continue

        run_end = index + 1
        while run_end < length and pattern[run_end] == char:
            run_end += 1
        output.append(_render_field(char, run_end - index, fields, data))
        index = run_end

    return translate_digits("".join(output), data)


def _as_fields(value: CalendarFields | date | datetime) -> CalendarFields:
    if isinstance(value, CalendarFields):
        return value
    return CalendarFields.from_datetime(value)


def format_date(value: CalendarFields | date | datetime, data: LocaleData) -> str:
    """Render ``value`` with the locale's ``date_pattern``."""
    return format_datetime_pattern(data.date_pattern, _as_fields(value), data)


def format_time(value: CalendarFields | date | datetime, data: LocaleData) -> str:
    """Render ``value`` with the locale's ``time_pattern``."""
    return format_datetime_pattern(data.time_pattern, _as_fields(value), data)
