"""Enumerations for LocaleEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a pattern character can be
compared against a member directly.

Python 3.11+.
"""

from enum import StrEnum


class PatternField(StrEnum):
    """Date/time pattern letters interpreted by the DateTime formatter.

    Any other pattern character is copied through as a literal.

    StrEnum provides automatic string conversion: str(PatternField.YEAR) == "y"
    """

    YEAR = "y"
    """Year: yy = last two digits, otherwise zero-padded to run length"""

    MONTH = "M"
    """Month: M/MM numeric, MMM abbreviated name, MMMM+ wide name"""

    DAY = "d"
    """Day of month, zero-padded"""

    HOUR_24 = "H"
    """Hour 0-23, zero-padded"""

    HOUR_12 = "h"
    """Hour 1-12, zero-padded"""

    MINUTE = "m"
    """Minute, zero-padded"""

    SECOND = "s"
    """Second, zero-padded"""

    PERIOD = "a"
    """AM/PM marker (run length ignored)"""

    WEEKDAY = "E"
    """Wide weekday name (run length ignored)"""


__all__ = [
    "PatternField",
]
