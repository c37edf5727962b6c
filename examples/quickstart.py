"""Quickstart example for localeengine.

This example demonstrates basic usage of localeengine for locale-aware
formatting of numbers, currency and dates.

The first call builds the default catalog from Babel's CLDR data, which
takes a moment. Set LOCALEENGINE_CATALOG to a file written by
scripts/generate_catalog.py to load a pre-built catalog instead.

Note: exact strings depend on the installed CLDR release; the outputs shown
are for CLDR 47.
"""

from datetime import date, datetime

from localeengine import (
    LocaleContext,
    UnknownLocaleError,
    currency_format,
    date_format,
    number_format,
    parse_locale,
    time_format,
)

# Example 1: Numbers
print("=" * 50)
print("Example 1: Numbers")
print("=" * 50)

print(number_format(1234567.5, "en"))
# Output: 1,234,567.5

print(number_format(1234567.5, "de"))
# Output: 1.234.567,5

print(number_format(10000000, "hi"))
# Output: 1,00,00,000

print(number_format(2024, "ar_EG"))
# Output: ٢٬٠٢٤

# Example 2: Currency
print("\n" + "=" * 50)
print("Example 2: Currency")
print("=" * 50)

print(currency_format(100, "en"))
# Output: $100,-

print(currency_format(1.999, "en"))
# Output: $2,-

print(currency_format(-1234.5, "de"))
# Output: -1.234,50 €

# Example 3: Dates and times
print("\n" + "=" * 50)
print("Example 3: Dates and Times")
print("=" * 50)

moment = datetime(2024, 1, 5, 18, 45)
print(date_format(moment, "en"))
# Output: Jan 5, 2024

print(date_format(moment, "de"))
# Output: 05.01.2024

print(time_format(moment, "en_GB"))
# Output: 18:45:00

# Example 4: Reusing a context
print("\n" + "=" * 50)
print("Example 4: LocaleContext")
print("=" * 50)

ctx = LocaleContext.create("fr_FR")
print(ctx.locale_id, ctx.format_number(1234.5), ctx.format_currency(99.9))
print(ctx.format_pattern("EEEE d MMMM y", date(2024, 7, 14)))
# Output: dimanche 14 juillet 2024

# Example 5: Unknown locales
print("\n" + "=" * 50)
print("Example 5: Unknown Locales")
print("=" * 50)

lenient = LocaleContext.create("en-XX")
print(lenient.locale_id, lenient.is_fallback)
# Output: en True  (a warning is logged)

try:
    parse_locale("en-GBB")
except UnknownLocaleError as e:
    print(e)
    # Output:
    # error[UNKNOWN_LOCALE]: Unknown locale identifier 'en-GBB'
    #   = locale: en-GBB
    #   = help: Did you mean: en-GB, ...?
