"""Locale catalog built from Babel's CLDR data.

Derives one LocaleData record per locale Babel ships, using the locale's
default numbering system, its format-context wide/abbreviated names, its
medium date/time patterns and the currency of its territory. Fields CLDR
does not provide fall back to the documented defaults in
localeengine.constants.

default_catalog() is the process-wide catalog used whenever a resolver or
formatter is called without an explicit ``catalog=`` argument.

Python 3.11+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from functools import lru_cache, partial
from typing import TYPE_CHECKING, Literal, TypeVar

from localeengine.constants import (
    CATALOG_PATH_ENV_VAR,
    DEFAULT_AM_MARKER,
    DEFAULT_CURRENCY_CODE,
    DEFAULT_CURRENCY_PATTERN,
    DEFAULT_DATE_PATTERN,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUPING_SEPARATOR,
    DEFAULT_GROUPING_SIZES,
    DEFAULT_MINUS_SIGN,
    DEFAULT_PM_MARKER,
    DEFAULT_TIME_PATTERN,
    NO_GROUPING,
)
from localeengine.core.babel_compat import (
    BabelDatesProtocol,
    get_babel_dates,
    get_babel_global,
    get_babel_numbers,
    get_babel_version,
    get_cldr_version,
    get_locale_class,
    get_locale_identifiers,
    get_unknown_locale_error,
    require_babel,
)

from .catalog import LocaleCatalog
from .record import LocaleData
from .serialization import load_catalog

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "build_cldr_catalog",
    "build_cldr_record",
    "default_catalog",
    "grouping_sizes_from",
    "native_digits_for",
]

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

# Unicode code point of the zero glyph for CLDR decimal numbering systems
# whose digits are contiguous 0-9 runs. Babel exposes the numbering system
# name but not its digit glyphs.
_NUMBERING_SYSTEM_ZEROS: dict[str, int] = {
    "adlm": 0x1E950,
    "arab": 0x0660,
    "arabext": 0x06F0,
    "beng": 0x09E6,
    "cakm": 0x11136,
    "deva": 0x0966,
    "fullwide": 0xFF10,
    "gujr": 0x0AE6,
    "guru": 0x0A66,
    "hmnp": 0x1E140,
    "java": 0xA9D0,
    "khmr": 0x17E0,
    "knda": 0x0CE6,
    "laoo": 0x0ED0,
    "limb": 0x1946,
    "mlym": 0x0D66,
    "mtei": 0xABF0,
    "mymr": 0x1040,
    "nkoo": 0x07C0,
    "olck": 0x1C50,
    "orya": 0x0B66,
    "rohg": 0x10D30,
    "tamldec": 0x0BE6,
    "telu": 0x0C66,
    "thai": 0x0E50,
    "tibt": 0x0F20,
    "vaii": 0xA620,
}

# Babel's placeholder for "no grouping" in parsed number patterns.
_BABEL_NO_GROUPING = 1000

_PERIOD_WIDTHS: tuple[Literal["wide", "abbreviated"], ...] = ("wide", "abbreviated")


def native_digits_for(numbering_system: str) -> tuple[str, ...] | None:
    """Ten digit glyphs of a numbering system, or None for ASCII/unknown."""
    zero = _NUMBERING_SYSTEM_ZEROS.get(numbering_system)
    if zero is None:
        return None
    return tuple(chr(zero + offset) for offset in range(10))


def grouping_sizes_from(grouping: tuple[int, int]) -> tuple[int, ...]:
    """Convert Babel's (primary, secondary) grouping to grouping_sizes.

    Example:
        >>> grouping_sizes_from((3, 3))
        (3,)
        >>> grouping_sizes_from((3, 2))
        (3, 2)
        >>> grouping_sizes_from((1000, 1000))
        (0,)
    """
    primary, secondary = grouping
    if primary <= 0 or primary >= _BABEL_NO_GROUPING:
        return NO_GROUPING
    if secondary == primary or secondary <= 0 or secondary >= _BABEL_NO_GROUPING:
        return (primary,)
    return (primary, secondary)


def _lookup(getter: Callable[[], _T], default: _T) -> _T:
    """Return getter(), or default when CLDR lacks the data."""
    try:
        value = getter()
    except (LookupError, AttributeError):
        return default
    return default if value is None else value


def _territory_for(locale: Locale) -> str | None:
    if locale.territory:
        return locale.territory
    likely = get_babel_global("likely_subtags").get(locale.language)
    if not likely:
        return None
    # Likely subtags look like "en_Latn_US".
    region = likely.split("_")[-1]
    return region if region.isupper() or region.isdigit() else None


def _currency_code_for(locale: Locale) -> str:
    territory = _territory_for(locale)
    if territory is None:
        return DEFAULT_CURRENCY_CODE
    currencies = _lookup(lambda: get_babel_numbers().get_territory_currencies(territory), [])
    return currencies[0] if currencies else DEFAULT_CURRENCY_CODE


def _period_marker(dates: BabelDatesProtocol, locale: Locale, key: str, default: str) -> str:
    """Format-context AM/PM marker, wide first, then abbreviated.

    Many locales alias their wide markers to the abbreviated ones, and
    Babel leaves those wide entries empty.
    """
    for width in _PERIOD_WIDTHS:
        names = _lookup(partial(dates.get_period_names, width, "format", locale), {})
        marker = names.get(key)
        if marker:
            return marker
    return default


def build_cldr_record(identifier: str) -> LocaleData:
    """Build the metadata record for one Babel locale identifier.

    Args:
        identifier: Babel/POSIX identifier (e.g., "en_GB", "zh_Hans_HK")

    Returns:
        Validated LocaleData

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If Babel has no data for the identifier
    """
    require_babel("build_cldr_record")
    numbers = get_babel_numbers()
    dates = get_babel_dates()
    locale = get_locale_class().parse(identifier)

    system = _lookup(lambda: locale.default_numbering_system, "latn")
    if system not in _lookup(lambda: locale.number_symbols, {}):
        system = "latn"

    grouping = _lookup(lambda: locale.decimal_formats[None].grouping, None)
    sizes = grouping_sizes_from(grouping) if grouping else DEFAULT_GROUPING_SIZES

    months_wide = dates.get_month_names("wide", "format", locale)
    months_abbreviated = dates.get_month_names("abbreviated", "format", locale)
    # Babel keys weekdays 0-6 starting Monday; records start on Sunday.
    days = dates.get_day_names("wide", "format", locale)

    currency_code = _currency_code_for(locale)

    return LocaleData(
        decimal_separator=_lookup(
            lambda: numbers.get_decimal_symbol(locale, numbering_system=system),
            DEFAULT_DECIMAL_SEPARATOR,
        ),
        grouping_separator=_lookup(
            lambda: numbers.get_group_symbol(locale, numbering_system=system),
            DEFAULT_GROUPING_SEPARATOR,
        ),
        minus_sign=_lookup(
            lambda: numbers.get_minus_sign_symbol(locale, numbering_system=system),
            DEFAULT_MINUS_SIGN,
        ),
        grouping_sizes=sizes,
        native_digits=native_digits_for(system),
        months_wide=tuple(months_wide[month] for month in range(1, 13)),
        months_abbreviated=tuple(months_abbreviated[month] for month in range(1, 13)),
        days_wide=(days[6], *(days[index] for index in range(6))),
        am_marker=_period_marker(dates, locale, "am", DEFAULT_AM_MARKER),
        pm_marker=_period_marker(dates, locale, "pm", DEFAULT_PM_MARKER),
        date_pattern=_lookup(
            lambda: dates.get_date_format("medium", locale).pattern, DEFAULT_DATE_PATTERN
        ) or DEFAULT_DATE_PATTERN,
        time_pattern=_lookup(
            lambda: dates.get_time_format("medium", locale).pattern, DEFAULT_TIME_PATTERN
        ) or DEFAULT_TIME_PATTERN,
        currency_code=currency_code,
        currency_symbol=_lookup(
            lambda: locale.currency_symbols.get(currency_code, currency_code), currency_code
        ),
        currency_pattern=_lookup(
            lambda: locale.currency_formats["standard"].pattern, DEFAULT_CURRENCY_PATTERN
        ),
    )


def build_cldr_catalog(identifiers: Iterable[str] | None = None) -> LocaleCatalog:
    """Build a catalog from Babel's CLDR data.

    Args:
        identifiers: Babel identifiers to include (default: every locale
            Babel ships). Tags are the identifiers with "_" replaced by "-".

    Returns:
        LocaleCatalog whose source names the Babel and CLDR versions

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("build_cldr_catalog")
    babel_unknown_locale = get_unknown_locale_error()
    names = get_locale_identifiers() if identifiers is None else list(identifiers)

    records: list[tuple[str, LocaleData]] = []
    for identifier in sorted(names):
        tag = identifier.replace("_", "-")
        try:
            records.append((tag, build_cldr_record(identifier)))
        except (babel_unknown_locale, ValueError, KeyError) as exc:
            # CatalogError is a ValueError: incomplete CLDR data lands here too.
            logger.warning("Skipping locale %s: %s", tag, exc)

    source = f"babel {get_babel_version()} / CLDR {get_cldr_version()}"
    catalog = LocaleCatalog(records, source=source)
    logger.info("Built locale catalog with %d locales (%s)", len(catalog), source)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> LocaleCatalog:
    """Process-wide locale catalog, built on first use.

    Loads the JSON table named by the LOCALEENGINE_CATALOG environment
    variable when set; otherwise builds the catalog from Babel CLDR data.
    Call ``default_catalog.cache_clear()`` to force a rebuild.

    Raises:
        CatalogError: If the configured catalog file is invalid
        BabelImportError: If no catalog file is configured and Babel is missing
    """
    path = os.environ.get(CATALOG_PATH_ENV_VAR)
    if path:
        logger.debug("Loading locale catalog from %s=%s", CATALOG_PATH_ENV_VAR, path)
        return load_catalog(path)
    return build_cldr_catalog()

