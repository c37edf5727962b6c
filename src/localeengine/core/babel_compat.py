"""Deferred access to Babel's CLDR data.

Babel is only needed to *build* a locale catalog. Formatting reads
LocaleData records and never touches Babel, so a deployment that loads a
pre-built JSON catalog (LOCALEENGINE_CATALOG) works without it. Every Babel
import in the package goes through this module so that a missing
installation fails with one consistent BabelImportError instead of a bare
ModuleNotFoundError from somewhere deep in the catalog builder.

Usage:
    from localeengine.core.babel_compat import get_babel_dates, require_babel

    def build_something(identifier: str) -> None:
        require_babel("build_something")
        dates = get_babel_dates()
        ...

Types from Babel are imported under TYPE_CHECKING only.

Python 3.11+.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from functools import lru_cache
from types import ModuleType
from typing import TYPE_CHECKING, Any, Literal, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_dates",
    "get_babel_global",
    "get_babel_numbers",
    "get_babel_version",
    "get_cldr_version",
    "get_locale_class",
    "get_locale_identifiers",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]

_Width = Literal["abbreviated", "narrow", "wide"]
_Context = Literal["format", "stand-alone"]
_Length = Literal["full", "long", "medium", "short"]


# pylint: disable=redefined-builtin,unnecessary-ellipsis
class BabelNumbersProtocol(Protocol):
    """The babel.numbers functions the catalog builder reads symbols from."""

    def get_decimal_symbol(
        self, locale: Locale | str | None = None, *, numbering_system: str = "latn"
    ) -> str: ...

    def get_group_symbol(
        self, locale: Locale | str | None = None, *, numbering_system: str = "latn"
    ) -> str: ...

    def get_minus_sign_symbol(
        self, locale: Locale | str | None = None, *, numbering_system: str = "latn"
    ) -> str: ...

    def get_territory_currencies(self, territory: str) -> list[str]:
        """Currencies in use in ``territory`` today, most relevant first."""
        ...


class BabelDatesProtocol(Protocol):
    """The babel.dates functions the catalog builder reads names and patterns from.

    Month names are keyed 1-12; day names 0-6 starting on Monday.
    """

    def get_month_names(
        self, width: _Width = "wide", context: _Context = "format", locale: Locale | str | None = None
    ) -> Mapping[int, str]: ...

    def get_day_names(
        self,
        width: _Width | Literal["short"] = "wide",
        context: _Context = "format",
        locale: Locale | str | None = None,
    ) -> Mapping[int, str]: ...

    def get_period_names(
        self,
        width: _Width = "wide",
        context: _Context = "stand-alone",
        locale: Locale | str | None = None,
    ) -> Mapping[str, str]: ...

    def get_date_format(
        self, format: _Length = "medium", locale: Locale | str | None = None
    ) -> Any: ...

    def get_time_format(
        self, format: _Length = "medium", locale: Locale | str | None = None
    ) -> Any: ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


class BabelImportError(ImportError):
    """Babel is needed for a catalog operation but is not installed.

    Attributes:
        feature: Name of the function that needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs Babel to read CLDR locale data. "
            "Install it with: pip install babel "
            "(or point LOCALEENGINE_CATALOG at a catalog written by "
            "scripts/generate_catalog.py)"
        )
        self.feature = feature


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        importlib.import_module("babel")
    except ImportError:
        return False
    return True


def is_babel_available() -> bool:
    """True when Babel can be imported (checked once per process)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming ``feature`` unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def _babel_module(name: str, feature: str) -> ModuleType:
    require_babel(feature)
    return importlib.import_module(name)


def get_locale_class() -> type[Locale]:
    """babel.Locale.

    Raises:
        BabelImportError: If Babel is not installed
    """
    return _babel_module("babel", "get_locale_class").Locale  # type: ignore[no-any-return]


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """babel.core.UnknownLocaleError, raised for identifiers without CLDR data.

    Raises:
        BabelImportError: If Babel is not installed
    """
    core = _babel_module("babel.core", "get_unknown_locale_error")
    return core.UnknownLocaleError  # type: ignore[no-any-return]


def get_babel_numbers() -> BabelNumbersProtocol:
    """babel.numbers, typed by BabelNumbersProtocol.

    Raises:
        BabelImportError: If Babel is not installed
    """
    return _babel_module("babel.numbers", "get_babel_numbers")  # type: ignore[return-value]


def get_babel_dates() -> BabelDatesProtocol:
    """babel.dates, typed by BabelDatesProtocol.

    Raises:
        BabelImportError: If Babel is not installed
    """
    return _babel_module("babel.dates", "get_babel_dates")  # type: ignore[return-value]


def get_babel_global(key: str) -> Mapping[str, Any]:
    """A table from Babel's locale-independent data (e.g., "likely_subtags").

    Raises:
        BabelImportError: If Babel is not installed
    """
    core = _babel_module("babel.core", "get_babel_global")
    return core.get_global(key)  # type: ignore[no-any-return]


def get_locale_identifiers() -> list[str]:
    """Every identifier Babel has data for, POSIX style ("en_GB"), unsorted.

    Babel's "root" pseudo-locale is not included.

    Raises:
        BabelImportError: If Babel is not installed
    """
    localedata = _babel_module("babel.localedata", "get_locale_identifiers")
    return list(localedata.locale_identifiers())


def get_babel_version() -> str:
    """Installed Babel version, e.g. "2.18.0".

    Raises:
        BabelImportError: If Babel is not installed
    """
    return str(_babel_module("babel", "get_babel_version").__version__)


def get_cldr_version() -> str:
    """CLDR release bundled with the installed Babel, e.g. "47".

    Raises:
        BabelImportError: If Babel is not installed
    """
    return str(_babel_module("babel.core", "get_cldr_version").get_cldr_version())
