"""Locale identifiers and per-locale formatting metadata records.

LocaleId is the opaque, ordered handle callers pass to formatters.
LocaleData is the immutable metadata record the formatters read from.
Neither type knows where its data came from: a Babel-built catalog,
a JSON table, or a hand-written test fixture are all equivalent.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, NoReturn

from localeengine.diagnostics import CatalogError, ErrorTemplate

__all__ = [
    "LocaleData",
    "LocaleId",
    "RECORD_FIELDS",
]


@dataclass(frozen=True, slots=True, order=True)
class LocaleId:
    """Canonical locale identifier drawn from a catalog.

    Ordered and compared by canonical tag string, so sorting a list of
    LocaleId values reproduces catalog order.

    Attributes:
        tag: Canonical, hyphen-delimited tag (e.g., "en-GB", "zh-Hans-HK")

    Example:
        >>> LocaleId("zh-Hans-HK").script_code
        'Hans'
        >>> LocaleId("en-GB").region_code
        'GB'
    """

    tag: str

    def __str__(self) -> str:
        return self.tag

    @property
    def subtags(self) -> tuple[str, ...]:
        """Hyphen-delimited subtags in order."""
        return tuple(self.tag.split("-"))

    @property
    def language_code(self) -> str:
        """Primary language subtag (e.g., "en" for "en-GB")."""
        return self.subtags[0]

    @property
    def script_code(self) -> str | None:
        """Four-letter script subtag directly after the language, if any."""
        parts = self.subtags
        if len(parts) > 1 and _is_script(parts[1]):
            return parts[1]
        return None

    @property
    def region_code(self) -> str | None:
        """Region subtag following language[-script], if any.

        Regions are two letters ("GB") or three digits ("419").
        """
        parts = self.subtags
        index = 2 if self.script_code is not None else 1
        if len(parts) > index and _is_region(parts[index]):
            return parts[index]
        return None


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and subtag.isascii() and subtag.isalpha()


def _is_region(subtag: str) -> bool:
    if not subtag.isascii():
        return False
    return (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit())


@dataclass(frozen=True, slots=True, kw_only=True)
class LocaleData:
    """Formatting metadata for one catalog entry.

    Construction enforces the data contract every producer (CLDR builder,
    JSON loader, test fixture) must honor. Sequence fields are stored as
    tuples regardless of the sequence type supplied.

    Attributes:
        decimal_separator: Separator between integer and fraction digits
        grouping_separator: Separator inserted between digit groups
        minus_sign: Sign glyph prefixed to negative values
        grouping_sizes: Group widths applied right-to-left; the last repeats.
            ``(0,)`` disables grouping.
        months_wide: 12 full month names, January first
        months_abbreviated: 12 abbreviated month names, January first
        days_wide: 7 full weekday names, Sunday first
        am_marker: Marker for hours 0-11
        pm_marker: Marker for hours 12-23
        date_pattern: Date skeleton in the pattern mini-language
        time_pattern: Time skeleton in the pattern mini-language
        currency_code: ISO 4217 code of the locale's currency
        currency_symbol: Display symbol for that currency
        currency_pattern: Pattern with a "¤" placeholder and a digit run
        native_digits: Ten glyphs for ASCII 0-9, or None for ASCII digits
    """

    decimal_separator: str
    grouping_separator: str
    minus_sign: str
    grouping_sizes: tuple[int, ...]
    months_wide: tuple[str, ...]
    months_abbreviated: tuple[str, ...]
    days_wide: tuple[str, ...]
    am_marker: str
    pm_marker: str
    date_pattern: str
    time_pattern: str
    currency_code: str
    currency_symbol: str
    currency_pattern: str
    native_digits: tuple[str, ...] | None = field(default=None)

    def __post_init__(self) -> None:
        for name in _STRING_FIELDS:
            if not isinstance(getattr(self, name), str):
                _fail(name, "expected a string")

        for name in ("date_pattern", "time_pattern"):
            if not getattr(self, name):
                _fail(name, "pattern must be non-empty")

        sizes = _as_tuple(self.grouping_sizes, "grouping_sizes")
        if not sizes:
            _fail("grouping_sizes", "expected at least one group size")
        if any(not isinstance(size, int) or isinstance(size, bool) for size in sizes):
            _fail("grouping_sizes", "group sizes must be integers")
        if sizes != (0,) and any(size <= 0 for size in sizes):
            _fail("grouping_sizes", "group sizes must be positive (or exactly [0])")
        object.__setattr__(self, "grouping_sizes", sizes)

        for name, expected in _NAME_TABLES.items():
            names = _as_tuple(getattr(self, name), name)
            if len(names) != expected:
                _fail(name, f"expected {expected} entries, got {len(names)}")
            if not all(isinstance(item, str) for item in names):
                _fail(name, "entries must be strings")
            object.__setattr__(self, name, names)

        if self.native_digits is not None:
            digits = _as_tuple(self.native_digits, "native_digits")
            if len(digits) != 10:
                _fail("native_digits", f"expected 10 glyphs, got {len(digits)}")
            if not all(isinstance(glyph, str) and glyph for glyph in digits):
                _fail("native_digits", "glyphs must be non-empty strings")
            object.__setattr__(self, "native_digits", digits)

    @classmethod
    def from_mapping(cls, tag: str, values: Mapping[str, Any]) -> LocaleData:
        """Build a record from a field mapping (e.g., decoded JSON).

        Every field except ``native_digits`` is required; unknown keys are
        rejected so that typos in hand-edited tables surface immediately.

        Args:
            tag: Locale tag the record belongs to (for error context)
            values: Field name to value mapping

        Returns:
            Validated LocaleData

        Raises:
            CatalogError: If a field is missing, unknown or invalid
        """
        unknown = sorted(set(values) - set(RECORD_FIELDS))
        if unknown:
            raise CatalogError(
                ErrorTemplate.invalid_field(tag, unknown[0], "unknown field"),
                tag=tag,
                field_name=unknown[0],
                reason="unknown field",
            )
        for name in RECORD_FIELDS:
            if name not in values and name != "native_digits":
                raise CatalogError(
                    ErrorTemplate.invalid_field(tag, name, "missing field"),
                    tag=tag,
                    field_name=name,
                    reason="missing field",
                )
        try:
            return cls(**values)
        except CatalogError as exc:
            raise CatalogError(
                ErrorTemplate.invalid_field(tag, exc.field_name, exc.reason),
                tag=tag,
                field_name=exc.field_name,
                reason=exc.reason,
            ) from exc

    def to_mapping(self) -> dict[str, Any]:
        """Return a JSON-compatible field mapping (tuples become lists)."""
        result: dict[str, Any] = {}
        for name in RECORD_FIELDS:
            value = getattr(self, name)
            result[name] = list(value) if isinstance(value, tuple) else value
        return result


_STRING_FIELDS: tuple[str, ...] = (
    "decimal_separator",
    "grouping_separator",
    "minus_sign",
    "am_marker",
    "pm_marker",
    "date_pattern",
    "time_pattern",
    "currency_code",
    "currency_symbol",
    "currency_pattern",
)

_NAME_TABLES: dict[str, int] = {
    "months_wide": 12,
    "months_abbreviated": 12,
    "days_wide": 7,
}

RECORD_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(LocaleData))


def _as_tuple(value: object, name: str) -> tuple[Any, ...]:
    # A bare string is a Sequence too; reject it instead of splitting it.
    if isinstance(value, str) or not isinstance(value, Sequence):
        _fail(name, "expected a sequence")
    return tuple(value)  # type: ignore[arg-type]


def _fail(field_name: str, reason: str) -> NoReturn:
    raise CatalogError(
        ErrorTemplate.invalid_field("", field_name, reason),
        field_name=field_name,
        reason=reason,
    )
