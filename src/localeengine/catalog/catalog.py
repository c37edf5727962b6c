"""Immutable, indexed locale catalog.

A LocaleCatalog is the single table every resolver and formatter reads:
a sorted tuple of LocaleId values, an ordinal-indexed tuple of LocaleData
records, and a case-folded lookup index. Nothing mutates it after
construction, so one instance is safely shared across threads.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from localeengine.diagnostics import CatalogError, ErrorTemplate
from localeengine.locale_utils import normalize_locale

from .record import LocaleData, LocaleId

__all__ = ["LocaleCatalog"]


class LocaleCatalog:
    """Closed set of locale identifiers with one metadata record each.

    Tags are unique (also after case folding) and iterated in ascending
    string order. Records are addressed by LocaleId, by exact canonical tag,
    or by ordinal position.

    Args:
        records: Mapping of canonical tag to record, or (tag, record) pairs
        source: Provenance description (e.g., "babel 2.18.0 / CLDR 47")

    Raises:
        CatalogError: If a tag is empty or duplicated

    Example:
        >>> catalog = LocaleCatalog({"en": en_data, "en-GB": gb_data})
        >>> catalog.lookup("EN_gb")
        LocaleId(tag='en-GB')
        >>> catalog["en-GB"] is gb_data
        True
    """

    __slots__ = ("_ids", "_index", "_ordinals", "_records", "_source")

    def __init__(
        self,
        records: Mapping[str, LocaleData] | Iterable[tuple[str, LocaleData]],
        *,
        source: str = "",
    ) -> None:
        pairs = list(records.items()) if isinstance(records, Mapping) else list(records)

        index: dict[str, LocaleId] = {}
        for tag, data in pairs:
            if not isinstance(tag, str) or not tag.strip():
                raise CatalogError(ErrorTemplate.empty_tag())
            if tag != tag.strip() or "_" in tag or " " in tag:
                raise CatalogError(
                    ErrorTemplate.invalid_field(
                        tag, "tag", "tags must be hyphen-delimited without whitespace"
                    ),
                    tag=tag,
                    field_name="tag",
                )
            if not isinstance(data, LocaleData):
                raise CatalogError(
                    ErrorTemplate.invalid_field(tag, "record", "expected a LocaleData"),
                    tag=tag,
                )
            key = normalize_locale(tag)
            if key in index:
                existing = index[key].tag
                raise CatalogError(ErrorTemplate.duplicate_tag(tag, existing), tag=tag)
            index[key] = LocaleId(tag)

        pairs.sort(key=lambda pair: pair[0])
        self._ids: tuple[LocaleId, ...] = tuple(LocaleId(tag) for tag, _ in pairs)
        self._records: tuple[LocaleData, ...] = tuple(data for _, data in pairs)
        self._ordinals: dict[str, int] = {
            locale_id.tag: ordinal for ordinal, locale_id in enumerate(self._ids)
        }
        self._index = index
        self._source = source

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[LocaleId]:
        return iter(self._ids)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, LocaleId):
            return item.tag in self._ordinals
        if isinstance(item, str):
            return item in self._ordinals
        return False

    def __getitem__(self, key: LocaleId | str) -> LocaleData:
        tag = key.tag if isinstance(key, LocaleId) else key
        try:
            return self._records[self._ordinals[tag]]
        except KeyError:
            raise KeyError(tag) from None

    def __repr__(self) -> str:
        return f"LocaleCatalog(<{len(self)} locales>, source={self._source!r})"

    @property
    def source(self) -> str:
        """Provenance description of the catalog data."""
        return self._source

    @property
    def ids(self) -> tuple[LocaleId, ...]:
        """All locale identifiers in tag order."""
        return self._ids

    @property
    def tags(self) -> tuple[str, ...]:
        """All canonical tags in ascending order."""
        return tuple(locale_id.tag for locale_id in self._ids)

    def get(self, key: LocaleId | str, default: LocaleData | None = None) -> LocaleData | None:
        """Return the record for ``key``, or ``default`` when absent."""
        try:
            return self[key]
        except KeyError:
            return default

    def ordinal(self, locale_id: LocaleId | str) -> int:
        """Position of ``locale_id`` in tag order.

        Raises:
            KeyError: If the identifier is not in this catalog
        """
        tag = locale_id.tag if isinstance(locale_id, LocaleId) else locale_id
        return self._ordinals[tag]

    def lookup(self, key: str) -> LocaleId | None:
        """Case-insensitive match of a locale string against catalog tags.

        ``key`` is normalized first, so "en_gb", "EN-GB" and "en-GB" all
        resolve to the canonically-cased LocaleId("en-GB").

        Returns:
            Matching LocaleId, or None when no tag matches
        """
        return self._index.get(normalize_locale(key))

    def items(self) -> Iterator[tuple[LocaleId, LocaleData]]:
        """Iterate (LocaleId, LocaleData) pairs in tag order."""
        return zip(self._ids, self._records, strict=True)

    def normalized_keys(self) -> Iterator[tuple[str, LocaleId]]:
        """Iterate (normalized key, LocaleId) pairs in tag order."""
        return ((normalize_locale(locale_id.tag), locale_id) for locale_id in self._ids)
