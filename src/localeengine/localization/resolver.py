"""Locale resolution against a catalog.

Turns free-form locale strings into catalog LocaleId values and navigates
the fallback relation between them:

    parse_locale("en_gb")          -> LocaleId("en-GB")
    fallback(LocaleId("en-GB"))    -> LocaleId("en")
    negotiate(en-GB, [en, de, fr]) -> LocaleId("en")
    suggest("en-gbb")              -> (LocaleId("en-GB"), ...)

The fallback of a tag is the tag with its last hyphen-delimited subtag
removed, and only when that shorter tag is itself in the catalog. Fallback
strictly shortens the tag, so every chain terminates.

Every function takes an optional ``catalog``; the process-wide
default_catalog() is used when it is omitted.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from localeengine.catalog import LocaleCatalog, LocaleId, default_catalog
from localeengine.constants import MAX_SUGGESTION_DISTANCE, MAX_SUGGESTIONS
from localeengine.diagnostics import ErrorTemplate, UnknownLocaleError
from localeengine.locale_utils import normalize_locale

from .types import LocaleCode

__all__ = [
    "fallback",
    "fallback_chain",
    "levenshtein_distance",
    "negotiate",
    "negotiate_many",
    "parse_locale",
    "suggest",
]

logger = logging.getLogger(__name__)


def _resolve_catalog(catalog: LocaleCatalog | None) -> LocaleCatalog:
    return default_catalog() if catalog is None else catalog


def parse_locale(locale_code: LocaleCode, *, catalog: LocaleCatalog | None = None) -> LocaleId:
    """Resolve a free-form locale string to a catalog identifier.

    Underscores become hyphens and matching is case-insensitive; the
    returned id carries the canonical casing from the catalog.

    Args:
        locale_code: Locale string (e.g., "en_gb", "ZH-hans-hk")
        catalog: Catalog to resolve against (default: default_catalog())

    Returns:
        Matching LocaleId

    Raises:
        UnknownLocaleError: If no catalog tag matches. The diagnostic hint
            lists close matches from suggest() when any exist.

    Example:
        >>> parse_locale("en_gb")
        LocaleId(tag='en-GB')
    """
    table = _resolve_catalog(catalog)
    locale_id = table.lookup(normalize_locale(locale_code))
    if locale_id is not None:
        return locale_id

    suggestions = suggest(locale_code, catalog=table)
    logger.debug(
        "Unknown locale %r (suggestions: %s)",
        locale_code,
        ", ".join(s.tag for s in suggestions) or "none",
    )
    diagnostic = ErrorTemplate.unknown_locale(locale_code, [s.tag for s in suggestions])
    raise UnknownLocaleError(diagnostic, original_input=locale_code)


def fallback(locale_id: LocaleId, *, catalog: LocaleCatalog | None = None) -> LocaleId | None:
    """Parent of ``locale_id`` in the fallback relation.

    Returns:
        The tag without its last subtag if that tag is in the catalog,
        otherwise None (``locale_id`` is a root of its chain)

    Example:
        >>> fallback(LocaleId("zh-Hans-HK"))
        LocaleId(tag='zh-Hans')
        >>> fallback(LocaleId("en")) is None
        True
    """
    table = _resolve_catalog(catalog)
    parent, separator, _ = locale_id.tag.rpartition("-")
    if not separator or parent not in table:
        return None
    return LocaleId(parent)


def fallback_chain(
    locale_id: LocaleId, *, catalog: LocaleCatalog | None = None
) -> tuple[LocaleId, ...]:
    """``locale_id`` followed by each successive fallback, most specific first.

    Example:
        >>> fallback_chain(LocaleId("zh-Hans-HK"))
        (LocaleId(tag='zh-Hans-HK'), LocaleId(tag='zh-Hans'), LocaleId(tag='zh'))
    """
    table = _resolve_catalog(catalog)
    chain = [locale_id]
    parent = fallback(locale_id, catalog=table)
    while parent is not None:
        chain.append(parent)
        parent = fallback(parent, catalog=table)
    return tuple(chain)


def negotiate(
    locale_id: LocaleId,
    candidates: Iterable[LocaleId],
    *,
    catalog: LocaleCatalog | None = None,
) -> LocaleId | None:
    """Best available candidate for ``locale_id``.

    Returns ``locale_id`` when it is a candidate, otherwise the first member
    of its fallback chain that is a candidate, otherwise None.

    Example:
        >>> negotiate(LocaleId("en-GB"), [LocaleId("en"), LocaleId("de")])
        LocaleId(tag='en')
    """
    available = frozenset(candidates)
    if locale_id in available:
        return locale_id
    for parent in fallback_chain(locale_id, catalog=catalog)[1:]:
        if parent in available:
            return parent
    return None


def negotiate_many(
    requested: Iterable[LocaleId],
    candidates: Iterable[LocaleId],
    *,
    catalog: LocaleCatalog | None = None,
) -> LocaleId | None:
    """Negotiate a preference-ordered list (e.g., from Accept-Language).

    Returns the result of the first requested locale that negotiates
    successfully, or None when none does.
    """
    table = _resolve_catalog(catalog)
    available = tuple(candidates)
    for locale_id in requested:
        match = negotiate(locale_id, available, catalog=table)
        if match is not None:
            return match
    return None


def suggest(
    locale_code: LocaleCode,
    *,
    catalog: LocaleCatalog | None = None,
    limit: int = MAX_SUGGESTIONS,
    max_distance: int = MAX_SUGGESTION_DISTANCE,
) -> tuple[LocaleId, ...]:
    """Catalog locales whose normalized tag is close to ``locale_code``.

    Results are ordered by (edit distance, canonical tag) so the output is
    deterministic across runs.

    Args:
        locale_code: Free-form locale string
        catalog: Catalog to search (default: default_catalog())
        limit: Maximum number of results
        max_distance: Largest edit distance kept

    Example:
        >>> LocaleId("en-GB") in suggest("en-gbb")
        True
    """
    table = _resolve_catalog(catalog)
    key = normalize_locale(locale_code)
    scored: list[tuple[int, str, LocaleId]] = []
    for candidate_key, locale_id in table.normalized_keys():
        # Edit distance is at least the length difference.
        if abs(len(candidate_key) - len(key)) > max_distance:
            continue
        distance = levenshtein_distance(key, candidate_key)
        if distance <= max_distance:
            scored.append((distance, locale_id.tag, locale_id))
    scored.sort(key=lambda entry: (entry[0], entry[1]))
    return tuple(locale_id for _, _, locale_id in scored[:limit])


def levenshtein_distance(first: str, second: str) -> int:
    """Unit-cost edit distance (insert, delete, substitute).

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    if first == second:
        return 0
    if not first:
        return len(second)
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, left in enumerate(first, start=1):
        current = [i]
        for j, right in enumerate(second, start=1):
            cost = 0 if left == right else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]
