"""Locale Fallback Example - Chains and Negotiation.

Demonstrates navigating the fallback relation of the locale catalog:

1. Fallback chains (zh-Hans-HK -> zh-Hans -> zh)
2. Negotiating against the locales an application supports
3. Negotiating an Accept-Language style preference list
4. Custom catalogs loaded from a JSON table

Python 3.11+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from localeengine import (
    LocaleCatalog,
    fallback_chain,
    negotiate,
    negotiate_many,
    parse_locale,
)
from localeengine.catalog import build_cldr_catalog, dump_catalog, load_catalog


def example_1_chains() -> None:
    """Example 1: Fallback chains."""
    print("=" * 60)
    print("Example 1: Fallback Chains")
    print("=" * 60)

    for code in ("zh_Hans_HK", "en-GB", "sr-Latn-BA", "ar-EG"):
        chain = fallback_chain(parse_locale(code))
        print(f"{code:12} -> {' > '.join(str(locale_id) for locale_id in chain)}")


def example_2_negotiate() -> None:
    """Example 2: Pick the best supported locale."""
    print("\n" + "=" * 60)
    print("Example 2: Negotiation")
    print("=" * 60)

    supported = [parse_locale(code) for code in ("en", "de", "zh-Hans")]
    for code in ("en-AU", "de-CH", "zh-Hans-SG", "fr-CA"):
        match = negotiate(parse_locale(code), supported)
        print(f"{code:12} -> {match}")


def example_3_preferences() -> None:
    """Example 3: Accept-Language style preference list."""
    print("\n" + "=" * 60)
    print("Example 3: Preference Lists")
    print("=" * 60)

    header = "fr-CA, de-AT;q=0.8, en;q=0.5"
    requested = [parse_locale(part.split(";")[0]) for part in header.split(",")]
    supported = [parse_locale(code) for code in ("en", "de")]
    print(f"{header!r} -> {negotiate_many(requested, supported)}")


def example_4_custom_catalog() -> None:
    """Example 4: A small catalog written to and loaded from JSON."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Catalog")
    print("=" * 60)

    catalog: LocaleCatalog = build_cldr_catalog(["en", "en_GB", "lv"])
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "catalog.json"
        dump_catalog(catalog, path)
        loaded = load_catalog(path)

    print(f"Loaded {len(loaded)} locales: {', '.join(loaded.tags)}")
    print(f"Source: {loaded.source}")
    print(fallback_chain(parse_locale("en_gb", catalog=loaded), catalog=loaded))


if __name__ == "__main__":
    example_1_chains()
    example_2_negotiate()
    example_3_preferences()
    example_4_custom_catalog()
