"""Locale utilities for tag normalization and system locale detection.

Centralizes locale string normalization used throughout the codebase.
Catalog tags are hyphen-delimited (BCP-47 style: "en-GB", "zh-Hans-HK");
user input may use POSIX underscores and arbitrary case.

Python 3.11+.
"""

from __future__ import annotations

import os

__all__ = [
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Normalize a free-form locale string into a case-folded lookup key.

    Converts POSIX underscores to hyphens and lower-cases the result so that
    "en_GB", "EN-gb" and "en-GB" all produce the same key. Surrounding
    whitespace is removed.

    This is the canonical normalization function. All locale matching
    (parsing, suggestion) compares normalized keys, then reports the
    canonically-cased catalog tag.

    Args:
        locale_code: Locale string (e.g., "en_GB", "ZH-hans-hk")

    Returns:
        Normalized key (e.g., "en-gb", "zh-hans-hk")

    Example:
        >>> normalize_locale("en_GB")
        'en-gb'
        >>> normalize_locale("zh-Hans-HK")
        'zh-hans-hk'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("_", "-").lower()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale of the running process, in hyphenated form.

    Candidates are tried in order: ``locale.getlocale()``, then the LC_ALL,
    LC_MESSAGES and LANG environment variables. The "C" and "POSIX"
    pseudo-locales are skipped. Encoding (".UTF-8") and modifier ("@euro")
    suffixes are removed, so "de_DE.UTF-8" becomes "de-DE". The result is
    not checked against a catalog; resolve it with parse_locale().

    Args:
        raise_on_failure: Raise RuntimeError instead of returning "en-US"
            when no candidate yields a locale

    Raises:
        RuntimeError: If raise_on_failure is True and nothing was found
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        candidates = [locale_module.getlocale()[0]]
    except ValueError:
        # getlocale() rejects some unparsable LC_CTYPE settings.
        candidates = []
    candidates.extend(os.environ.get(var) for var in _LOCALE_ENV_VARS)

    for candidate in candidates:
        tag = _strip_posix_suffixes(candidate) if candidate else ""
        if tag and tag not in _PSEUDO_LOCALES:
            return tag

    if raise_on_failure:
        msg = f"Could not determine the system locale; set one of {', '.join(_LOCALE_ENV_VARS)}"
        raise RuntimeError(msg)
    return "en-US"


_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def _strip_posix_suffixes(value: str) -> str:
    """Remove ".encoding" and "@modifier" parts and hyphenate."""
    base = value.split(".")[0].split("@")[0]
    return base.replace("_", "-")
