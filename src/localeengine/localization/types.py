"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization and runtime
packages and by user code when annotating resolver call sites.

Python 3.11+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "LocaleKey",
    "LocaleTag",
]

LocaleCode: TypeAlias = str
"""Free-form locale string from user input (e.g., 'en_GB', 'EN-gb', 'zh-Hans-HK')."""

LocaleTag: TypeAlias = str
"""Canonically-cased catalog tag (e.g., 'en-GB', 'zh-Hans-HK')."""

LocaleKey: TypeAlias = str
"""Normalized lookup key: hyphenated and lower-cased (e.g., 'en-gb')."""
