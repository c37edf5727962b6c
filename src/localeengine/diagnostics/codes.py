"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for LocaleEngineError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        RESOLUTION: Locale identifier could not be resolved against the catalog
        CATALOG: Locale data violates the catalog contract
        DATA_SOURCE: Catalog source (file, Babel) could not be read
    """

    RESOLUTION = "resolution"
    CATALOG = "catalog"
    DATA_SOURCE = "data_source"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Resolution errors (unknown locale identifiers)
        2000-2999: Catalog errors (record contract violations)
        3000-3999: Data source errors (catalog files, CLDR data)
    """

    # Resolution errors (1000-1999)
    UNKNOWN_LOCALE = 1001

    # Catalog errors (2000-2999)
    INVALID_FIELD = 2001
    DUPLICATE_TAG = 2002
    EMPTY_TAG = 2003
    EMPTY_CATALOG = 2004

    # Data source errors (3000-3999)
    CATALOG_FILE_INVALID = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.RESOLUTION
        if self.value < 3000:
            return ErrorCategory.CATALOG
        return ErrorCategory.DATA_SOURCE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        locale_tag: Locale tag involved in the error (if any)
        field_name: Metadata record field involved in the error (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    locale_tag: str | None = None
    field_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNKNOWN_LOCALE]: Unknown locale identifier 'en-GBB'
              = locale: en-GBB
              = help: Did you mean: en-GB?

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
