"""LocaleEngine exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Only two conditions raise: resolving a locale string that matches no catalog
entry, and constructing catalog data that violates the record contract.
Formatting operations never raise.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogError",
    "LocaleEngineError",
    "UnknownLocaleError",
]


class LocaleEngineError(Exception):
    """Base exception for all LocaleEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleEngineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownLocaleError(LocaleEngineError, LookupError):
    """Locale string matched no catalog entry after normalization.

    The only recoverable error raised by locale resolution.

    Attributes:
        original_input: The string exactly as the caller supplied it

    Example:
        >>> try:
        ...     parse_locale("xx-YY")
        ... except UnknownLocaleError as e:
        ...     print(e.original_input)
        xx-YY
    """

    def __init__(self, message: str | Diagnostic, *, original_input: str) -> None:
        """Initialize UnknownLocaleError.

        Args:
            message: Error message string OR Diagnostic object
            original_input: The unnormalized input string
        """
        super().__init__(message)
        self.original_input = original_input


class CatalogError(LocaleEngineError, ValueError):
    """Locale data violates the catalog contract.

    Raised while constructing LocaleData records or a LocaleCatalog, and when
    a serialized catalog file cannot be decoded. Never raised by formatting.

    Attributes:
        tag: Locale tag of the offending record (empty if not applicable)
        field_name: Record field that failed validation (empty if not applicable)
        reason: Why the field value was rejected (empty if not applicable)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        tag: str = "",
        field_name: str = "",
        reason: str = "",
    ) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
            tag: Locale tag of the offending record
            field_name: Record field that failed validation
            reason: Why the field value was rejected
        """
        super().__init__(message)
        self.tag = tag
        self.field_name = field_name
        self.reason = reason
