"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL (Unicode LDML specification)
    _DOCS_BASE = "https://unicode.org/reports/tr35"

    @staticmethod
    def unknown_locale(original_input: str, suggestions: Sequence[str] = ()) -> Diagnostic:
        """Locale string did not match any catalog entry.

        Args:
            original_input: The string as supplied by the caller
            suggestions: Close catalog tags (may be empty)

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Unknown locale identifier '{original_input}'"
        if suggestions:
            hint = f"Did you mean: {', '.join(suggestions)}?"
        else:
            hint = "Use a language[-script][-region] tag present in the locale catalog"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint=hint,
            help_url=f"{ErrorTemplate._DOCS_BASE}/#Unicode_locale_identifier",
            locale_tag=original_input,
        )

    @staticmethod
    def invalid_field(tag: str, field_name: str, reason: str) -> Diagnostic:
        """Locale metadata field violates the record contract.

        Args:
            tag: Locale tag of the record
            field_name: Name of the offending field
            reason: What is wrong with the value

        Returns:
            Diagnostic for INVALID_FIELD
        """
        if tag:
            msg = f"Invalid '{field_name}' for locale '{tag}': {reason}"
        else:
            msg = f"Invalid '{field_name}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FIELD,
            message=msg,
            hint="Regenerate the catalog or supply the documented default value",
            help_url=f"{ErrorTemplate._DOCS_BASE}/tr35-numbers.html",
            locale_tag=tag or None,
            field_name=field_name,
        )

    @staticmethod
    def duplicate_tag(tag: str, existing: str) -> Diagnostic:
        """Two catalog tags collide (case-insensitively).

        Args:
            tag: Tag being added
            existing: Tag already present in the catalog

        Returns:
            Diagnostic for DUPLICATE_TAG
        """
        msg = f"Locale tag '{tag}' duplicates catalog entry '{existing}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_TAG,
            message=msg,
            hint="Catalog tags must be unique regardless of case",
            locale_tag=tag,
        )

    @staticmethod
    def empty_tag() -> Diagnostic:
        """Catalog record has an empty tag.

        Returns:
            Diagnostic for EMPTY_TAG
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_TAG,
            message="Locale tag must be a non-empty string",
            hint="Use hyphen-delimited tags such as 'en' or 'zh-Hans-HK'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#Unicode_locale_identifier",
        )

    @staticmethod
    def catalog_file_invalid(path: str, reason: str) -> Diagnostic:
        """Serialized catalog file could not be decoded.

        Args:
            path: File path (or "<dict>" for in-memory data)
            reason: Decoder error message

        Returns:
            Diagnostic for CATALOG_FILE_INVALID
        """
        msg = f"Cannot load locale catalog from '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_FILE_INVALID,
            message=msg,
            hint="Regenerate the file with scripts/generate_catalog.py",
        )

    @staticmethod
    def empty_catalog(locale_code: str) -> Diagnostic:
        """No record to fall back to: the catalog holds no locales.

        Args:
            locale_code: Locale string that failed to resolve

        Returns:
            Diagnostic for EMPTY_CATALOG
        """
        msg = f"Cannot resolve '{locale_code}': the locale catalog is empty"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CATALOG,
            message=msg,
            hint="Build the catalog from at least one locale record",
            locale_tag=locale_code,
        )
