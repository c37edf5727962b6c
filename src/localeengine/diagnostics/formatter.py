"""Rendering of locale diagnostics for terminals, logs and tools.

Three styles share one field list so that every style reports the same
facts: the multi-line compiler style used by exception messages, a
single-line style for log records, and JSON for scripts that post-process
catalog build reports.

Python 3.11+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic
from .errors import LocaleEngineError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# ANSI styles per severity (bold red / bold yellow).
_SEVERITY_STYLES = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Rendering styles understood by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects in a configurable style.

    Attributes:
        output_format: RUST (multi-line, default), SIMPLE (one line) or JSON
        sanitize: Cut user-supplied text (locale strings, hints) to
            ``max_content_length`` characters
        color: Wrap the severity label in ANSI color codes
        max_content_length: Length limit applied when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.unknown_locale("en-GBB", ["en-GB"])
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[UNKNOWN_LOCALE]: Unknown locale identifier 'en-GBB'
          = locale: en-GBB
          = help: Did you mean: en-GB?
          = note: see https://unicode.org/reports/tr35/#Unicode_locale_identifier
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        UNKNOWN_LOCALE: Unknown locale identifier 'en-GBB'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        if self.output_format is OutputFormat.SIMPLE:
            return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
        if self.output_format is OutputFormat.JSON:
            return self._render_json(diagnostic)
        return self._render_rust(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between each."""
        return "\n\n".join(map(self.format, diagnostics))

    def format_exception(self, error: LocaleEngineError) -> str:
        """Render a LocaleEngine exception.

        Exceptions built from a plain message (no diagnostic) render as that
        message, sanitized if configured.

        Example:
            >>> try:
            ...     parse_locale("xx")
            ... except UnknownLocaleError as e:
            ...     print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_exception(e))
            UNKNOWN_LOCALE: Unknown locale identifier 'xx'
        """
        if error.diagnostic is None:
            return self._clip(str(error))
        return self.format(error.diagnostic)

    def _details(self, diagnostic: Diagnostic) -> list[tuple[str, str, str]]:
        """(label, JSON key, value) for each optional field that is set."""
        details: list[tuple[str, str, str]] = []
        if diagnostic.locale_tag:
            details.append(("locale", "locale_tag", self._clip(diagnostic.locale_tag)))
        if diagnostic.field_name:
            details.append(("field", "field_name", diagnostic.field_name))
        if diagnostic.hint:
            details.append(("help", "hint", self._clip(diagnostic.hint)))
        if diagnostic.help_url:
            details.append(("note", "help_url", diagnostic.help_url))
        return details

    def _render_rust(self, diagnostic: Diagnostic) -> str:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        label = f"{_SEVERITY_STYLES[severity]}{severity}{_RESET}" if self.color else severity
        lines = [f"{label}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        for name, _, value in self._details(diagnostic):
            if name == "note":
                value = f"see {value}"
            lines.append(f"  = {name}: {value}")
        return "\n".join(lines)

    def _render_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        payload.update((key, value) for _, key, value in self._details(diagnostic))
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
