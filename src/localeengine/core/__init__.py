"""Core utilities shared across catalog and runtime layers.

This package isolates access to optional third-party data sources so the
dependency graph stays clean:

    core <- catalog <- localization <- runtime

Exports:
    BabelImportError: Raised when Babel is required but missing
    is_babel_available: Check for an importable Babel installation
    require_babel: Fail fast with a helpful message when Babel is missing

Python 3.11+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
