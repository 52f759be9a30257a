"""Deferred Babel access for the parsing package.

Exports:
    BabelImportError: Raised when Babel is required but not installed
    is_babel_available: Check whether Babel can be imported
    require_babel: Fail fast with a helpful message when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
