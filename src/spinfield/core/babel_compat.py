"""Deferred access to Babel.

Babel is a required dependency, but importing it loads CLDR data, and the
spin-button package never needs it. The parsing entry points therefore import
it on first use through these getters. require_babel() turns a broken install
into a BabelImportError naming the feature instead of a bare
ModuleNotFoundError.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from decimal import Decimal

    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


# pylint: disable=redefined-builtin,unnecessary-ellipsis
# Reason: Protocol definitions mirror Babel's API which uses 'format' parameter name
class BabelNumbersProtocol(Protocol):
    """Subset of the babel.numbers API used by SpinField."""

    def format_decimal(
        self,
        number: int | float | Decimal,
        format: str | None = None,
        locale: Locale | str | None = None,
        decimal_quantization: bool = True,
        group_separator: bool = True,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Format decimal number with locale-specific formatting."""
        ...

    def get_decimal_symbol(
        self,
        locale: Locale | str | None = None,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Return the decimal separator for the locale."""
        ...

    def get_group_symbol(
        self,
        locale: Locale | str | None = None,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Return the digit group separator for the locale."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install Babel"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Return True if Babel is installed and importable."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError if Babel is not installed.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the babel.numbers module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
