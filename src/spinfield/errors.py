"""Exception types for SpinField.

The interaction core has no user-visible error channel: unparseable input
resolves to ``nan`` and missing host callbacks are skipped. Exceptions are
reserved for programming errors at the API boundary, such as strict locale
resolution and invalid timing configuration.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["LocaleResolutionError", "SpinFieldError"]


class SpinFieldError(Exception):
    """Base exception for all SpinField errors."""


class LocaleResolutionError(SpinFieldError, ValueError):
    """Raised when a locale tag cannot be resolved to CLDR locale data.

    Only raised by strict resolution paths such as
    ``LocaleDescriptor.create_or_raise()``. The lenient ``create()`` path falls
    back to the default locale and logs a warning instead.

    Attributes:
        locale_code: The locale tag as supplied by the caller
    """

    def __init__(self, locale_code: str, reason: str) -> None:
        """Initialize LocaleResolutionError.

        Args:
            locale_code: The locale tag that failed to resolve
            reason: Underlying failure description
        """
        super().__init__(f"Cannot resolve locale '{locale_code}': {reason}")
        self.locale_code = locale_code
