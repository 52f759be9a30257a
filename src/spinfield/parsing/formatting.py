"""Locale-aware number formatting, the inverse of parse_number().

Hosts use format_number() to produce the display text of a spin field (and
the text_value announced to assistive technology). Output uses the locale's
own separators and numeral glyphs, so parse_number(format_number(v, L), L)
recovers v for integers and simple decimals.

Python 3.13+. Uses Babel for CLDR formatting.
"""

from __future__ import annotations

from decimal import Decimal

from spinfield.constants import FALLBACK_LOCALE
from spinfield.core.babel_compat import get_babel_numbers
from spinfield.locale_utils import get_babel_locale

from .descriptor import LocaleDescriptor

__all__ = ["format_number"]


def format_number(
    value: int | float | Decimal,
    locale_code: str,
    *,
    minimum_fraction_digits: int = 0,
    maximum_fraction_digits: int = 3,
    use_grouping: bool = True,
) -> str:
    """Format a number with locale-specific separators and numerals.

    Args:
        value: Number to format
        locale_code: BCP-47 or POSIX locale tag
        minimum_fraction_digits: Minimum decimal places (default: 0)
        maximum_fraction_digits: Maximum decimal places (default: 3)
        use_grouping: Insert group separators (default: True)

    Returns:
        Formatted number string

    Raises:
        ValueError: If the fraction digit bounds are negative or inverted

    Examples:
        >>> format_number(1234.5, "en-US")
        '1,234.5'
        >>> format_number(1234.5, "de-DE")
        '1.234,5'
        >>> format_number(1234.5, "de-DE", use_grouping=False)
        '1234,5'
    """
    if minimum_fraction_digits < 0 or maximum_fraction_digits < minimum_fraction_digits:
        msg = (
            "Fraction digits must satisfy 0 <= minimum <= maximum, got "
            f"{minimum_fraction_digits}..{maximum_fraction_digits}"
        )
        raise ValueError(msg)

    descriptor = LocaleDescriptor.create(locale_code)
    babel_numbers = get_babel_numbers()

    # '#,##0' = integer with grouping, '0.0##' = 1-3 decimal places
    integer_part = "#,##0" if use_grouping else "0"
    if maximum_fraction_digits == 0:
        pattern = integer_part
    else:
        required = "0" * minimum_fraction_digits
        optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
        pattern = f"{integer_part}.{required}{optional}"

    # Fallback descriptors format with the fallback locale's rules
    babel_locale = get_babel_locale(
        FALLBACK_LOCALE if descriptor.is_fallback else descriptor.locale_code
    )
    text = babel_numbers.format_decimal(
        value,
        format=pattern,
        locale=babel_locale,
        numbering_system=descriptor.numbering_system,
    )
    return descriptor.to_native_digits(text)
