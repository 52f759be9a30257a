"""Locale-aware number parsing for typed spin-field text.

- parse() returns float; unparseable input yields nan, never an exception
- One NumberParser per control, bound to the control's active locale
- Locale changes swap the cached descriptor; nothing else is recomputed

Cleaning pipeline (in order):
    1. Strip surrounding whitespace
    2. Remove every group separator glyph
    3. Replace the first decimal separator glyph with "."
    4. Replace every locale numeral glyph with its ASCII digit
    5. Empty -> nan; otherwise parse as a numeric literal (sign, digits,
       fraction and exponent accepted), anything else -> nan

Thread-safe. Parsing only reads immutable descriptor state.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
import math
import re

from spinfield.locale_utils import get_system_locale, normalize_locale

from .descriptor import LocaleDescriptor

__all__ = ["NumberParser", "parse_number", "parse_with_descriptor"]

logger = logging.getLogger(__name__)

_NUMERIC_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_with_descriptor(descriptor: LocaleDescriptor, value: str) -> float:
    """Parse text using the glyph data of one locale.

    Args:
        descriptor: Locale glyph data
        value: Text as typed by the user (e.g., "1.234,5" for de_DE)

    Returns:
        Parsed number, or nan if the text is empty or not numeric

    Raises:
        TypeError: If value is not a string
    """
    if not isinstance(value, str):
        msg = f"Expected str, got {type(value).__name__}"
        raise TypeError(msg)

    index = descriptor.numeral_index
    cleaned = descriptor.group_pattern.sub("", value.strip())
    cleaned = descriptor.decimal_pattern.sub(".", cleaned, count=1)
    cleaned = descriptor.numeral_pattern.sub(lambda m: str(index[m.group()]), cleaned)

    if not cleaned or _NUMERIC_LITERAL.fullmatch(cleaned) is None:
        return math.nan
    return float(cleaned)


def parse_number(value: str, locale_code: str) -> float:
    """Parse a locale-formatted number string.

    Convenience wrapper around the cached descriptor for locale_code.

    Args:
        value: Number string (e.g., "12 345,6" for fr_FR)
        locale_code: BCP-47 or POSIX locale tag

    Returns:
        Parsed float, or nan if the text is not a number

    Examples:
        >>> parse_number("1,234.5", "en-US")
        1234.5
        >>> parse_number("1.234,5", "de-DE")
        1234.5
        >>> parse_number("   ", "en-US")
        nan
    """
    return parse_with_descriptor(LocaleDescriptor.create(locale_code), value)


class NumberParser:
    """Number parser bound to one active locale.

    The host assigns ``parser.locale`` whenever its ambient locale changes;
    the descriptor is replaced only when the normalized tag actually differs.

    Examples:
        >>> parser = NumberParser("fr-FR")
        >>> parser.parse("12\\u202f345,6")
        12345.6
        >>> parser.locale = "en-US"
        >>> parser.parse("12,345.6")
        12345.6

    Thread Safety:
        parse() is safe to call concurrently; it reads one immutable
        descriptor reference.
    """

    __slots__ = ("_descriptor",)

    def __init__(self, locale_code: str | None = None) -> None:
        """Initialize parser.

        Args:
            locale_code: BCP-47 or POSIX locale tag. If None, the system
                locale is detected via get_system_locale().
        """
        if locale_code is None:
            locale_code = get_system_locale()
        self._descriptor = LocaleDescriptor.create(locale_code)

    @property
    def locale(self) -> str:
        """Active locale tag as supplied by the host."""
        return self._descriptor.locale_code

    @locale.setter
    def locale(self, locale_code: str) -> None:
        if normalize_locale(locale_code) == normalize_locale(self._descriptor.locale_code):
            return
        logger.debug("Parser locale changed: %s -> %s", self._descriptor.locale_code, locale_code)
        self._descriptor = LocaleDescriptor.create(locale_code)

    @property
    def descriptor(self) -> LocaleDescriptor:
        """Glyph data for the active locale."""
        return self._descriptor

    def parse(self, value: str) -> float:
        """Parse text typed in the active locale.

        Args:
            value: Text to parse

        Returns:
            Parsed float, or nan if the text is empty or not numeric
        """
        return parse_with_descriptor(self._descriptor, value)

    def __repr__(self) -> str:
        return f"NumberParser(locale={self.locale!r})"
