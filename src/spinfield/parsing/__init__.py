"""Locale-aware parsing of typed spin-field text.

Converts the text a user types into a numeric field, in the locale's own
separators and numeral glyphs, back into a number. Unparseable text yields
nan rather than an exception; hosts check results with is_valid_number().

Public API:
    NumberParser - Parser bound to one active locale (re-derives on change)
    LocaleDescriptor - Cached per-locale glyph data (separators, numerals)
    parse_number - Returns float (nan for invalid input)
    format_number - Inverse of parse_number, locale glyphs included
    is_valid_number - TypeIs guard for finite float

Example:
    >>> from spinfield.parsing import NumberParser, is_valid_number
    >>> parser = NumberParser("de-DE")
    >>> value = parser.parse("1.234,5")
    >>> is_valid_number(value)
    True

Python 3.13+. Uses Babel for CLDR data.
"""

from .descriptor import LocaleDescriptor, derive_descriptor
from .formatting import format_number
from .guards import is_valid_number
from .numbers import NumberParser, parse_number, parse_with_descriptor

__all__ = [
    "LocaleDescriptor",
    "NumberParser",
    "derive_descriptor",
    "format_number",
    "is_valid_number",
    "parse_number",
    "parse_with_descriptor",
]
