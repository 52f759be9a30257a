"""Locale number descriptors: the glyph data a parser needs for one locale.

A LocaleDescriptor captures, for a single locale, which glyph separates digit
groups, which glyph marks the decimal point, and which ten glyphs the locale
uses for the digits zero through nine. Descriptors are derived from Babel's
CLDR data by probing the locale's own number formatting, then cached so each
locale is derived exactly once.

Architecture:
    - derive_descriptor(): Pure function, Babel Locale -> LocaleDescriptor
    - LocaleDescriptor.create(): Cached, lenient (falls back to en_US)
    - LocaleDescriptor.create_or_raise(): Uncached, strict

Known Limitation:
    If a locale's group and decimal glyphs coincide, cleaning is ambiguous:
    group stripping runs first, so the decimal glyph is removed as well. This
    is accepted behavior and is not patched around.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from spinfield.constants import (
    DEFAULT_NUMBERING_SYSTEM,
    FALLBACK_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
    NUMBERING_SYSTEM_DIGITS,
    NUMERAL_PROBE,
    SEPARATOR_PROBE,
)
from spinfield.core.babel_compat import (
    get_babel_numbers,
    get_unknown_locale_error,
    require_babel,
)
from spinfield.errors import LocaleResolutionError
from spinfield.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale

__all__ = ["LocaleDescriptor", "derive_descriptor"]

logger = logging.getLogger(__name__)

_ASCII_DIGITS = "0123456789"

# Matches nothing; used when a locale defines no glyph for a separator.
_NEVER = re.compile(r"(?!)")


def _glyph_class(glyphs: str) -> re.Pattern[str]:
    if not glyphs:
        return _NEVER
    return re.compile("[" + "".join(re.escape(glyph) for glyph in glyphs) + "]")


@dataclass(frozen=True, slots=True, eq=False)
class LocaleDescriptor:
    """Immutable number glyph data for one locale.

    Use LocaleDescriptor.create() to obtain instances; it derives the data
    once per locale and caches the result.

    Attributes:
        locale_code: Locale tag as supplied by the caller
        numbering_system: CLDR numbering system id (e.g., "latn", "arab")
        group_symbol: Digit group separator glyph(s)
        decimal_symbol: Decimal separator glyph
        numerals: Ten numeral glyphs; index N is the glyph for N
        sample: SEPARATOR_PROBE as the locale formats it (e.g., "12,345.6")
        group_pattern: Matches every group separator glyph
        decimal_pattern: Matches the decimal separator glyph
        numeral_pattern: Matches any locale numeral glyph
        numeral_index: Maps a locale numeral glyph to its value 0-9
        is_fallback: True if the requested locale could not be resolved and
            en_US data was used instead

    Examples:
        >>> descriptor = LocaleDescriptor.create("de-DE")
        >>> descriptor.group_symbol, descriptor.decimal_symbol
        ('.', ',')
        >>> descriptor.sample
        '12.345,6'

        >>> LocaleDescriptor.create("ar-EG").numerals[:3]
        ('٠', '١', '٢')
    """

    _cache: ClassVar[OrderedDict[str, LocaleDescriptor]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    numbering_system: str
    group_symbol: str
    decimal_symbol: str
    numerals: tuple[str, ...]
    sample: str
    group_pattern: re.Pattern[str]
    decimal_pattern: re.Pattern[str]
    numeral_pattern: re.Pattern[str]
    numeral_index: Mapping[str, int]
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the descriptor cache.

        Use this method to free memory or reset state in tests.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with "size", "max_size" and "locales" (normalized tags
            in LRU order, least recently used first).
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> LocaleDescriptor:
        """Get the cached descriptor for a locale, deriving it on first use.

        Unknown or malformed locale tags log a warning and fall back to en_US
        data. The returned descriptor keeps the original tag in locale_code
        and sets is_fallback. Use create_or_raise() for strict validation.

        Thread Safety:
            OrderedDict LRU cache guarded by an RLock. Concurrent calls for the
            same locale return the same instance.

        Args:
            locale_code: BCP-47 or POSIX locale tag (e.g., "fr-FR", "fr_FR")

        Returns:
            LocaleDescriptor for the locale (or the fallback locale)

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleDescriptor.create")
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        unknown_locale_error = get_unknown_locale_error()
        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except unknown_locale_error as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True

        descriptor = derive_descriptor(babel_locale, locale_code, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                evicted, _ = cls._cache.popitem(last=False)
                logger.debug("Evicted locale descriptor: %s", evicted)
            cls._cache[cache_key] = descriptor
            return descriptor

    @classmethod
    def create_or_raise(cls, locale_code: str) -> LocaleDescriptor:
        """Derive a descriptor, raising instead of falling back.

        Bypasses the cache.

        Args:
            locale_code: BCP-47 or POSIX locale tag

        Returns:
            LocaleDescriptor for the locale

        Raises:
            LocaleResolutionError: If the locale is unknown or malformed
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleDescriptor.create_or_raise")
        unknown_locale_error = get_unknown_locale_error()
        try:
            babel_locale = get_babel_locale(normalize_locale(locale_code))
        except unknown_locale_error as e:
            raise LocaleResolutionError(locale_code, f"unknown locale ({e})") from None
        except (ValueError, TypeError) as e:
            raise LocaleResolutionError(locale_code, f"invalid format ({e})") from None
        return derive_descriptor(babel_locale, locale_code)

    def to_native_digits(self, text: str) -> str:
        """Replace ASCII digits in text with this locale's numeral glyphs."""
        if self.numbering_system == DEFAULT_NUMBERING_SYSTEM:
            return text
        return text.translate(str.maketrans(_ASCII_DIGITS, "".join(self.numerals)))


def _resolve_numbering_system(babel_locale: Locale) -> str:
    system = getattr(babel_locale, "default_numbering_system", DEFAULT_NUMBERING_SYSTEM)
    if system not in NUMBERING_SYSTEM_DIGITS:
        logger.warning(
            "Numbering system '%s' of locale '%s' is not supported. Using '%s'",
            system,
            babel_locale,
            DEFAULT_NUMBERING_SYSTEM,
        )
        return DEFAULT_NUMBERING_SYSTEM
    return system


def derive_descriptor(
    babel_locale: Locale,
    locale_code: str,
    *,
    is_fallback: bool = False,
) -> LocaleDescriptor:
    """Derive number glyph data for a locale from its CLDR formatting rules.

    Pure function: reads Babel's immutable CLDR data, touches no cache.

    Derivation:
    1. Pick the locale's default numbering system.
    2. Read the group and decimal glyphs of that numbering system and format
       SEPARATOR_PROBE with them as a human-readable sample.
    3. Format NUMERAL_PROBE (9876543210) without grouping, substitute the
       numbering system's digits, and reverse it so that position N holds
       the glyph for N.
    4. Build the three matchers and the glyph -> value lookup.

    Args:
        babel_locale: Resolved Babel Locale
        locale_code: Tag to record on the descriptor
        is_fallback: Whether babel_locale is a fallback for locale_code

    Returns:
        New LocaleDescriptor
    """
    babel_numbers = get_babel_numbers()
    system = _resolve_numbering_system(babel_locale)
    native = str.maketrans(_ASCII_DIGITS, NUMBERING_SYSTEM_DIGITS[system])

    group_symbol = babel_numbers.get_group_symbol(babel_locale, numbering_system=system)
    decimal_symbol = babel_numbers.get_decimal_symbol(babel_locale, numbering_system=system)
    sample = babel_numbers.format_decimal(
        SEPARATOR_PROBE, locale=babel_locale, numbering_system=system
    ).translate(native)

    probe = babel_numbers.format_decimal(
        NUMERAL_PROBE,
        format="0",
        locale=babel_locale,
        group_separator=False,
        numbering_system=system,
    ).translate(native)
    numerals = tuple(reversed(probe))

    logger.debug(
        "Derived number descriptor for '%s': system=%s group=%r decimal=%r",
        locale_code,
        system,
        group_symbol,
        decimal_symbol,
    )

    return LocaleDescriptor(
        locale_code=locale_code,
        numbering_system=system,
        group_symbol=group_symbol,
        decimal_symbol=decimal_symbol,
        numerals=numerals,
        sample=sample,
        group_pattern=_glyph_class(group_symbol),
        decimal_pattern=_glyph_class(decimal_symbol),
        numeral_pattern=_glyph_class("".join(numerals)),
        numeral_index=MappingProxyType({glyph: value for value, glyph in enumerate(numerals)}),
        is_fallback=is_fallback,
    )
