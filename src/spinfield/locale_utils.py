"""Locale tag utilities.

Normalizes BCP-47 tags to the POSIX form Babel expects and detects the
ambient locale used when a parser is created without an explicit tag.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from spinfield.constants import FALLBACK_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale tag to POSIX format for Babel.

    All locale handling normalizes at the entry point with this function, so
    "en-US" and "en_US" share one cache entry.

    Args:
        locale_code: BCP-47 or POSIX locale tag (e.g., "de-DE", "de_DE")

    Returns:
        POSIX-formatted locale tag (e.g., "de_DE")

    Example:
        >>> normalize_locale("ar-EG")
        'ar_EG'
        >>> normalize_locale("fr")
        'fr'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale tag (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _strip_posix_suffixes(value: str) -> str:
    # "de_DE.UTF-8@euro" -> "de_DE"
    return value.split(".", 1)[0].split("@", 1)[0]


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the ambient locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale(LC_NUMERIC) (process numeric locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_NUMERIC environment variable (numeric formatting category)
    4. LANG environment variable (default locale)

    "C" and "POSIX" pseudo-locales are ignored.

    Args:
        raise_on_failure: If True, raise RuntimeError when no locale can be
            determined. If False (default), return the fallback locale.

    Returns:
        Detected locale tag in POSIX format, or "en_US".

    Raises:
        RuntimeError: If raise_on_failure is True and detection fails.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale(locale_module.LC_NUMERIC)
    except ValueError:
        system_locale = None
    if system_locale and system_locale not in _PSEUDO_LOCALES:
        return normalize_locale(_strip_posix_suffixes(system_locale))

    for var in ("LC_ALL", "LC_NUMERIC", "LANG"):
        value = os.environ.get(var)
        if value:
            locale_code = _strip_posix_suffixes(value)
            if locale_code not in _PSEUDO_LOCALES:
                return normalize_locale(locale_code)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_NUMERIC, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE
