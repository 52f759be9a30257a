"""Shared constants for SpinField.

Centralizes timing, cache and locale-probe configuration so that the parsing
and spin-button packages draw from a single source of truth.

Constants are grouped by domain:
- Repeat timing: press-and-hold auto-repeat delays
- Cache limits: Memory bounds for locale descriptor caching
- Locale probing: Values formatted to discover locale glyphs
- Numbering systems: CLDR digit glyphs per numbering system

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Repeat timing
    "DEFAULT_INITIAL_DELAY_MS",
    "INCREMENT_REPEAT_INTERVAL_MS",
    "DECREMENT_REPEAT_INTERVAL_MS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale probing
    "FALLBACK_LOCALE",
    "DEFAULT_NUMBERING_SYSTEM",
    "SEPARATOR_PROBE",
    "NUMERAL_PROBE",
    # Numbering systems
    "NUMBERING_SYSTEM_DIGITS",
]

# ============================================================================
# REPEAT TIMING
# ============================================================================
#
# Press-and-hold spinning steps once immediately, waits DEFAULT_INITIAL_DELAY_MS,
# then keeps stepping at the per-direction interval until the press ends.
# Increment repeats slightly faster than decrement. Both are policy values and
# can be overridden per control through SpinButtonConfig.

# Delay between the immediate step and the first repeated step.
DEFAULT_INITIAL_DELAY_MS: int = 400

# Interval between repeated increment steps while held.
INCREMENT_REPEAT_INTERVAL_MS: int = 60

# Interval between repeated decrement steps while held.
DECREMENT_REPEAT_INTERVAL_MS: int = 75

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleDescriptor instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE PROBING
# ============================================================================

# Locale used when a requested locale is unknown or malformed.
FALLBACK_LOCALE: str = "en_US"

# Numbering system used when a locale names one missing from the table below.
DEFAULT_NUMBERING_SYSTEM: str = "latn"

# Formatted with grouping to expose the group and decimal separators.
SEPARATOR_PROBE: float = 12345.6

# Formatted without grouping; reversed, its digits read zero through nine.
NUMERAL_PROBE: int = 9876543210

# ============================================================================
# NUMBERING SYSTEMS
# ============================================================================
#
# Digit glyphs for the CLDR numeric numbering systems a locale may name as its
# default. Index N holds the glyph for the value N. Babel exposes the numbering
# system of a locale but always formats with ASCII digits, so native digits are
# substituted from this table.

NUMBERING_SYSTEM_DIGITS: dict[str, str] = {
    "latn": "0123456789",
    "arab": "٠١٢٣٤٥٦٧٨٩",
    "arabext": "۰۱۲۳۴۵۶۷۸۹",
    "beng": "০১২৩৪৫৬৭৮৯",
    "deva": "०१२३४५६७८९",
    "fullwide": "０１２３４５６７８９",
    "gujr": "૦૧૨૩૪૫૬૭૮૯",
    "guru": "੦੧੨੩੪੫੬੭੮੯",
    "hanidec": "〇一二三四五六七八九",
    "khmr": "០១២៣៤៥៦៧៨៩",
    "knda": "೦೧೨೩೪೫೬೭೮೯",
    "laoo": "໐໑໒໓໔໕໖໗໘໙",
    "mlym": "൦൧൨൩൪൫൬൭൮൯",
    "mymr": "၀၁၂၃၄၅၆၇၈၉",
    "orya": "୦୧୨୩୪୫୬୭୮୯",
    "tamldec": "௦௧௨௩௪௫௬௭௮௯",
    "telu": "౦౧౨౩౪౫౬౭౮౯",
    "thai": "๐๑๒๓๔๕๖๗๘๙",
    "tibt": "༠༡༢༣༤༥༦༧༨༩",
}
