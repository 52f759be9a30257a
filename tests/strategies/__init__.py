"""Hypothesis strategies for SpinField property-based testing.

Provides reusable strategies for:
- Locale tags with diverse separators and numbering systems
- Values that round-trip through locale formatting
- Key events for the spin-button keyboard table

Event-Emitting Strategies (HypoFuzz-Optimized):
- locale_tags: Emits locale_tag_style=bcp47|posix
- round_trip_values: Emits round_trip_kind=integer|decimal

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from spinfield.enums import Key
from spinfield.spinbutton import KeyboardEvent

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Locales covering comma/period/space/apostrophe grouping and the arab,
# arabext and beng numbering systems.
LOCALE_POOL = (
    "en_US",
    "en_GB",
    "de_DE",
    "fr_FR",
    "es_ES",
    "it_IT",
    "lv_LV",
    "pt_BR",
    "ru_RU",
    "ja_JP",
    "hi_IN",
    "ar_EG",
    "fa_IR",
    "bn_BD",
)

SPIN_KEYS = tuple(Key)


@st.composite
def locale_tags(draw: DrawFn) -> str:
    """Generate a locale tag from LOCALE_POOL in BCP-47 or POSIX spelling.

    Events emitted:
    - locale_tag_style=bcp47|posix
    """
    tag = draw(st.sampled_from(LOCALE_POOL))
    if draw(st.booleans()):
        event("locale_tag_style=bcp47")
        return tag.replace("_", "-")
    event("locale_tag_style=posix")
    return tag


@st.composite
def round_trip_values(draw: DrawFn) -> int | Decimal:
    """Generate non-negative integers and two-place decimals.

    Events emitted:
    - round_trip_kind=integer|decimal
    """
    if draw(st.booleans()):
        event("round_trip_kind=integer")
        return draw(st.integers(min_value=0, max_value=10**12))
    event("round_trip_kind=decimal")
    return draw(
        st.decimals(
            min_value=0,
            max_value=10**9,
            places=2,
            allow_nan=False,
            allow_infinity=False,
        )
    )


@st.composite
def key_events(draw: DrawFn, *, with_modifiers: bool = False) -> KeyboardEvent:
    """Generate key-down events for spin keys and ordinary text keys."""
    key = draw(st.one_of(st.sampled_from(SPIN_KEYS).map(str), st.sampled_from("0123456789-.,a")))
    if not with_modifiers:
        return KeyboardEvent(key)
    flags = draw(st.tuples(st.booleans(), st.booleans(), st.booleans(), st.booleans()))
    return KeyboardEvent(
        key,
        ctrl_key=flags[0],
        meta_key=flags[1],
        shift_key=flags[2],
        alt_key=flags[3],
    )
