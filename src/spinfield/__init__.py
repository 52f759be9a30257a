"""SpinField - behavioral core of a locale-aware numeric spin control.

Two independent components consumed by a numeric-field host:
    - A locale-aware parser that reads typed numbers written with the
      locale's own group separator, decimal separator and numeral glyphs
    - A spin-button controller for keyboard stepping, focus validation,
      press-and-hold auto-repeat and live-region announcements

Public API:
    NumberParser - Locale-bound parser; parse() returns float (nan if invalid)
    parse_number - One-shot parsing for a locale tag
    format_number - Locale-aware formatting (inverse of parse_number)
    is_valid_number - Guard for committing parse results
    SpinButton - Interaction controller for one control
    SpinButtonProps / SpinButtonCallbacks / SpinButtonConfig - Host inputs
    KeyboardEvent - Key-down event
    VirtualScheduler - Deterministic timer backend

Exceptions:
    SpinFieldError - Base exception class
    LocaleResolutionError - Strict locale resolution failed

Submodules:
    spinfield.parsing - Locale descriptors, parsing and formatting (Babel)
    spinfield.spinbutton - Controller, repeat timers and schedulers
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .errors import LocaleResolutionError, SpinFieldError
from .parsing import NumberParser, format_number, is_valid_number, parse_number
from .spinbutton import (
    KeyboardEvent,
    SpinButton,
    SpinButtonCallbacks,
    SpinButtonConfig,
    SpinButtonProps,
    VirtualScheduler,
)

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("spinfield")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "KeyboardEvent",
    "LocaleResolutionError",
    "NumberParser",
    "SpinButton",
    "SpinButtonCallbacks",
    "SpinButtonConfig",
    "SpinButtonProps",
    "SpinFieldError",
    "VirtualScheduler",
    "__version__",
    "format_number",
    "is_valid_number",
    "parse_number",
]
