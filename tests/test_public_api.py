"""Tests for the top-level package surface.

Python 3.13+.
"""

from __future__ import annotations

import math

import spinfield
from spinfield.enums import Key, RepeatState, StepDirection


class TestPublicApi:
    """Top-level exports are usable end to end."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ exists."""
        for name in spinfield.__all__:
            assert hasattr(spinfield, name), name

    def test_babel_machinery_stays_internal(self) -> None:
        """Babel import helpers live in spinfield.core, not the top level."""
        assert "BabelImportError" not in spinfield.__all__
        assert not hasattr(spinfield, "BabelImportError")

    def test_version_string(self) -> None:
        """__version__ is a non-empty string."""
        assert isinstance(spinfield.__version__, str)
        assert spinfield.__version__

    def test_parse_and_format(self) -> None:
        """Top-level helpers parse and format."""
        assert spinfield.parse_number(spinfield.format_number(42.5, "de-DE"), "de-DE") == 42.5
        assert math.isnan(spinfield.parse_number("", "de-DE"))

    def test_error_hierarchy(self) -> None:
        """Library errors share the SpinFieldError base."""
        error = spinfield.LocaleResolutionError("xx", "unknown")
        assert isinstance(error, spinfield.SpinFieldError)
        assert isinstance(error, ValueError)
        assert str(error) == "Cannot resolve locale 'xx': unknown"


class TestEnums:
    """StrEnum members compare equal to their string values."""

    def test_key_names(self) -> None:
        """Keys use DOM key names."""
        assert Key.ARROW_UP == "ArrowUp"
        assert Key("PageDown") is Key.PAGE_DOWN

    def test_state_strings(self) -> None:
        """States and directions render as lowercase strings."""
        assert str(RepeatState.REPEATING) == "repeating"
        assert str(StepDirection.DECREMENT) == "decrement"
