"""Tests for SpinButton keyboard dispatch.

Covers:
- The key-to-callback table
- PageUp/PageDown fall through to single steps
- Home/End require a defined bound
- Modifier and read-only suppression
- Default prevention only when a callback runs

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from spinfield.enums import Key
from spinfield.spinbutton import (
    KeyboardEvent,
    SpinButton,
    SpinButtonCallbacks,
    SpinButtonProps,
    VirtualScheduler,
)
from tests.strategies import key_events

_CALLBACK_NAMES = (
    "on_increment",
    "on_increment_page",
    "on_decrement",
    "on_decrement_page",
    "on_decrement_to_min",
    "on_increment_to_max",
    "on_validate",
)


def _recording_callbacks(
    calls: list[str], *, omit: tuple[str, ...] = ()
) -> SpinButtonCallbacks:
    def make(name: str) -> object:
        return lambda: calls.append(name)

    return SpinButtonCallbacks(
        **{name: make(name) for name in _CALLBACK_NAMES if name not in omit}  # type: ignore[arg-type]
    )


def _spin(
    calls: list[str],
    *,
    omit: tuple[str, ...] = (),
    **props: object,
) -> SpinButton:
    props.setdefault("min_value", 0)
    props.setdefault("max_value", 100)
    return SpinButton(
        SpinButtonProps(callbacks=_recording_callbacks(calls, omit=omit), **props),  # type: ignore[arg-type]
        scheduler=VirtualScheduler(),
    )


class TestKeyTable:
    """Each spin key invokes exactly one callback."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            (Key.ENTER, "on_validate"),
            (Key.PAGE_UP, "on_increment_page"),
            (Key.PAGE_DOWN, "on_decrement_page"),
            (Key.ARROW_UP, "on_increment"),
            (Key.UP, "on_increment"),
            (Key.ARROW_DOWN, "on_decrement"),
            (Key.DOWN, "on_decrement"),
            (Key.HOME, "on_decrement_to_min"),
            (Key.END, "on_increment_to_max"),
        ],
    )
    def test_key_dispatch(self, key: Key, expected: str) -> None:
        """The mapped callback runs once and default handling is prevented."""
        calls: list[str] = []
        event = KeyboardEvent(key)
        _spin(calls).on_key_down(event)
        assert calls == [expected]
        assert event.default_prevented

    def test_plain_string_keys(self) -> None:
        """Host key names given as plain strings dispatch the same way."""
        calls: list[str] = []
        _spin(calls).on_key_down(KeyboardEvent("ArrowUp"))
        assert calls == ["on_increment"]

    @pytest.mark.parametrize("key", ["a", "5", "-", ",", "Tab", "Backspace", "ArrowLeft"])
    def test_other_keys_pass_through(self, key: str) -> None:
        """Text-entry keys reach the input untouched."""
        calls: list[str] = []
        event = KeyboardEvent(key)
        _spin(calls).on_key_down(event)
        assert calls == []
        assert not event.default_prevented


class TestPageFallthrough:
    """PageUp/PageDown step once when no page callback exists."""

    def test_page_up_falls_back_to_increment(self) -> None:
        """PageUp without on_increment_page increments."""
        calls: list[str] = []
        event = KeyboardEvent(Key.PAGE_UP)
        _spin(calls, omit=("on_increment_page",)).on_key_down(event)
        assert calls == ["on_increment"]
        assert event.default_prevented

    def test_page_down_falls_back_to_decrement(self) -> None:
        """PageDown without on_decrement_page decrements."""
        calls: list[str] = []
        _spin(calls, omit=("on_decrement_page",)).on_key_down(KeyboardEvent(Key.PAGE_DOWN))
        assert calls == ["on_decrement"]

    def test_page_up_without_any_callback(self) -> None:
        """Nothing to call: default handling is kept."""
        calls: list[str] = []
        event = KeyboardEvent(Key.PAGE_UP)
        _spin(calls, omit=("on_increment_page", "on_increment")).on_key_down(event)
        assert calls == []
        assert not event.default_prevented


class TestBoundKeys:
    """Home/End need the matching bound."""

    def test_home_without_min(self) -> None:
        """Home is ignored when min_value is None."""
        calls: list[str] = []
        event = KeyboardEvent(Key.HOME)
        _spin(calls, min_value=None).on_key_down(event)
        assert calls == []
        assert not event.default_prevented

    def test_end_without_max(self) -> None:
        """End is ignored when max_value is None."""
        calls: list[str] = []
        event = KeyboardEvent(Key.END)
        _spin(calls, max_value=None).on_key_down(event)
        assert calls == []
        assert not event.default_prevented

    def test_zero_bound_counts_as_defined(self) -> None:
        """A bound of 0 is defined."""
        calls: list[str] = []
        _spin(calls, min_value=0).on_key_down(KeyboardEvent(Key.HOME))
        assert calls == ["on_decrement_to_min"]

    def test_bound_added_by_update(self) -> None:
        """Bounds follow host prop updates."""
        calls: list[str] = []
        spin = _spin(calls, max_value=None)
        spin.on_key_down(KeyboardEvent(Key.END))
        spin.update(max_value=10)
        spin.on_key_down(KeyboardEvent(Key.END))
        assert calls == ["on_increment_to_max"]


class TestSuppression:
    """Modified keys and read-only controls do nothing."""

    @pytest.mark.parametrize("modifier", ["ctrl_key", "meta_key", "shift_key", "alt_key"])
    def test_modifier_suppresses(self, modifier: str) -> None:
        """Any modifier turns the key into a no-op."""
        calls: list[str] = []
        event = KeyboardEvent(Key.ARROW_UP, **{modifier: True})  # type: ignore[arg-type]
        _spin(calls).on_key_down(event)
        assert calls == []
        assert not event.default_prevented

    def test_read_only_suppresses(self) -> None:
        """Read-only controls ignore every key, Enter included."""
        calls: list[str] = []
        spin = _spin(calls, is_read_only=True)
        for key in Key:
            event = KeyboardEvent(key)
            spin.on_key_down(event)
            assert not event.default_prevented
        assert calls == []

    def test_enter_without_validate(self) -> None:
        """Enter with no validate callback keeps default handling."""
        calls: list[str] = []
        event = KeyboardEvent(Key.ENTER)
        _spin(calls, omit=("on_validate",)).on_key_down(event)
        assert not event.default_prevented

    def test_keys_ignored_after_teardown(self) -> None:
        """An unmounted control dispatches nothing."""
        calls: list[str] = []
        spin = _spin(calls)
        spin.teardown()
        event = KeyboardEvent(Key.ARROW_UP)
        spin.on_key_down(event)
        assert calls == []
        assert not event.default_prevented

    def test_disabled_still_dispatches(self) -> None:
        """Disabled state is advisory for keyboard handling."""
        calls: list[str] = []
        _spin(calls, is_disabled=True).on_key_down(KeyboardEvent(Key.ARROW_DOWN))
        assert calls == ["on_decrement"]


class TestKeyboardProperties:
    """Property-based keyboard checks."""

    @given(event=key_events(with_modifiers=True))
    def test_at_most_one_callback(self, event: KeyboardEvent) -> None:
        """Any key-down runs at most one callback, and prevents default iff it does."""
        calls: list[str] = []
        _spin(calls).on_key_down(event)
        assert len(calls) <= 1
        assert event.default_prevented == (len(calls) == 1)
        if event.has_modifier:
            assert calls == []
