"""SpinButton: keyboard, focus and press-and-hold behavior of a numeric spin control.

The controller turns raw interaction signals into calls on host-supplied
callbacks and never changes the value itself:

- Keyboard: Enter validates, arrows step, PageUp/PageDown step by a page
  (falling through to a single step when no page callback exists),
  Home/End jump to a defined bound. Modified keys and read-only controls
  are ignored.
- Focus: focusing selects the input's text; blurring validates.
- Announcement: value changes while focused are announced once each.
- Press-and-hold: each stepper button runs its own RepeatTimer.

Lifecycle:
    Create one SpinButton per mounted control, forward host prop changes
    through update(), and call teardown() (or leave a ``with`` block) when
    the control unmounts so no repeat timer outlives it.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING, Unpack

from spinfield.enums import Key, RepeatState, StepDirection

from .config import SpinButtonConfig
from .repeat import RepeatTimer
from .types import (
    ButtonInteraction,
    KeyboardEvent,
    SpinButtonAttributes,
    SpinButtonPropChanges,
    SpinButtonProps,
)

if TYPE_CHECKING:
    from .types import Announcer, Scheduler, StepCallback, TextInput

__all__ = ["SpinButton", "SpinButtonState", "display_text"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SpinButtonState:
    """Mutable per-control state owned by SpinButton.

    Mirrors the host props plus the focus flag. Repeat timers live in the
    controller's RepeatTimer records, not here.
    """

    value: float | None = None
    text_value: str | None = None
    min_value: float | None = None
    max_value: float | None = None
    is_disabled: bool = False
    is_read_only: bool = False
    is_required: bool = False
    focused: bool = False

    @classmethod
    def from_props(cls, props: SpinButtonProps) -> SpinButtonState:
        """Build state from host props (unfocused)."""
        return cls(
            value=props.value,
            text_value=props.text_value,
            min_value=props.min_value,
            max_value=props.max_value,
            is_disabled=props.is_disabled,
            is_read_only=props.is_read_only,
            is_required=props.is_required,
        )


def display_text(value: float | None, text_value: str | None) -> str:
    """Text that represents the current value to assistive technology.

    The override text wins when non-empty. Integral floats render without a
    trailing ".0" so that 6.0 and 6 both read "6".

    Examples:
        >>> display_text(6.0, None)
        '6'
        >>> display_text(6.5, None)
        '6.5'
        >>> display_text(6, "6 items")
        '6 items'
    """
    if text_value:
        return text_value
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SpinButton:
    """Interaction controller for one spin control.

    Examples:
        >>> from spinfield.spinbutton import (
        ...     SpinButtonCallbacks, SpinButtonProps, VirtualScheduler,
        ... )
        >>> calls = []
        >>> props = SpinButtonProps(
        ...     value=5,
        ...     callbacks=SpinButtonCallbacks(on_increment=lambda: calls.append("up")),
        ... )
        >>> spin = SpinButton(props, scheduler=VirtualScheduler())
        >>> event = KeyboardEvent("ArrowUp")
        >>> spin.on_key_down(event)
        >>> calls, event.default_prevented
        (['up'], True)

    Thread Safety:
        Every handler runs under one reentrant lock, which also guards timer
        fires delivered from scheduler threads.
    """

    __slots__ = (
        "_announcer",
        "_config",
        "_decrement",
        "_increment",
        "_input",
        "_lock",
        "_props",
        "_state",
        "_torn_down",
        "decrement_button",
        "increment_button",
    )

    def __init__(
        self,
        props: SpinButtonProps | None = None,
        *,
        scheduler: Scheduler,
        announcer: Announcer | None = None,
        input_ref: TextInput | None = None,
        config: SpinButtonConfig | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            props: Host props (default: empty props, no callbacks)
            scheduler: Deferred callback queue for repeat timers
            announcer: Live-region sink (None disables announcements)
            input_ref: Text field selected on focus (None skips selection)
            config: Repeat timing (default: SpinButtonConfig())
        """
        self._props = props if props is not None else SpinButtonProps()
        self._state = SpinButtonState.from_props(self._props)
        self._announcer = announcer
        self._input = input_ref
        self._config = config if config is not None else SpinButtonConfig()
        self._lock = RLock()
        self._torn_down = False

        self._increment = RepeatTimer(
            StepDirection.INCREMENT,
            scheduler,
            lambda: self._props.callbacks.on_increment,
            self._config.interval_for(StepDirection.INCREMENT),
            self._lock,
        )
        self._decrement = RepeatTimer(
            StepDirection.DECREMENT,
            scheduler,
            lambda: self._props.callbacks.on_decrement,
            self._config.interval_for(StepDirection.DECREMENT),
            self._lock,
        )

        delay = self._config.initial_delay_ms
        self.increment_button = ButtonInteraction(
            on_press_start=lambda: self._press_start(self._increment),
            on_press_end=self._increment.release,
            initial_delay_ms=delay,
        )
        self.decrement_button = ButtonInteraction(
            on_press_start=lambda: self._press_start(self._decrement),
            on_press_end=self._decrement.release,
            initial_delay_ms=delay,
        )

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def props(self) -> SpinButtonProps:
        """Current host props."""
        return self._props

    @property
    def state(self) -> SpinButtonState:
        """Current controller state (read-only by convention)."""
        return self._state

    @property
    def config(self) -> SpinButtonConfig:
        """Repeat timing configuration."""
        return self._config

    @property
    def focused(self) -> bool:
        """True while the input holds focus."""
        return self._state.focused

    def repeat_state(self, direction: StepDirection) -> RepeatState:
        """State of the repeat machine for a direction."""
        timer = self._increment if direction is StepDirection.INCREMENT else self._decrement
        return timer.state

    # =========================================================================
    # Host prop updates
    # =========================================================================

    def update(
        self,
        props: SpinButtonProps | None = None,
        /,
        **changes: Unpack[SpinButtonPropChanges],
    ) -> None:
        """Apply host prop changes.

        Pass a complete SpinButtonProps to replace the props, keyword changes
        to patch individual fields, or both (keywords apply on top). If value
        or text_value changed while focused, the new display text is announced
        exactly once. After teardown() props are still recorded but nothing
        is announced.

        Raises:
            TypeError: If a keyword is not a SpinButtonProps field
        """
        with self._lock:
            previous = self._props
            base = props if props is not None else previous
            self._props = dataclasses.replace(base, **changes) if changes else base
            focused = self._state.focused
            self._state = SpinButtonState.from_props(self._props)
            self._state.focused = focused

            if (previous.value, previous.text_value) != (
                self._props.value,
                self._props.text_value,
            ):
                self._announce_if_focused()

    def _announce_if_focused(self) -> None:
        if self._torn_down or not self._state.focused or self._announcer is None:
            return
        text = display_text(self._state.value, self._state.text_value)
        if text:
            self._announcer.announce(text)

    # =========================================================================
    # Keyboard
    # =========================================================================

    def _key_action(self, key: str) -> StepCallback | None:
        callbacks = self._props.callbacks
        match key:
            case Key.ENTER:
                return callbacks.on_validate
            case Key.PAGE_UP:
                return callbacks.on_increment_page or callbacks.on_increment
            case Key.ARROW_UP | Key.UP:
                return callbacks.on_increment
            case Key.PAGE_DOWN:
                return callbacks.on_decrement_page or callbacks.on_decrement
            case Key.ARROW_DOWN | Key.DOWN:
                return callbacks.on_decrement
            case Key.HOME:
                if self._state.min_value is None:
                    return None
                return callbacks.on_decrement_to_min
            case Key.END:
                if self._state.max_value is None:
                    return None
                return callbacks.on_increment_to_max
            case _:
                return None

    def on_key_down(self, event: KeyboardEvent) -> None:
        """Dispatch a key-down event to at most one host callback.

        Default handling is suppressed only when a callback runs; every other
        key (including text entry) reaches the input untouched. Keys are
        ignored after teardown().
        """
        with self._lock:
            if self._torn_down or event.has_modifier or self._state.is_read_only:
                return
            action = self._key_action(event.key)
            if action is None:
                return
            event.prevent_default()
            logger.debug("Key %s dispatched", event.key)
            action()

    # =========================================================================
    # Focus
    # =========================================================================

    def on_focus(self) -> None:
        """Mark focused and select the input's entire contents."""
        with self._lock:
            self._state.focused = True
            if self._input is not None:
                self._input.select_all_content()

    def on_blur(self) -> None:
        """Mark unfocused, then validate (committing is the host's job)."""
        with self._lock:
            self._state.focused = False
            validate = self._props.callbacks.on_validate
            if validate is not None:
                validate()

    # =========================================================================
    # Produced surface
    # =========================================================================

    def spin_button_attributes(self) -> SpinButtonAttributes:
        """Accessibility attributes and handlers for the rendered control."""
        with self._lock:
            state = self._state
            value = state.value
            is_number = isinstance(value, int | float) and not isinstance(value, bool)
            return SpinButtonAttributes(
                value_now=value if is_number else None,
                value_text=state.text_value or None,
                value_min=state.min_value,
                value_max=state.max_value,
                disabled=state.is_disabled or None,
                read_only=state.is_read_only or None,
                required=state.is_required or None,
                on_key_down=self.on_key_down,
                on_focus=self.on_focus,
                on_blur=self.on_blur,
            )

    # =========================================================================
    # Teardown
    # =========================================================================

    def _press_start(self, timer: RepeatTimer) -> None:
        with self._lock:
            if self._torn_down:
                logger.debug("%s press after teardown ignored", timer.direction)
                return
            timer.press(self._config.initial_delay_ms)

    def teardown(self) -> None:
        """Cancel both repeat timers and retire the controller.

        Later presses and key-downs are ignored, so no timer can be armed once
        the control has unmounted. Safe to call more than once.
        """
        with self._lock:
            self._increment.release()
            self._decrement.release()
            if not self._torn_down:
                self._torn_down = True
                logger.debug("SpinButton torn down")

    def __enter__(self) -> SpinButton:
        """Enter context manager; teardown() runs on exit."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Exit context manager, cancelling timers. Does not suppress exceptions."""
        self.teardown()
