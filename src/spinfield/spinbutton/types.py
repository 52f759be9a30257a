"""Types exchanged between the spin-button controller and its host.

Collaborator protocols (consumed):
    Announcer - Live-region transport for assistive technology
    TextInput - The text field whose contents are selected on focus
    Scheduler / TimerHandle - Deferred callbacks for press-and-hold repeat

Host configuration (consumed):
    SpinButtonCallbacks - Optional zero-argument step/validate callbacks
    SpinButtonProps - Value, bounds and flags supplied by the host
    SpinButtonPropChanges - Typed partial update of SpinButtonProps

Produced surface:
    KeyboardEvent - Key event with default-prevention flag
    SpinButtonAttributes - Accessibility attributes and event handlers
    ButtonInteraction - Press handlers for the increment/decrement buttons

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, TypedDict

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "Announcer",
    "ButtonInteraction",
    "KeyboardEvent",
    "Scheduler",
    "SpinButtonAttributes",
    "SpinButtonCallbacks",
    "SpinButtonPropChanges",
    "SpinButtonProps",
    "StepCallback",
    "TextInput",
    "TimerHandle",
]

type StepCallback = Callable[[], None]
"""Zero-argument, side-effecting host callback."""


# pylint: disable=unnecessary-ellipsis
class Announcer(Protocol):
    """Live-region sink that speaks text without moving focus."""

    def announce(self, text: str) -> None:
        """Announce text to assistive technology (fire-and-forget)."""
        ...


class TextInput(Protocol):
    """Text field collaborator of the spin button."""

    def select_all_content(self) -> None:
        """Select the entire contents of the field."""
        ...


class TimerHandle(Protocol):
    """Cancellable reference to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. Idempotent; a no-op once it has fired."""
        ...


class Scheduler(Protocol):
    """Time-based queue of deferred callbacks.

    This is a Protocol (structural typing) so that event-loop handles such as
    asyncio.TimerHandle and threading.Timer satisfy TimerHandle directly.
    """

    def schedule(self, delay_ms: float, callback: StepCallback) -> TimerHandle:
        """Run callback once after delay_ms milliseconds."""
        ...
# pylint: enable=unnecessary-ellipsis


@dataclass(frozen=True, slots=True)
class SpinButtonCallbacks:
    """Host-supplied actions. Every field is optional; absent ones are skipped.

    Attributes:
        on_increment: Step up once (ArrowUp, PageUp fallback, increment button).
        on_increment_page: Step up by a page (PageUp).
        on_decrement: Step down once (ArrowDown, PageDown fallback,
            decrement button).
        on_decrement_page: Step down by a page (PageDown).
        on_decrement_to_min: Jump to min_value (Home; needs min_value).
        on_increment_to_max: Jump to max_value (End; needs max_value).
        on_validate: Commit and normalize the typed text (Enter, blur).

    Clamping to the bounds is the responsibility of these callbacks.
    """

    on_increment: StepCallback | None = None
    on_increment_page: StepCallback | None = None
    on_decrement: StepCallback | None = None
    on_decrement_page: StepCallback | None = None
    on_decrement_to_min: StepCallback | None = None
    on_increment_to_max: StepCallback | None = None
    on_validate: StepCallback | None = None


@dataclass(frozen=True, slots=True)
class SpinButtonProps:
    """Host-owned inputs of a spin button.

    Attributes:
        value: Current numeric value (None when unset).
        text_value: Display text announced instead of the raw value.
        min_value: Lower bound (None = unbounded).
        max_value: Upper bound (None = unbounded).
        is_disabled: Control is disabled.
        is_read_only: Keyboard stepping is ignored.
        is_required: Control requires a value.
        callbacks: Host actions.
    """

    value: float | None = None
    text_value: str | None = None
    min_value: float | None = None
    max_value: float | None = None
    is_disabled: bool = False
    is_read_only: bool = False
    is_required: bool = False
    callbacks: SpinButtonCallbacks = field(default_factory=SpinButtonCallbacks)


class SpinButtonPropChanges(TypedDict, total=False):
    """Keyword arguments accepted by SpinButton.update(), one per props field."""

    value: float | None
    text_value: str | None
    min_value: float | None
    max_value: float | None
    is_disabled: bool
    is_read_only: bool
    is_required: bool
    callbacks: SpinButtonCallbacks


@dataclass(slots=True)
class KeyboardEvent:
    """Key-down event delivered to the spin button.

    Mutable: prevent_default() flips default_prevented so the host knows not
    to forward the key to the underlying text field.

    Attributes:
        key: Key name (e.g., "ArrowUp", "Enter", "a")
        ctrl_key: Control modifier active
        meta_key: Meta/Command modifier active
        shift_key: Shift modifier active
        alt_key: Alt/Option modifier active
        default_prevented: Set by prevent_default()
    """

    key: str
    ctrl_key: bool = False
    meta_key: bool = False
    shift_key: bool = False
    alt_key: bool = False
    default_prevented: bool = False

    @property
    def has_modifier(self) -> bool:
        """True if any modifier key is held."""
        return self.ctrl_key or self.meta_key or self.shift_key or self.alt_key

    def prevent_default(self) -> None:
        """Suppress the platform's default handling of this key."""
        self.default_prevented = True


@dataclass(frozen=True, slots=True)
class SpinButtonAttributes:
    """Accessibility attributes and handlers for the composite control.

    Flag attributes are True or None (never False) so that renderers omit
    them entirely when unset.
    """

    value_now: float | None
    value_text: str | None
    value_min: float | None
    value_max: float | None
    disabled: bool | None
    read_only: bool | None
    required: bool | None
    on_key_down: Callable[[KeyboardEvent], None]
    on_focus: Callable[[], None]
    on_blur: Callable[[], None]
    role: str = "spinbutton"

    def as_dict(self) -> dict[str, Any]:
        """Render as ARIA attribute names plus event handler entries."""
        return {
            "role": self.role,
            "aria-valuenow": self.value_now,
            "aria-valuetext": self.value_text,
            "aria-valuemin": self.value_min,
            "aria-valuemax": self.value_max,
            "aria-disabled": self.disabled,
            "aria-readonly": self.read_only,
            "aria-required": self.required,
            "on_key_down": self.on_key_down,
            "on_focus": self.on_focus,
            "on_blur": self.on_blur,
        }


@dataclass(frozen=True, slots=True)
class ButtonInteraction:
    """Press handlers for one stepper button.

    Attributes:
        on_press_start: Step once and start the repeat timer.
        on_press_end: Stop repeating.
        initial_delay_ms: Delay before repeating starts.
    """

    on_press_start: Callable[[], None]
    on_press_end: Callable[[], None]
    initial_delay_ms: float
