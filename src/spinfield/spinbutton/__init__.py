"""Interaction controller for numeric spin controls.

Turns keyboard events, focus changes and press-and-hold gestures into calls on
host-supplied callbacks, with accelerating auto-repeat and live-region
announcement of value changes.

Public API:
    SpinButton - Controller for one control (keyboard, focus, repeat, ARIA)
    SpinButtonProps - Value, bounds, flags and callbacks from the host
    SpinButtonCallbacks - Optional step/validate callbacks
    SpinButtonConfig - Repeat timing
    KeyboardEvent - Key-down event with default prevention
    SpinButtonAttributes / ButtonInteraction - Produced surface
    VirtualScheduler / AsyncioScheduler / ThreadingScheduler - Timer backends

Example:
    >>> from spinfield.spinbutton import SpinButton, SpinButtonProps, VirtualScheduler
    >>> scheduler = VirtualScheduler()
    >>> with SpinButton(SpinButtonProps(value=1), scheduler=scheduler) as spin:
    ...     spin.increment_button.on_press_start()
    ...     scheduler.advance(1000)
    ...     spin.increment_button.on_press_end()

Python 3.13+. Zero external dependencies.
"""

from .config import SpinButtonConfig
from .controller import SpinButton, SpinButtonState, display_text
from .repeat import RepeatTimer
from .scheduler import AsyncioScheduler, ThreadingScheduler, VirtualScheduler
from .types import (
    Announcer,
    ButtonInteraction,
    KeyboardEvent,
    Scheduler,
    SpinButtonAttributes,
    SpinButtonCallbacks,
    SpinButtonPropChanges,
    SpinButtonProps,
    TextInput,
    TimerHandle,
)

__all__ = [
    "Announcer",
    "AsyncioScheduler",
    "ButtonInteraction",
    "KeyboardEvent",
    "RepeatTimer",
    "Scheduler",
    "SpinButton",
    "SpinButtonAttributes",
    "SpinButtonCallbacks",
    "SpinButtonConfig",
    "SpinButtonPropChanges",
    "SpinButtonProps",
    "SpinButtonState",
    "TextInput",
    "ThreadingScheduler",
    "TimerHandle",
    "VirtualScheduler",
    "display_text",
]
