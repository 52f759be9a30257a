"""Enumerations for SpinField type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class Key(StrEnum):
    """Keyboard keys the spin button reacts to.

    Values match the DOM ``KeyboardEvent.key`` names, including the legacy
    ``Up``/``Down`` aliases some platforms still report.
    """

    ENTER = "Enter"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"


class StepDirection(StrEnum):
    """Direction of a press-and-hold repeat sequence."""

    INCREMENT = "increment"
    DECREMENT = "decrement"


class RepeatState(StrEnum):
    """State of one direction's press-and-hold repeat machine.

    StrEnum provides automatic string conversion: str(RepeatState.IDLE) == "idle"
    """

    IDLE = "idle"
    """No press active, no timer armed."""

    PENDING = "pending"
    """Pressed; timer armed for the initial delay."""

    REPEATING = "repeating"
    """Initial delay elapsed; timer re-armed after every step."""


__all__ = [
    "Key",
    "RepeatState",
    "StepDirection",
]
