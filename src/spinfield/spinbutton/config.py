"""Press-and-hold timing configuration for SpinButton.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from spinfield.constants import (
    DECREMENT_REPEAT_INTERVAL_MS,
    DEFAULT_INITIAL_DELAY_MS,
    INCREMENT_REPEAT_INTERVAL_MS,
)
from spinfield.enums import StepDirection

__all__ = ["SpinButtonConfig"]


@dataclass(frozen=True, slots=True)
class SpinButtonConfig:
    """Immutable repeat timing for one spin button.

    Constructing ``SpinButtonConfig()`` with no arguments yields the default
    policy: 400 ms before repeating, then every 60 ms up and 75 ms down.

    Attributes:
        initial_delay_ms: Delay between the immediate step of a press and
            the first repeated step.
        increment_interval_ms: Interval between repeated increments.
        decrement_interval_ms: Interval between repeated decrements.

    Example:
        >>> config = SpinButtonConfig(initial_delay_ms=250)
        >>> config.increment_interval_ms
        60
    """

    initial_delay_ms: float = DEFAULT_INITIAL_DELAY_MS
    increment_interval_ms: float = INCREMENT_REPEAT_INTERVAL_MS
    decrement_interval_ms: float = DECREMENT_REPEAT_INTERVAL_MS

    def __post_init__(self) -> None:
        """Validate timing values at construction time.

        Raises:
            ValueError: If initial_delay_ms is negative or an interval is not
                positive.
        """
        if self.initial_delay_ms < 0:
            msg = "initial_delay_ms must be non-negative"
            raise ValueError(msg)
        if self.increment_interval_ms <= 0:
            msg = "increment_interval_ms must be positive"
            raise ValueError(msg)
        if self.decrement_interval_ms <= 0:
            msg = "decrement_interval_ms must be positive"
            raise ValueError(msg)

    def interval_for(self, direction: StepDirection) -> float:
        """Return the repeat interval of a direction."""
        if direction is StepDirection.INCREMENT:
            return self.increment_interval_ms
        return self.decrement_interval_ms
