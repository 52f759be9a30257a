"""Press-and-hold repeat state machine for one step direction.

States:
    IDLE      - no press, no timer
    PENDING   - pressed; stepped once, timer armed for the initial delay
    REPEATING - timer fired at least once; re-armed at the fixed interval

Transitions:
    IDLE/PENDING/REPEATING --press()--> PENDING     (step, arm initial delay)
    PENDING/REPEATING     --fire-->    REPEATING   (step, arm interval)
    PENDING/REPEATING     --release()-> IDLE        (cancel)

Timer Ownership:
    The handle slot is private. _arm() is the only code that sets it and
    always cancels first, so at most one timer per direction is ever live.
    Every cancel bumps a generation counter; a fire carrying an older
    generation is discarded, so a timer that raced its own cancellation
    (threaded schedulers) never steps.

Python 3.13+.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from spinfield.enums import RepeatState, StepDirection

if TYPE_CHECKING:
    from collections.abc import Callable
    from threading import RLock

    from .types import Scheduler, StepCallback, TimerHandle

__all__ = ["RepeatTimer"]

logger = logging.getLogger(__name__)


class RepeatTimer:
    """Repeat state for one direction (increment or decrement).

    The step callback is looked up through ``resolve_step`` at every step,
    so callbacks replaced by a host prop update take effect mid-hold.

    Thread Safety:
        All transitions run under the lock supplied by the owning SpinButton.
    """

    __slots__ = (
        "_generation",
        "_handle",
        "_interval_ms",
        "_lock",
        "_resolve_step",
        "_scheduler",
        "_state",
        "direction",
    )

    def __init__(
        self,
        direction: StepDirection,
        scheduler: Scheduler,
        resolve_step: Callable[[], StepCallback | None],
        interval_ms: float,
        lock: RLock,
    ) -> None:
        """Initialize repeat timer in the IDLE state.

        Args:
            direction: Step direction (for logging and introspection)
            scheduler: Deferred callback queue
            resolve_step: Returns the host's current step callback, or None
            interval_ms: Delay between repeated steps once repeating
            lock: Reentrant lock shared with the owning controller
        """
        self.direction = direction
        self._scheduler = scheduler
        self._resolve_step = resolve_step
        self._interval_ms = interval_ms
        self._lock = lock
        self._handle: TimerHandle | None = None
        self._state = RepeatState.IDLE
        self._generation = 0

    @property
    def state(self) -> RepeatState:
        """Current state of the machine."""
        return self._state

    @property
    def is_active(self) -> bool:
        """True while a timer is armed."""
        return self._handle is not None

    def press(self, initial_delay_ms: float) -> None:
        """Start a press: step immediately, then arm the initial delay.

        A press while already active replaces the running sequence. Without a
        step callback the press is ignored and no timer is armed.

        Args:
            initial_delay_ms: Delay before the first repeated step
        """
        with self._lock:
            self._cancel()
            step = self._resolve_step()
            if step is None:
                logger.debug("No %s callback; press ignored", self.direction)
                return
            generation = self._generation
            step()
            # The step itself may have released or re-pressed
            if generation != self._generation:
                return
            self._arm(initial_delay_ms)
            self._state = RepeatState.PENDING
            logger.debug("%s repeat pending (%s ms)", self.direction, initial_delay_ms)

    def release(self) -> None:
        """End a press: cancel any armed timer and return to IDLE."""
        with self._lock:
            if self._handle is not None:
                logger.debug("%s repeat stopped", self.direction)
            self._cancel()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._handle = None
            self._state = RepeatState.IDLE
            step = self._resolve_step()
            if step is None:
                logger.debug("%s callback removed; repeat stopped", self.direction)
                return
            step()
            if generation != self._generation:
                return
            self._arm(self._interval_ms)
            self._state = RepeatState.REPEATING

    def _arm(self, delay_ms: float) -> None:
        self._cancel()
        self._handle = self._scheduler.schedule(delay_ms, partial(self._fire, self._generation))

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._generation += 1
        self._state = RepeatState.IDLE
