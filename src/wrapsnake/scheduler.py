# scheduler.py
"""
Cancellable periodic task driven by an injectable millisecond clock.

The pygame loop polls the task once per frame with the real clock; tests
poll it with a ManualClock and move time forward by hand.
"""
from __future__ import annotations
from typing import Callable, Optional
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)


class PygameClock:
    """Milliseconds since pygame.init()."""

    def now_ms(self) -> float:
        return pygame.time.get_ticks()


class ManualClock:
    def __init__(self, start_ms: float = 0.0):
        self.now = start_ms

    def now_ms(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class PeriodicTask:
    def __init__(self, callback: Callable[[], None], clock=None):
        self.callback = callback
        self.clock = clock if clock is not None else PygameClock()
        self.rate: Optional[float] = None
        self.period_ms: Optional[float] = None
        self.next_due: Optional[float] = None
        self.active = False

    def start(self, rate: float) -> None:
        """Cancel any current schedule and fire every 1/rate s from now."""
        if rate <= 0:
            raise ValueError(f"tick rate must be positive, got {rate}")
        self.rate = rate
        self.period_ms = 1000.0 / rate
        self.next_due = self.clock.now_ms() + self.period_ms
        self.active = True
        logger.debug("timer started at %s ticks/s", rate)

    def stop(self) -> None:
        if self.active:
            logger.debug("timer stopped")
        self.active = False
        self.next_due = None

    def set_rate(self, rate: float) -> None:
        """Restart at the new rate if running; otherwise just remember it."""
        if rate <= 0:
            raise ValueError(f"tick rate must be positive, got {rate}")
        if self.active:
            self.start(rate)
        else:
            self.rate = rate
            self.period_ms = 1000.0 / rate

    def poll(self) -> int:
        """Fire the tick if it is due. Returns 1 if it fired, else 0.

        At most one tick per poll: after a stall the schedule restarts
        from now instead of replaying the missed ticks.
        """
        if not self.active:
            return 0
        now = self.clock.now_ms()
        if now < self.next_due:
            return 0
        self.next_due = max(self.next_due + self.period_ms, now + self.period_ms)
        self.callback()
        return 1
