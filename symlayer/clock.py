"""Time sources for the timing-sensitive state machines.

Anything with a ``now_ms() -> int`` method can be passed as a clock.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int:
        """Current monotonic time in milliseconds."""


class MonotonicClock:
    """Reads ``time.monotonic()`` on every call."""

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)


class ManualClock:
    """Clock that only moves when told to. Used by tests and replays."""

    def __init__(self, start_ms: int = 0):
        self._now = start_ms

    def now_ms(self) -> int:
        return self._now

    def advance(self, ms: int) -> None:
        if ms < 0:
            raise ValueError(f"Cannot move clock backwards: {ms}")
        self._now += ms

    def set(self, now_ms: int) -> None:
        if now_ms < self._now:
            raise ValueError(f"Cannot move clock backwards: {now_ms} < {self._now}")
        self._now = now_ms
