"""Measuring the time that passes between frames."""

from __future__ import annotations

import time
from typing import Callable

__all__ = ["FrameTimer"]


class FrameTimer:
    """Reports elapsed seconds since the last mark on a monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()

    def mark(self) -> float:
        """Return the seconds since the previous mark and start a new interval."""
        now = self._clock()
        elapsed = now - self._last
        self._last = now
        return elapsed

    def peek(self) -> float:
        """Return the seconds since the previous mark without resetting it."""
        return self._clock() - self._last