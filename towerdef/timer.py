"""A nanosecond stopwatch that can be started, stopped, paused and resumed."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Timer:
    """Measures elapsed nanoseconds from an injectable monotonic clock."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else time.monotonic_ns
        self._start_ticks = 0
        self._paused_ticks = 0
        self._paused = False
        self._started = False

    def start(self) -> None:
        """Start (or restart) from the current time."""
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._paused_ticks = 0

    def stop(self) -> None:
        """Stop the timer and forget all elapsed time."""
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        """Freeze the elapsed time; ignored unless running and not paused."""
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self._clock() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        """Resume counting from the frozen time; ignored unless paused."""
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._paused_ticks
            self._paused_ticks = 0

    def elapsed_ns(self) -> int:
        """Elapsed nanoseconds, or 0 when the timer is not started."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self._clock() - self._start_ticks

    @property
    def started(self) -> bool:
        return self._started

    @property
    def paused(self) -> bool:
        return self._paused and self._started