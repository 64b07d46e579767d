"""Elapsed active-time clock for a workout session.

Elapsed time is derived from three values (start, accumulated paused
duration, current pause start) instead of a running stopwatch, so any
number of pause/resume cycles yields exact active time.
"""

import time
from collections.abc import Callable

TimeSource = Callable[[], float]


class SessionClock:
    """Pause/resume-aware session clock.

    Usage:
        clock = SessionClock()
        clock.start()
        clock.pause()
        clock.resume()
        seconds = clock.elapsed_seconds()

    Args:
        time_source: Callable returning the current instant in seconds
            (defaults to time.monotonic)
    """

    def __init__(self, time_source: TimeSource = time.monotonic) -> None:
        self._now = time_source
        self.started_at: float | None = None
        self.paused_total: float = 0.0
        self.pause_started_at: float | None = None

    @property
    def is_running(self) -> bool:
        return self.started_at is not None and self.pause_started_at is None

    @property
    def is_paused(self) -> bool:
        return self.pause_started_at is not None

    def start(self, at: float | None = None) -> None:
        """Start timing, optionally from an earlier instant on the same time source."""
        self.started_at = self._now() if at is None else at
        self.paused_total = 0.0
        self.pause_started_at = None

    def pause(self) -> None:
        if self.started_at is None or self.pause_started_at is not None:
            return
        self.pause_started_at = self._now()

    def resume(self) -> None:
        if self.pause_started_at is None:
            return
        self.paused_total += max(self._now() - self.pause_started_at, 0.0)
        self.pause_started_at = None

    def elapsed(self) -> float:
        """Active seconds since start, frozen while paused."""
        if self.started_at is None:
            return 0.0
        reference = self.pause_started_at if self.pause_started_at is not None else self._now()
        return max(reference - self.started_at - self.paused_total, 0.0)

    def elapsed_seconds(self) -> int:
        return int(self.elapsed())

    def reset(self) -> None:
        self.started_at = None
        self.paused_total = 0.0
        self.pause_started_at = None
