"""Periodic sampling of a session clock on a background thread."""

import threading
from collections.abc import Callable

from loguru import logger

from liftbook.config.settings import settings
from liftbook.sessions.clock import SessionClock


class SessionTicker:
    """Calls ``on_tick(elapsed_seconds)`` once per interval while the clock runs.

    Ticks are skipped while the clock is paused. ``stop()`` is the only
    cancellation and is safe to call repeatedly.
    """

    def __init__(
        self,
        clock: SessionClock,
        on_tick: Callable[[int], None],
        interval: float | None = None,
    ) -> None:
        self.clock = clock
        self.on_tick = on_tick
        self.interval = interval if interval is not None else settings.session_tick_seconds
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            self._schedule()

    def stop(self) -> None:
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self) -> None:
        with self._lock:
            if not self._running:
                return
        if not self.clock.is_paused:
            try:
                self.on_tick(self.clock.elapsed_seconds())
            except Exception:
                logger.exception("Session tick callback failed")
        with self._lock:
            if self._running:
                self._schedule()
