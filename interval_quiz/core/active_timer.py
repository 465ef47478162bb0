"""Timer that only accumulates time while the player is answering.

The timer is split into "segments": a segment is open while a question is on
screen and closed while feedback is shown. Only open segments count towards
the total. A periodic callback reports whole elapsed seconds for display; it
is driven by a ``RepeatingScheduler`` so that the Qt UI can use ``QTimer``
while tests drive ticks by hand.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable, Protocol

from interval_quiz.constants.quiz_constants import TIMER_TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

TickCallback = Callable[[int], None]


class ScheduledWork(Protocol):
    def cancel(self) -> None: ...


class RepeatingScheduler(Protocol):
    """Runs a callback every ``interval_ms`` until the returned handle is cancelled."""

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledWork: ...


class _ThreadingWork:
    def __init__(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._interval_seconds = interval_ms / 1000
        self._callback = callback
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="active-timer-tick", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval_seconds):
            self._callback()

    def cancel(self) -> None:
        self._stopped.set()


class ThreadingScheduler:
    """Scheduler backed by a daemon thread, for use outside a Qt event loop."""

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledWork:
        return _ThreadingWork(interval_ms, callback)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class ActiveTimer:
    """Accumulates wall-clock time over active segments only.

    Segment changes and ticks outside ``start()``..``finalize()`` are ignored.
    State is guarded by an internal lock because scheduled ticks may arrive
    on another thread; the tick callback itself runs without the lock held.
    """

    def __init__(
        self,
        on_tick: TickCallback | None = None,
        *,
        clock: Callable[[], float] = _monotonic_ms,
        scheduler: RepeatingScheduler | None = None,
        tick_interval_ms: int = TIMER_TICK_INTERVAL_MS,
    ) -> None:
        self._on_tick = on_tick
        self._clock = clock
        self._scheduler = scheduler
        self._tick_interval_ms = tick_interval_ms
        self._lock = threading.RLock()
        self._started: bool = False
        self._accumulated_ms: float = 0.0
        self._segment_started_at: float | None = None
        self._loop: ScheduledWork | None = None

    @property
    def is_running(self) -> bool:
        return self._segment_started_at is not None

    @property
    def is_started(self) -> bool:
        return self._started

    def set_tick_callback(self, on_tick: TickCallback | None) -> None:
        self._on_tick = on_tick

    def start(self) -> None:
        """Reset the total and open the first segment."""
        with self._lock:
            self._cancel_loop()
            self._started = True
            self._accumulated_ms = 0.0
            self._segment_started_at = self._clock()
        self._tick()
        with self._lock:
            if self._started and self._scheduler is not None:
                self._loop = self._scheduler.schedule(self._tick_interval_ms, self._tick)

    def begin_segment(self) -> None:
        with self._lock:
            if not self._started or self._segment_started_at is not None:
                return
            self._segment_started_at = self._clock()
        self._tick()

    def end_segment(self) -> None:
        with self._lock:
            if not self._started or self._segment_started_at is None:
                return
            self._close_segment()
        self._tick()

    def finalize(self) -> float:
        """Close any open segment, stop ticking and return the total in ms."""
        with self._lock:
            if not self._started:
                return self._accumulated_ms
            self._close_segment()
            self._cancel_loop()
        self._tick()
        with self._lock:
            self._started = False
            total = self._accumulated_ms
        logger.debug("Active timer finalized at %.0f ms", total)
        return total

    def get_elapsed_ms(self) -> float:
        with self._lock:
            started_at = self._segment_started_at
            if started_at is None:
                return self._accumulated_ms
            return self._accumulated_ms + max(0.0, self._clock() - started_at)

    def _close_segment(self) -> None:
        started_at = self._segment_started_at
        if started_at is None:
            return
        # Clamp so a clock that steps backwards cannot shrink the total.
        self._accumulated_ms += max(0.0, self._clock() - started_at)
        self._segment_started_at = None

    def _tick(self) -> None:
        with self._lock:
            callback = self._on_tick
            if callback is None or not self._started:
                return
            elapsed_seconds = math.floor(self.get_elapsed_ms() / 1000)
        callback(elapsed_seconds)

    def _cancel_loop(self) -> None:
        if self._loop is not None:
            self._loop.cancel()
            self._loop = None
