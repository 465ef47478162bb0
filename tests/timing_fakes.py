"""Hand-driven clock and scheduler shared by the timer tests."""

from __future__ import annotations

from typing import Callable


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: float = 1_000.0) -> None:
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


class ManualWork:
    def __init__(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Records scheduled work; ``fire`` runs every live callback once."""

    def __init__(self) -> None:
        self.scheduled: list[ManualWork] = []

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> ManualWork:
        work = ManualWork(interval_ms, callback)
        self.scheduled.append(work)
        return work

    @property
    def active(self) -> list[ManualWork]:
        return [work for work in self.scheduled if not work.cancelled]

    def fire(self) -> None:
        for work in self.active:
            work.callback()
