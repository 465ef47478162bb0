"""QTimer-backed scheduler for the active timer's per-second ticks."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class _QtRepeatingWork:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler:
    """Schedules repeating work on the Qt event loop of ``parent``."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> _QtRepeatingWork:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return _QtRepeatingWork(timer)
