from __future__ import annotations

import threading
from typing import Callable, Protocol


class ScheduledTask(Protocol):
    def cancel(self) -> None:
        raise NotImplementedError


class Scheduler(Protocol):
    """Runs a callback once after a delay; the returned task can be cancelled."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        raise NotImplementedError


class ThreadingScheduler(Scheduler):
    """Daemon ``threading.Timer`` per task, so pending timers never block shutdown."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        timer = threading.Timer(float(delay), callback)
        timer.daemon = True
        timer.start()
        return timer
