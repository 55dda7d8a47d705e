from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Optional

from ..core.constants import DEFAULT_MESSAGE_SECONDS
from ..core.enums import MessageKind
from .scheduler import ScheduledTask, Scheduler


@dataclass(frozen=True)
class TransientMessage:
    text: str
    kind: MessageKind
    token: int


class MessageBoard:
    """Holds at most one transient message and dismisses it after a delay.

    Every post or clear bumps the token; a dismissal only fires for the token
    it was scheduled with, and the superseded task is cancelled as well.
    """

    def __init__(self, scheduler: Scheduler, *, duration: float = DEFAULT_MESSAGE_SECONDS):
        self._scheduler = scheduler
        self._duration = float(duration)
        self._lock = RLock()
        self._token = 0
        self._current: Optional[TransientMessage] = None
        self._task: Optional[ScheduledTask] = None

    @property
    def current(self) -> Optional[TransientMessage]:
        with self._lock:
            return self._current

    def post(self, text: str, kind: MessageKind) -> TransientMessage:
        with self._lock:
            self._cancel_task()
            self._token += 1
            token = self._token
            message = TransientMessage(text=text, kind=MessageKind(kind), token=token)
            self._current = message
            self._task = self._scheduler.schedule(self._duration, lambda: self._expire(token))
            return message

    def success(self, text: str) -> TransientMessage:
        return self.post(text, MessageKind.SUCCESS)

    def error(self, text: str) -> TransientMessage:
        return self.post(text, MessageKind.ERROR)

    def clear(self) -> None:
        with self._lock:
            self._cancel_task()
            self._token += 1
            self._current = None

    def _expire(self, token: int) -> None:
        with self._lock:
            if self._current is not None and self._current.token == token:
                self._current = None
                self._task = None

    def _cancel_task(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
