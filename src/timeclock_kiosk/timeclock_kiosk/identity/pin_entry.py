from __future__ import annotations

from enum import Enum
from typing import Optional

from ..core.constants import MAX_PIN_LEN, MIN_PIN_LEN


class PinKey(str, Enum):
    """Non-digit keypad commands (names match browser ``KeyboardEvent.key``)."""

    BACKSPACE = "Backspace"
    ENTER = "Enter"
    CLEAR = "Escape"


_KEY_ALIASES = {
    "Backspace": PinKey.BACKSPACE,
    "Enter": PinKey.ENTER,
    "Escape": PinKey.CLEAR,
    "Delete": PinKey.CLEAR,
    "Clear": PinKey.CLEAR,
}


class PinEntry:
    """Keypad buffer: digits only, at most MAX_PIN_LEN characters."""

    def __init__(self, *, min_len: int = MIN_PIN_LEN, max_len: int = MAX_PIN_LEN):
        self._min_len = int(min_len)
        self._max_len = int(max_len)
        self._digits = ""

    def __len__(self) -> int:
        return len(self._digits)

    @property
    def is_submittable(self) -> bool:
        return len(self._digits) >= self._min_len

    def press(self, digit: str) -> bool:
        """Append one digit. Returns False when the key was ignored."""
        if len(digit) != 1 or digit not in "0123456789":
            return False
        if len(self._digits) >= self._max_len:
            return False
        self._digits += digit
        return True

    def backspace(self) -> None:
        self._digits = self._digits[:-1]

    def clear(self) -> None:
        self._digits = ""

    def take(self) -> Optional[str]:
        """Hand out the PIN for resolution and reset the buffer.

        Below the minimum length nothing is handed out and the buffer is kept.
        """
        if not self.is_submittable:
            return None
        pin, self._digits = self._digits, ""
        return pin

    @staticmethod
    def classify(key: str) -> Optional[PinKey]:
        return _KEY_ALIASES.get(key)
