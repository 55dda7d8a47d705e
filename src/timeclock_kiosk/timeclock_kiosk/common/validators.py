from __future__ import annotations

from typing import Any, Optional

from ..core.constants import MAX_PIN_LEN, MIN_PIN_LEN
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_pin(value: Any) -> Optional[str]:
    """Return a well-formed PIN string or None.

    PINs are kept as strings so leading zeros survive.
    """
    if value is None:
        return None
    pin = str(value).strip()
    if not (pin.isascii() and pin.isdigit()) or not (MIN_PIN_LEN <= len(pin) <= MAX_PIN_LEN):
        return None
    return pin
