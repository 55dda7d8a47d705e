from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current instant in UTC.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_iso_utc(value: datetime) -> str:
    """Format an aware datetime as ``2025-01-01T08:00:00.000Z``.

    Naive values are assumed to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
