"""
Epoch-millisecond helpers.

Daylio stores every instant as milliseconds since the Unix epoch and keeps
the calendar fields of an entry in UTC.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_ms() -> int:
    return int(utc_now().timestamp() * 1000)


def from_epoch_ms(value: int | float, offset_ms: int | float = 0) -> datetime:
    """Return the UTC datetime for ``value + offset_ms`` milliseconds."""
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(
        milliseconds=value + offset_ms
    )


def decompose_epoch_ms(value: int | float) -> Dict[str, int]:
    """Split an epoch-millisecond instant into UTC calendar fields."""
    moment = from_epoch_ms(value)
    return {
        "minute": moment.minute,
        "hour": moment.hour,
        "day": moment.day,
        "month": moment.month,
        "year": moment.year,
    }
