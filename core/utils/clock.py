"""Time helpers shared by every time-sensitive computation."""

from datetime import date, datetime, time, timezone
from typing import Optional

from core.exceptions import InvalidRecordError


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value) -> datetime:
    """
    Normalise a timestamp to an aware UTC datetime.

    Naive datetimes are taken to be UTC already. A bare date becomes
    midnight UTC of that day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise InvalidRecordError(f"Expected a date or datetime, got {value!r}")


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Use the injected ``now`` when given, otherwise read the system clock."""
    if now is None:
        return utc_now()
    return as_utc(now)
