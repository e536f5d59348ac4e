"""Local calendar bucketing for forecast timestamps.

The target location uses a fixed UTC offset, so no tz database lookup is done.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Tuple


def _offset(offset_hours: float) -> timezone:
    return timezone(timedelta(hours=offset_hours))


def local_datetime(ts: int, offset_hours: float) -> datetime:
    return datetime.fromtimestamp(ts, tz=_offset(offset_hours))


def local_date_str(ts: int, offset_hours: float) -> str:
    return local_datetime(ts, offset_hours).date().isoformat()


def local_time_str(ts: int, offset_hours: float) -> str:
    return local_datetime(ts, offset_hours).strftime("%H:%M")


def today_and_tomorrow(reference: datetime, offset_hours: float) -> Tuple[str, str]:
    """Local (today, tomorrow) date strings for the reference instant. Naive means UTC."""
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    today = reference.astimezone(_offset(offset_hours)).date()
    return today.isoformat(), (today + timedelta(days=1)).isoformat()
