from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterator, Optional


def start_of_day(value: date, tz: Optional[tzinfo] = None) -> datetime:
    return datetime.combine(value, time.min, tzinfo=tz)


def end_of_day(value: date, tz: Optional[tzinfo] = None) -> datetime:
    return datetime.combine(value, time.max, tzinfo=tz)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
