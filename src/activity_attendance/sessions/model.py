from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import start_of_day
from ..core.enums import Weekday


@dataclass(frozen=True)
class SessionDate:
    """Candidate meeting date. ``timestamp`` is the start of that day."""

    date: date
    timestamp: datetime

    @classmethod
    def on(cls, value: date) -> "SessionDate":
        return cls(date=value, timestamp=start_of_day(value))

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_date(self.date)
