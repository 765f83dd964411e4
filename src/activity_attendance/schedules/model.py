from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import start_of_day
from ..core.enums import DateBasis, Weekday


@dataclass(frozen=True)
class TimeSlot:
    """One recurring weekly meeting of an activity."""

    activity_id: int
    weekday: Weekday
    time_start: Optional[time] = None
    time_end: Optional[time] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class Timespan:
    """Bounded running period of an activity; both ends inclusive."""

    start: datetime
    end: datetime

    @property
    def is_valid(self) -> bool:
        return self.start <= self.end

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    def covers(self, day: date) -> bool:
        """True when the start of ``day``, in the timespan's own timezone, lies inside it."""
        return self.contains(start_of_day(day, self.start.tzinfo))


@dataclass(frozen=True)
class ActivityConfig:
    activity_id: int
    name: str
    date_basis: DateBasis
    program_start: Optional[date] = None
    program_end: Optional[date] = None
    term_ids: tuple[int, ...] = field(default_factory=tuple)
    max_participants: int = 0
    waiting: int = 0
