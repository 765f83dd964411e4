from __future__ import annotations

from datetime import date
from typing import AbstractSet, Optional

from ...common.datetime_utils import iter_days
from ...core.enums import Weekday
from ...schedules.model import Timespan
from ..model import SessionDate
from .base import CalendarStrategy


class FullCalendarStrategy(CalendarStrategy):
    """Every scheduled weekday inside the timespan, recorded or not."""

    def build(
        self,
        *,
        weekdays: AbstractSet[Weekday],
        timespan: Optional[Timespan],
        record_dates: AbstractSet[date],
    ) -> list[SessionDate]:
        if not weekdays or timespan is None or not timespan.is_valid:
            return []

        sessions = []
        for day in iter_days(timespan.start.date(), timespan.end.date()):
            if Weekday.from_date(day) not in weekdays:
                continue
            # a timespan starting mid-day does not cover that day's start
            if timespan.covers(day):
                sessions.append(SessionDate.on(day))
        return sessions
