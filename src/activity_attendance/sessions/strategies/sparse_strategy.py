from __future__ import annotations

from datetime import date
from typing import AbstractSet, Optional

from ...core.enums import Weekday
from ...schedules.model import Timespan
from ..model import SessionDate
from .base import CalendarStrategy


class SparseCalendarStrategy(CalendarStrategy):
    """Only dates that already have a record, even if the schedule no longer covers them."""

    def build(
        self,
        *,
        weekdays: AbstractSet[Weekday],
        timespan: Optional[Timespan],
        record_dates: AbstractSet[date],
    ) -> list[SessionDate]:
        return [SessionDate.on(day) for day in sorted(set(record_dates))]
