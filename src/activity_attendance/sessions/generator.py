from __future__ import annotations

from datetime import date
from typing import AbstractSet, Iterable, Optional

from ..common.logging import get_logger
from ..core.enums import CalendarMode, Weekday
from ..schedules.model import Timespan
from .factory import CalendarStrategyFactory
from .model import SessionDate

logger = get_logger(__name__)


class SessionCalendarGenerator:
    def __init__(self, *, strategy_factory: CalendarStrategyFactory | None = None):
        self._factory = strategy_factory or CalendarStrategyFactory()

    def generate(
        self,
        weekdays: AbstractSet[Weekday],
        timespan: Optional[Timespan],
        existing_record_dates: Iterable[date],
        mode: CalendarMode,
    ) -> tuple[SessionDate, ...]:
        """Ordered session dates for a report.

        FULL yields every date in ``timespan`` falling on one of ``weekdays``.
        SPARSE yields the recorded dates, ascending, whatever the current schedule.
        """
        strategy = self._factory.for_mode(mode)
        sessions = strategy.build(
            weekdays=frozenset(weekdays),
            timespan=timespan,
            record_dates=frozenset(existing_record_dates),
        )
        logger.debug("calendar.generated", mode=mode.value, sessions=len(sessions))
        return tuple(sessions)


def generate(
    weekdays: AbstractSet[Weekday],
    timespan: Optional[Timespan],
    existing_record_dates: Iterable[date],
    mode: CalendarMode,
) -> tuple[SessionDate, ...]:
    return SessionCalendarGenerator().generate(weekdays, timespan, existing_record_dates, mode)


def merge_calendars(*calendars: Iterable[SessionDate]) -> tuple[SessionDate, ...]:
    """Union of several calendars, ascending, one entry per date."""
    by_date = {session.date: session for calendar in calendars for session in calendar}
    return tuple(by_date[day] for day in sorted(by_date))
