from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.repository import AttendanceRepository
from .common.logging import setup_logging
from .config import Settings, load_settings
from .enrolment.repository import RosterRepository
from .formatting.formatter import Formatter
from .reports.service import ActivityAttendanceReportService
from .schedules.repository import ActivityRepository
from .sessions.factory import CalendarStrategyFactory
from .sessions.generator import SessionCalendarGenerator


@dataclass(frozen=True)
class Container:
    settings: Settings

    activities_repo: ActivityRepository
    attendance_repo: AttendanceRepository
    roster_repo: RosterRepository

    formatter: Formatter
    calendar_generator: SessionCalendarGenerator
    report_service: ActivityAttendanceReportService


def build_container(
    *,
    activities: ActivityRepository,
    attendance: AttendanceRepository,
    roster: RosterRepository,
    settings: Optional[Settings] = None,
) -> Container:
    settings = settings or load_settings()
    setup_logging(json_output=settings.log_json, log_level=settings.log_level)

    formatter = Formatter(settings.format)
    calendar_generator = SessionCalendarGenerator(strategy_factory=CalendarStrategyFactory())
    report_service = ActivityAttendanceReportService(
        activities,
        attendance,
        roster,
        formatter=formatter,
        generator=calendar_generator,
    )

    return Container(
        settings=settings,
        activities_repo=activities,
        attendance_repo=attendance,
        roster_repo=roster,
        formatter=formatter,
        calendar_generator=calendar_generator,
        report_service=report_service,
    )
