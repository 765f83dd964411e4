from __future__ import annotations

from typing import Optional

from ..attendance.reconciler import index_by_date, reconcile
from ..attendance.repository import AttendanceRepository
from ..common.logging import get_logger
from ..core.enums import CalendarMode, RoleCategory
from ..core.exceptions import ActivityNotFoundError
from ..enrolment.repository import RosterRepository
from ..formatting.formatter import Formatter
from ..schedules.repository import ActivityRepository
from ..schedules.timespan import resolve_timespan
from ..schedules.weekdays import derive_weekdays
from ..sessions.generator import SessionCalendarGenerator, merge_calendars
from .aggregator import aggregate
from .model import ActivitySummary, AttendanceReport, StudentRow

logger = get_logger(__name__)


class ActivityAttendanceReportService:
    def __init__(
        self,
        activities: ActivityRepository,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        *,
        formatter: Optional[Formatter] = None,
        generator: Optional[SessionCalendarGenerator] = None,
    ):
        self._activities = activities
        self._attendance = attendance
        self._roster = roster
        self._formatter = formatter or Formatter()
        self._generator = generator or SessionCalendarGenerator()

    def build_report(self, activity_id: int, *, all_columns: bool = False) -> AttendanceReport:
        """Attendance grid of one activity.

        With ``all_columns`` every scheduled date gets a column, recorded or not,
        along with any recorded date the schedule no longer covers; otherwise
        only dates with a stored record are shown.
        """
        activity = self._activities.get_by_id(activity_id)
        if not activity:
            raise ActivityNotFoundError(f"Activity {activity_id} does not exist")

        participants = list(self._roster.get_participants(activity_id))
        records = index_by_date(self._attendance.get_for_activity(activity_id))

        weekdays = derive_weekdays(self._activities.get_time_slots(activity_id))
        timespan = resolve_timespan(activity, self._activities.get_term_windows())

        mode = CalendarMode.FULL if all_columns else CalendarMode.SPARSE
        calendar = self._generator.generate(weekdays, timespan, records.keys(), mode)
        if mode == CalendarMode.FULL:
            # recorded dates off the current schedule still get a column, flagged below
            recorded = self._generator.generate(weekdays, timespan, records.keys(), CalendarMode.SPARSE)
            calendar = merge_calendars(calendar, recorded)
        sessions = reconcile(calendar, records, weekdays, timespan, formatter=self._formatter)
        summary_counts = aggregate(sessions)

        rows = []
        for position, participant in enumerate(participants, start=1):
            rows.append(
                StudentRow(
                    position=position,
                    person_id=participant.person_id,
                    display_name=self._formatter.name(
                        "",
                        participant.preferred_name,
                        participant.surname,
                        RoleCategory.STUDENT,
                        reverse=True,
                    ),
                    marks=tuple(s.is_present(participant.person_id) for s in sessions),
                )
            )

        # only roster members count towards the column totals
        totals = {s.date: sum(1 for p in participants if s.is_present(p.person_id)) for s in sessions}

        summary = ActivitySummary(
            activity_id=activity.activity_id,
            name=activity.name,
            start_date=timespan.start.date() if timespan else None,
            end_date=timespan.end.date() if timespan else None,
            session_count=len(sessions),
            participants=len(participants),
            max_participants=activity.max_participants,
            waiting=activity.waiting,
        )

        report = AttendanceReport(
            summary=summary,
            all_columns=all_columns,
            sessions=sessions,
            aggregate=summary_counts,
            rows=tuple(rows),
            totals=totals,
            records_count=len(records),
            schedule_missing=not weekdays or timespan is None,
            has_records=bool(records),
        )

        if report.schedule_missing:
            logger.warning("report.schedule_missing", activity_id=activity_id)
        if report.anomalous_dates:
            logger.warning(
                "report.anomalous_sessions",
                activity_id=activity_id,
                dates=[d.isoformat() for d in report.anomalous_dates],
            )
        logger.info(
            "report.built",
            activity_id=activity_id,
            mode=mode.value,
            sessions=summary_counts.session_count,
            recorded=summary_counts.recorded_count,
            participants=len(participants),
        )
        return report
