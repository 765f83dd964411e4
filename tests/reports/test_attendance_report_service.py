from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from activity_attendance.attendance.model import AttendanceRecord, PersonRef
from activity_attendance.core.constants import NO_RECORDS_MESSAGE, NO_SCHEDULE_MESSAGE
from activity_attendance.core.enums import DateBasis, Weekday
from activity_attendance.core.exceptions import ActivityNotFoundError, ValidationError
from activity_attendance.enrolment.model import Participant
from activity_attendance.reports.service import ActivityAttendanceReportService
from activity_attendance.schedules.model import ActivityConfig, TimeSlot, Timespan

TAKER = PersonRef(person_id=90, preferred_name="Anna", surname="Tran")


@dataclass
class InMemoryActivities:
    activities: dict[int, ActivityConfig]
    slots: dict[int, list[TimeSlot]] = field(default_factory=dict)
    terms: dict[int, Timespan] = field(default_factory=dict)

    def get_by_id(self, activity_id: int) -> Optional[ActivityConfig]:
        return self.activities.get(activity_id)

    def get_time_slots(self, activity_id: int):
        return self.slots.get(activity_id, [])

    def get_term_windows(self):
        return self.terms


@dataclass
class InMemoryAttendance:
    records: dict[int, list[AttendanceRecord]] = field(default_factory=dict)

    def get_for_activity(self, activity_id: int):
        return self.records.get(activity_id, [])


@dataclass
class InMemoryRoster:
    participants: dict[int, list[Participant]] = field(default_factory=dict)

    def get_participants(self, activity_id: int):
        return self.participants.get(activity_id, [])


def _record(day: date, students) -> AttendanceRecord:
    return AttendanceRecord(
        date=day,
        recorded_at=datetime(day.year, day.month, day.day, 16, 0),
        recorded_by=TAKER,
        attendance={s: "Y" for s in students},
    )


def _service(records=None, participants=None, slots=None, activity=None):
    activity = activity or ActivityConfig(
        activity_id=1,
        name="Chess Club",
        date_basis=DateBasis.PROGRAM_DATES,
        program_start=date(2024, 1, 1),
        program_end=date(2024, 1, 10),
        max_participants=10,
        waiting=2,
    )
    if slots is None:
        slots = [TimeSlot(1, Weekday.MON), TimeSlot(1, Weekday.WED)]
    activities = InMemoryActivities({1: activity}, {1: slots})
    attendance = InMemoryAttendance({1: records or []})
    roster = InMemoryRoster({1: participants or []})
    return ActivityAttendanceReportService(activities, attendance, roster)


def test_all_columns_report_builds_dense_grid():
    records = [
        _record(date(2024, 1, 8), [1]),
        _record(date(2024, 1, 1), [1, 2, 99]),
    ]
    participants = [Participant(1, "Linh", "Nguyen"), Participant(2, "Minh", "Pham")]
    svc = _service(records, participants)

    report = svc.build_report(1, all_columns=True)

    assert [s.date for s in report.sessions] == [
        date(2024, 1, 1),
        date(2024, 1, 3),
        date(2024, 1, 8),
        date(2024, 1, 10),
    ]
    assert report.summary.start_date == date(2024, 1, 1)
    assert report.summary.end_date == date(2024, 1, 10)
    assert report.summary.session_count == 4
    assert report.summary.participants == 2
    assert report.summary.waiting == 2
    assert report.records_count == 2

    assert report.rows[0].position == 1
    assert report.rows[0].display_name == "Nguyen, Linh"
    assert report.rows[0].marks == (True, False, True, False)
    assert report.rows[1].marks == (True, False, False, False)

    # student 99 is not on the roster: counted by the aggregate, not in totals
    assert report.aggregate.per_session_count[date(2024, 1, 1)] == 3
    assert report.totals[date(2024, 1, 1)] == 2
    assert report.schedule_missing is False


def test_recorded_only_report_surfaces_anomalies():
    records = [_record(date(2024, 1, 5), [1]), _record(date(2024, 1, 1), [1])]
    svc = _service(records, [Participant(1, "Linh", "Nguyen")])

    report = svc.build_report(1)

    assert [s.date for s in report.sessions] == [date(2024, 1, 1), date(2024, 1, 5)]
    assert report.anomalous_dates == (date(2024, 1, 5),)
    assert report.messages == ()
    assert report.aggregate.recorded_count == 2


def test_report_without_schedule_or_records():
    activity = ActivityConfig(activity_id=1, name="Drama", date_basis=DateBasis.PROGRAM_DATES)
    svc = _service(slots=[], activity=activity)

    report = svc.build_report(1, all_columns=True)

    assert report.schedule_missing is True
    assert report.has_records is False
    assert report.is_empty
    assert NO_SCHEDULE_MESSAGE in report.messages
    assert NO_RECORDS_MESSAGE in report.messages
    assert report.summary.start_date is None
    assert report.aggregate.session_count == 0


def test_empty_roster_does_not_crash():
    svc = _service([_record(date(2024, 1, 1), [])], [])

    report = svc.build_report(1, all_columns=True)

    assert report.rows == ()
    assert all(count == 0 for count in report.totals.values())
    assert report.aggregate.per_session_count[date(2024, 1, 1)] == 0


def test_term_based_activity():
    activity = ActivityConfig(activity_id=1, name="Choir", date_basis=DateBasis.TERM, term_ids=(3, 4))
    activities = InMemoryActivities(
        {1: activity},
        {1: [TimeSlot(1, Weekday.FRI)]},
        {3: Timespan(datetime(2024, 1, 1), datetime(2024, 1, 14, 23, 59, 59))},
    )
    svc = ActivityAttendanceReportService(activities, InMemoryAttendance(), InMemoryRoster())

    report = svc.build_report(1, all_columns=True)

    assert [s.date for s in report.sessions] == [date(2024, 1, 5), date(2024, 1, 12)]


def test_unknown_activity_raises():
    with pytest.raises(ActivityNotFoundError):
        _service().build_report(42)


def test_duplicate_record_dates_rejected():
    records = [_record(date(2024, 1, 1), [1]), _record(date(2024, 1, 1), [2])]

    with pytest.raises(ValidationError):
        _service(records).build_report(1)


def test_all_columns_keeps_off_schedule_records():
    records = [_record(date(2024, 1, 5), [1]), _record(date(2024, 1, 8), [1])]
    svc = _service(records, [Participant(1, "Linh", "Nguyen")])

    report = svc.build_report(1, all_columns=True)

    assert [s.date for s in report.sessions] == [
        date(2024, 1, 1),
        date(2024, 1, 3),
        date(2024, 1, 5),
        date(2024, 1, 8),
        date(2024, 1, 10),
    ]
    assert report.anomalous_dates == (date(2024, 1, 5),)
    assert report.aggregate.recorded_count == report.records_count == 2
    assert report.rows[0].marks == (False, False, True, True, False)
