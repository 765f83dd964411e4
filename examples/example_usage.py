"""Example: build an attendance report from in-memory data (no database)."""

from datetime import date, datetime

from activity_attendance.attendance.model import AttendanceRecord, PersonRef
from activity_attendance.container import build_container
from activity_attendance.core.enums import DateBasis, Weekday
from activity_attendance.enrolment.model import Participant
from activity_attendance.reports.export import report_to_dataframe
from activity_attendance.schedules.model import ActivityConfig, TimeSlot

ACTIVITY = ActivityConfig(
    activity_id=1,
    name="Chess Club",
    date_basis=DateBasis.PROGRAM_DATES,
    program_start=date(2024, 1, 1),
    program_end=date(2024, 1, 31),
    max_participants=12,
)
TEACHER = PersonRef(person_id=90, preferred_name="Anna", surname="Tran", title="Ms.")


class DemoActivities:
    def get_by_id(self, activity_id):
        return ACTIVITY if activity_id == ACTIVITY.activity_id else None

    def get_time_slots(self, activity_id):
        return [TimeSlot(activity_id, Weekday.MON), TimeSlot(activity_id, Weekday.WED)]

    def get_term_windows(self):
        return {}


class DemoAttendance:
    def get_for_activity(self, activity_id):
        return [
            AttendanceRecord(date(2024, 1, 8), datetime(2024, 1, 8, 15, 30), TEACHER, {1: "Y", 2: "Y"}),
            AttendanceRecord(date(2024, 1, 1), datetime(2024, 1, 1, 15, 45), TEACHER, {1: "Y"}),
        ]


class DemoRoster:
    def get_participants(self, activity_id):
        return [Participant(1, "Linh", "Nguyen"), Participant(2, "Minh", "Pham")]


def main():
    container = build_container(activities=DemoActivities(), attendance=DemoAttendance(), roster=DemoRoster())
    report = container.report_service.build_report(1, all_columns=True)
    print(report_to_dataframe(report).to_string(index=False))


if __name__ == "__main__":
    main()
