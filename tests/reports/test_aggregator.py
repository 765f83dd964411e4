from __future__ import annotations

from datetime import date, datetime

from activity_attendance.attendance.model import ReconciledSession
from activity_attendance.reports.aggregator import aggregate


def _session(day: date, students=None) -> ReconciledSession:
    if students is None:
        return ReconciledSession(date=day, timestamp=datetime(day.year, day.month, day.day), recorded=False)
    return ReconciledSession(
        date=day,
        timestamp=datetime(day.year, day.month, day.day),
        recorded=True,
        attendance={s: "Y" for s in students},
    )


def test_aggregate_counts_and_marks():
    sessions = [
        _session(date(2024, 1, 1), ["S1", "S2"]),
        _session(date(2024, 1, 3)),
        _session(date(2024, 1, 8), ["S1"]),
        _session(date(2024, 1, 10), []),
    ]

    agg = aggregate(sessions)

    assert agg.session_count == 4
    assert agg.recorded_count == 3
    assert agg.per_session_count == {
        date(2024, 1, 1): 2,
        date(2024, 1, 3): 0,
        date(2024, 1, 8): 1,
        date(2024, 1, 10): 0,
    }
    assert agg.per_student_marks["S1"] == {date(2024, 1, 1): True, date(2024, 1, 8): True}
    assert date(2024, 1, 3) not in agg.per_student_marks["S1"]
    assert agg.per_student_marks["S2"] == {date(2024, 1, 1): True}


def test_aggregate_is_repeatable():
    sessions = (_session(date(2024, 1, 1), ["S1"]), _session(date(2024, 1, 8), ["S2", "S1"]))

    assert aggregate(sessions) == aggregate(sessions)


def test_aggregate_empty_calendar():
    agg = aggregate([])

    assert agg.session_count == 0
    assert agg.recorded_count == 0
    assert agg.per_session_count == {}
    assert agg.per_student_marks == {}
