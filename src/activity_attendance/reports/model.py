from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Hashable, Mapping, Optional

from ..attendance.model import ReconciledSession
from ..core.constants import NO_RECORDS_MESSAGE, NO_SCHEDULE_MESSAGE


@dataclass(frozen=True)
class AttendanceAggregate:
    session_count: int
    recorded_count: int
    per_session_count: Mapping[date, int] = field(default_factory=dict)
    per_student_marks: Mapping[Hashable, Mapping[date, bool]] = field(default_factory=dict)


@dataclass(frozen=True)
class ActivitySummary:
    activity_id: int
    name: str
    start_date: Optional[date]
    end_date: Optional[date]
    session_count: int
    participants: int
    max_participants: int
    waiting: int


@dataclass(frozen=True)
class StudentRow:
    """One roster line of the attendance grid."""

    position: int
    person_id: Hashable
    display_name: str
    marks: tuple[bool, ...]


@dataclass(frozen=True)
class AttendanceReport:
    summary: ActivitySummary
    all_columns: bool
    sessions: tuple[ReconciledSession, ...]
    aggregate: AttendanceAggregate
    rows: tuple[StudentRow, ...]
    totals: Mapping[date, int]
    records_count: int
    schedule_missing: bool
    has_records: bool

    @property
    def is_empty(self) -> bool:
        return not self.sessions

    @property
    def anomalous_dates(self) -> tuple[date, ...]:
        return tuple(s.date for s in self.sessions if s.anomalous)

    @property
    def messages(self) -> tuple[str, ...]:
        """Notices a renderer should show above the grid."""
        out = []
        if self.schedule_missing:
            out.append(NO_SCHEDULE_MESSAGE)
        if self.is_empty or (not self.all_columns and not self.has_records):
            out.append(NO_RECORDS_MESSAGE)
        return tuple(out)
