from __future__ import annotations

from datetime import date
from enum import Enum


class Weekday(str, Enum):
    """Day of week, using the short tags stored on time slots."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        return _WEEKDAY_ORDER[value.weekday()]


_WEEKDAY_ORDER = tuple(Weekday)


class DateBasis(str, Enum):
    """How an activity's running period is defined."""

    PROGRAM_DATES = "Date"
    TERM = "Term"


class CalendarMode(str, Enum):
    """FULL: one column per possible meeting day. SPARSE: recorded days only."""

    FULL = "FULL"
    SPARSE = "SPARSE"


class RoleCategory(str, Enum):
    STAFF = "Staff"
    STUDENT = "Student"
    PARENT = "Parent"
    OTHER = "Other"
