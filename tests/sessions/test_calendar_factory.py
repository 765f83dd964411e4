from activity_attendance.core.enums import CalendarMode
from activity_attendance.sessions.factory import CalendarStrategyFactory
from activity_attendance.sessions.strategies.full_strategy import FullCalendarStrategy
from activity_attendance.sessions.strategies.sparse_strategy import SparseCalendarStrategy


def test_factory_full_mode():
    assert isinstance(CalendarStrategyFactory().for_mode(CalendarMode.FULL), FullCalendarStrategy)


def test_factory_sparse_mode():
    assert isinstance(CalendarStrategyFactory().for_mode(CalendarMode.SPARSE), SparseCalendarStrategy)
