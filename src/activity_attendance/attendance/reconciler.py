from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import AbstractSet, Iterable, Mapping, Optional, Sequence

from ..common.logging import get_logger
from ..core.enums import Weekday
from ..core.exceptions import ValidationError
from ..formatting.formatter import Formatter
from ..schedules.model import Timespan
from ..sessions.model import SessionDate
from .model import AttendanceRecord, ReconciledSession

logger = get_logger(__name__)


def index_by_date(records: Iterable[AttendanceRecord]) -> dict[date, AttendanceRecord]:
    """Key records by their date; storage order does not matter."""
    indexed: dict[date, AttendanceRecord] = {}
    for record in records:
        if record.date in indexed:
            raise ValidationError(f"Duplicate attendance record for {record.date.isoformat()}")
        indexed[record.date] = record
    return indexed


def is_anomalous(session: SessionDate, weekdays: AbstractSet[Weekday], timespan: Optional[Timespan]) -> bool:
    """True when the current schedule no longer covers this date."""
    if session.weekday not in weekdays:
        return True
    if timespan is None:
        return True
    return not timespan.covers(session.date)


def reconcile(
    calendar: Sequence[SessionDate],
    records: Mapping[date, AttendanceRecord],
    weekdays: AbstractSet[Weekday],
    timespan: Optional[Timespan],
    *,
    formatter: Optional[Formatter] = None,
) -> tuple[ReconciledSession, ...]:
    """Merge stored records into the calendar, one result per calendar date.

    Validity is checked against the schedule as configured now, so a record
    taken before its time slot or dates were edited comes back flagged
    ``anomalous`` rather than dropped.
    """
    formatter = formatter or Formatter()
    out: list[ReconciledSession] = []

    for session in calendar:
        record = records.get(session.date)
        if record is None:
            out.append(ReconciledSession(date=session.date, timestamp=session.timestamp, recorded=False))
            continue

        anomalous = is_anomalous(session, weekdays, timespan)
        if anomalous:
            logger.debug("reconcile.anomalous_session", date=session.date.isoformat())

        out.append(
            ReconciledSession(
                date=session.date,
                timestamp=session.timestamp,
                recorded=True,
                attendance=MappingProxyType(dict(record.attendance)),
                info=formatter.recorded_info(record),
                anomalous=anomalous,
                recorded_at=record.recorded_at,
                recorded_by=record.recorded_by,
            )
        )

    return tuple(out)
