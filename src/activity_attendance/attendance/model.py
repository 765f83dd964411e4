from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional

from ..core.constants import ANOMALY_NOTE
from ..core.enums import RoleCategory

StudentRef = Hashable


@dataclass(frozen=True)
class PersonRef:
    person_id: Hashable
    preferred_name: str
    surname: str
    title: str = ""
    role_category: RoleCategory = RoleCategory.STAFF


@dataclass(frozen=True)
class AttendanceRecord:
    """Stored attendance for one activity date.

    A student is present when they appear as a key in ``attendance``; there
    are no explicit absent entries.
    """

    date: date
    recorded_at: datetime
    recorded_by: PersonRef
    attendance: Mapping[StudentRef, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReconciledSession:
    """A calendar date merged with its record, if one was taken."""

    date: date
    timestamp: datetime
    recorded: bool
    attendance: Mapping[StudentRef, Any] = field(default_factory=lambda: MappingProxyType({}))
    info: Optional[str] = None
    anomalous: bool = False
    recorded_at: Optional[datetime] = None
    recorded_by: Optional[PersonRef] = None

    @property
    def note(self) -> Optional[str]:
        return ANOMALY_NOTE if self.anomalous else None

    def is_present(self, student: StudentRef) -> bool:
        return student in self.attendance
