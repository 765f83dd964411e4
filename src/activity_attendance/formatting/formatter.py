"""Display formatting for dates, times and person names.

Everything locale-dependent comes from a FormatSettings value given to the
Formatter; nothing here reads process-wide state.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Callable, Optional

from ..attendance.model import AttendanceRecord, PersonRef
from ..core.constants import RECORDED_INFO_TEMPLATE
from ..core.enums import RoleCategory
from .settings import FormatSettings

_TOKEN_RE = re.compile(r"\[+([^\]]*)\]+")


class Formatter:
    def __init__(self, settings: Optional[FormatSettings] = None):
        self._settings = settings or FormatSettings()
        self._name_formats: dict[RoleCategory, Callable[..., str]] = {
            RoleCategory.STAFF: self._staff_name,
            RoleCategory.OTHER: self._staff_name,
            RoleCategory.PARENT: self._parent_name,
            RoleCategory.STUDENT: self._student_name,
        }

    @property
    def settings(self) -> FormatSettings:
        return self._settings

    def date(self, value: date | datetime) -> str:
        return value.strftime(self._settings.date_format)

    def time(self, value: time | datetime) -> str:
        return value.strftime(self._settings.time_format)

    def name(
        self,
        title: str,
        preferred_name: str,
        surname: str,
        role: RoleCategory = RoleCategory.STAFF,
        *,
        reverse: bool = False,
        informal: bool = False,
    ) -> str:
        if not preferred_name and not surname:
            return ""
        output = self._name_formats[role](title or "", preferred_name or "", surname or "", reverse, informal)
        return output.strip(" ")

    def person(self, person: PersonRef, *, reverse: bool = False, informal: bool = False) -> str:
        return self.name(
            person.title,
            person.preferred_name,
            person.surname,
            person.role_category,
            reverse=reverse,
            informal=informal,
        )

    def recorded_info(self, record: AttendanceRecord) -> str:
        """Tooltip text for a recorded session: when and by whom."""
        return RECORDED_INFO_TEMPLATE.format(
            time=self.time(record.recorded_at),
            date=self.date(record.recorded_at),
            name=self.person(record.recorded_by, informal=True),
        )

    def _staff_name(self, title: str, preferred_name: str, surname: str, reverse: bool, informal: bool) -> str:
        values = {"title": title, "preferredName": preferred_name, "surname": surname}
        template = self._settings.staff_name_format(reverse=reverse, informal=informal)

        def replace(match: re.Match) -> str:
            token, _, length = match.group(1).partition(":")
            value = values.get(token, "")
            return value[: int(length)] if length.isdigit() and int(length) else value

        return _TOKEN_RE.sub(replace, template)

    @staticmethod
    def _parent_name(title: str, preferred_name: str, surname: str, reverse: bool, informal: bool) -> str:
        name = f"{surname}, {preferred_name}" if reverse else f"{preferred_name} {surname}"
        return name if informal else f"{title} {name}"

    @staticmethod
    def _student_name(title: str, preferred_name: str, surname: str, reverse: bool, informal: bool) -> str:
        return f"{surname}, {preferred_name}" if reverse else f"{preferred_name} {surname}"
