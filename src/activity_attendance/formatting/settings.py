from __future__ import annotations

from dataclasses import dataclass

from ..core import constants


@dataclass(frozen=True)
class FormatSettings:
    """Locale-dependent display formats, passed explicitly to the Formatter."""

    date_format: str = constants.DEFAULT_DATE_FORMAT
    time_format: str = constants.DEFAULT_TIME_FORMAT
    name_format_staff_formal: str = constants.DEFAULT_NAME_FORMAT_STAFF_FORMAL
    name_format_staff_formal_reversed: str = constants.DEFAULT_NAME_FORMAT_STAFF_FORMAL_REVERSED
    name_format_staff_informal: str = constants.DEFAULT_NAME_FORMAT_STAFF_INFORMAL
    name_format_staff_informal_reversed: str = constants.DEFAULT_NAME_FORMAT_STAFF_INFORMAL_REVERSED

    def staff_name_format(self, *, reverse: bool, informal: bool) -> str:
        if informal:
            return self.name_format_staff_informal_reversed if reverse else self.name_format_staff_informal
        return self.name_format_staff_formal_reversed if reverse else self.name_format_staff_formal
