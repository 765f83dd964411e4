"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_DATE_FORMAT = "%d/%m/%Y"
DEFAULT_TIME_FORMAT = "%H:%M:%S"

DEFAULT_NAME_FORMAT_STAFF_FORMAL = "[title] [preferredName:1]. [surname]"
DEFAULT_NAME_FORMAT_STAFF_FORMAL_REVERSED = "[surname], [title] [preferredName:1]."
DEFAULT_NAME_FORMAT_STAFF_INFORMAL = "[preferredName] [surname]"
DEFAULT_NAME_FORMAT_STAFF_INFORMAL_REVERSED = "[surname], [preferredName]"

RECORDED_INFO_TEMPLATE = "Recorded at {time} on {date} by {name}."
ANOMALY_NOTE = "Does not match the time slots for this activity."
NO_SCHEDULE_MESSAGE = (
    "There are no time slots assigned to this activity, or the start and end dates are invalid. "
    "New attendance values cannot be entered until the time slots and dates are added."
)
NO_RECORDS_MESSAGE = "There are no records to display."

PRESENT_MARK = "✓"
EXPORT_SHEET_NAME = "Attendance"
