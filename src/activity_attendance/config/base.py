import os

from ..core import constants


def format_from_env() -> dict:
    return {
        "date_format": os.getenv("DATE_FORMAT", constants.DEFAULT_DATE_FORMAT),
        "time_format": os.getenv("TIME_FORMAT", constants.DEFAULT_TIME_FORMAT),
        "name_format_staff_formal": os.getenv(
            "NAME_FORMAT_STAFF_FORMAL", constants.DEFAULT_NAME_FORMAT_STAFF_FORMAL
        ),
        "name_format_staff_formal_reversed": os.getenv(
            "NAME_FORMAT_STAFF_FORMAL_REVERSED", constants.DEFAULT_NAME_FORMAT_STAFF_FORMAL_REVERSED
        ),
        "name_format_staff_informal": os.getenv(
            "NAME_FORMAT_STAFF_INFORMAL", constants.DEFAULT_NAME_FORMAT_STAFF_INFORMAL
        ),
        "name_format_staff_informal_reversed": os.getenv(
            "NAME_FORMAT_STAFF_INFORMAL_REVERSED", constants.DEFAULT_NAME_FORMAT_STAFF_INFORMAL_REVERSED
        ),
    }
