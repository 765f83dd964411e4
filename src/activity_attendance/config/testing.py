from ..core import constants

LOG_LEVEL = "WARNING"
LOG_JSON = False

# fixed formats so tests do not depend on the environment
FORMAT = {
    "date_format": constants.DEFAULT_DATE_FORMAT,
    "time_format": constants.DEFAULT_TIME_FORMAT,
}
