"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_DAYS = 7
MIN_PASSWORD_LENGTH = 8
WEEK_LENGTH_DAYS = 7
TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%Y-%m-%d"
NEW_USER_FIRST_NAME = "New"
MAX_LEAVE_DAYS = 366
