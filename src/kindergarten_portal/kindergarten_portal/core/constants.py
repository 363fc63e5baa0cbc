"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

UNKNOWN_CHILD_NAME = "Unknown Child"
INTERNAL_ERROR_MESSAGE = "Internal server error"

ABSENCE_ID_PREFIX = "absence"
NOTIFICATION_ID_PREFIX = "notif"
ID_SUFFIX_LENGTH = 9

# Monday..Friday as returned by date.weekday()
WORKING_WEEKDAYS = frozenset({0, 1, 2, 3, 4})
