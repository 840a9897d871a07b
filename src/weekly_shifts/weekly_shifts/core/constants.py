"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DAYS_PER_WEEK = 7
MONTH_GRID_SHORT = 35
MONTH_GRID_LONG = 42
DEFAULT_LOCALE = "it"
DEFAULT_OWNER_ID = "default-user"
