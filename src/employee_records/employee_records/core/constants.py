"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ANNUAL_LEAVE_DAYS = 42
DEFAULT_MONTHLY_ALERT_DAY = 23
DEFAULT_PAGE_SIZE = 25
RETIREMENT_AGE = 60

DISPLAY_DATE_FORMAT = "%d-%m-%Y"
NIC_FEMALE_DAY_OFFSET = 500
