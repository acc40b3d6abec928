import os

DEBUG = False
TESTING = True

ANNUAL_LEAVE_DAYS = 42
MONTHLY_ALERT_DAY = 23
DEFAULT_PAGE_SIZE = 10

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_JSON = False
