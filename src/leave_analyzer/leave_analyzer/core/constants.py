"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Spreadsheet serial dates count days from 1899-12-30; 25569 of them lie before 1970-01-01.
EXCEL_EPOCH_OFFSET_DAYS = 25569
SECONDS_PER_DAY = 86400
MINUTES_PER_DAY = 1440

# Fixed weekly work-hour policy
WEEKDAY_EXPECTED_HOURS = 8.5
SATURDAY_EXPECTED_HOURS = 4.0
REST_DAY_EXPECTED_HOURS = 0.0

LEAVES_PER_MONTH = 2

# Both times of a day are placed on this date so only the time-of-day difference matters.
TIME_ANCHOR_DATE = date(1970, 1, 1)

MONTH_KEY_FORMAT = "%Y-%m"
