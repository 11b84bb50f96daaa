"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EVENTS_FILE = "timetracking_events.json"
TEMPLATES_FILE = "timetracking_templates.json"
ACCOUNT_LOG_FILE = "account_log.json"

DEFAULT_WEEKDAY_HOURS = (8.0, 8.0, 8.0, 8.0, 8.0, 0.0, 0.0)
DEFAULT_STANDARD_START = "09:00"
DEFAULT_STANDARD_END = "17:00"
DEFAULT_LUNCH_MINUTES = 60

MAX_HOURS_PER_DAY = 24.0
DEFAULT_SUMMARY_DAYS = 31
DEFAULT_LEDGER_LOOKBACK_DAYS = 365

MANUAL_SET_NOTE = "Manual set"
MANUAL_DELTA_NOTE = "Manual delta"

CSV_HEADER = ("Date", "Kind", "Delta", "Balance", "Note", "AffectedDate")
