"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_TIME_IN = "09:00:00"
DEFAULT_SESSION_TIME_OUT = "15:30:00"
DEFAULT_REQUEST_TIMEOUT = 10

MSG_FETCH_RECORDS_FAILED = "Failed to fetch attendance records"
MSG_MARK_FAILED = "Failed to mark attendance"
MSG_BULK_FAILED = "Failed to mark bulk attendance"
MSG_MARK_SUCCESS = "Attendance marked successfully"
MSG_NOTHING_TO_MARK = "No attendance records to mark"
