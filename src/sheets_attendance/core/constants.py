"""Constants and defaults.

Note: Keep table names, column orders and time thresholds here to avoid magic
values spread across code. Column order must match the sheet exactly, positional
appends and single-cell writes depend on it.
"""

from datetime import time

DEFAULT_HISTORY_DAYS = 30

# Header row + first data row => data index 0 lives on sheet row 2.
FIRST_DATA_ROW = 2

EMPLOYEES_TABLE = "Employees"
CONFIRMATIONS_TABLE = "Security_Confirmations"
ATTENDANCE_TABLE = "Attendance"
LEAVE_REQUESTS_TABLE = "Leave_Requests"
MONTHLY_RECAP_TABLE = "Monthly_Recap"

EMPLOYEE_COLUMNS = ("Name", "Position", "PIN", "Role")
CONFIRMATION_COLUMNS = ("Date", "SecurityName", "EmployeeName", "Position", "ConfirmationTime")
ATTENDANCE_COLUMNS = (
    "Date",
    "Name",
    "Position",
    "CheckInTime",
    "CheckInStatus",
    "CheckOutTime",
    "CheckOutStatus",
    "CheckInPhotoUrl",
    "CheckOutPhotoUrl",
    "CheckInLocation",
    "CheckOutLocation",
    "WorkDuration",
)
LEAVE_REQUEST_COLUMNS = ("Date", "Name", "Position", "LeaveType", "Reason", "ApprovalStatus", "ApprovedBy")

CONFIRMATION_WINDOW_START = time(6, 0)
CONFIRMATION_WINDOW_END = time(9, 0)
CHECKOUT_ALLOWED_FROM = time(17, 0)
ON_TIME_UNTIL = time(8, 10)
LATE_UNTIL = time(8, 30)

PIN_LENGTH = 4

# Tables written positionally; their header rows must match these orders.
TABLE_COLUMNS = {
    EMPLOYEES_TABLE: EMPLOYEE_COLUMNS,
    CONFIRMATIONS_TABLE: CONFIRMATION_COLUMNS,
    ATTENDANCE_TABLE: ATTENDANCE_COLUMNS,
    LEAVE_REQUESTS_TABLE: LEAVE_REQUEST_COLUMNS,
}
