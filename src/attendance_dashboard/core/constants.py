"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

EMPLOYEES_TABLE = "employees"
ATTENDANCE_TABLE = "attendance"

# Relational expansion used by the attendance list query.
ATTENDANCE_SELECT = "*, employees(id, name, email, role)"

# Query cache keys.
EMPLOYEES_QUERY = "employees"
ATTENDANCE_QUERY = "attendance"

DEFAULT_AUTH_PROVIDERS = ("github",)
DEFAULT_AUTH_THEME = "dark"
DEFAULT_CACHE_TTL_SECONDS = 0

APP_TITLE = "Employee Management System"
DASHBOARD_TITLE = "Employee Dashboard"
