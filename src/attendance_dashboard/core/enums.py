from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the `attendance.status` column."""

    PRESENT = "present"
    ABSENT = "absent"

    def toggled(self) -> "AttendanceStatus":
        return AttendanceStatus.ABSENT if self is AttendanceStatus.PRESENT else AttendanceStatus.PRESENT

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Route(str, Enum):
    """Named views the router can navigate to (Flask endpoint names)."""

    LOGIN = "login"
    DASHBOARD = "dashboard"


class NotificationLevel(str, Enum):
    """Flash categories used by the templates."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class QueryStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class MutationState(str, Enum):
    """Lifecycle of a single mutation."""

    IDLE = "idle"
    VALIDATING = "validating"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
