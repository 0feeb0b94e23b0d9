from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Access to the `attendance` collection.

    Note: the view-model depends on this interface, not on the backend client.
    Every method raises `BackendError` (reads: `FetchError`) on failure.
    """

    def list_with_employees(self) -> Sequence[AttendanceRecord]:
        """All records joined with their employee, newest date first."""

        raise NotImplementedError

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        raise NotImplementedError

    def update_status(self, *, record_id: str, status: AttendanceStatus) -> AttendanceRecord:
        """Update one record; an id that matches no row is a `BackendError`."""

        raise NotImplementedError

    def delete(self, record_id: str) -> AttendanceRecord:
        """Delete one record and return it; an id that matches no row is a `BackendError`."""

        raise NotImplementedError
