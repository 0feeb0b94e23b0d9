from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_timestamp
from ..core.enums import AttendanceStatus
from ..core.exceptions import SchemaError
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one dated presence/absence entry for one employee."""

    record_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
    employee: Optional[Employee] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceRecord":
        """Map an `attendance` row, optionally carrying an embedded `employees` object."""

        if not isinstance(row, Mapping):
            raise SchemaError(f"attendance row must be an object, got {type(row).__name__}")

        missing = [k for k in ("id", "employee_id", "date", "status") if row.get(k) is None]
        if missing:
            raise SchemaError(f"attendance row is missing {', '.join(missing)}")

        try:
            work_date = parse_iso_date(str(row["date"])[:10])
        except ValueError:
            raise SchemaError(f"attendance row has an invalid date: {row['date']!r}")

        try:
            status = AttendanceStatus(str(row["status"]).lower())
        except ValueError:
            raise SchemaError(f"attendance row has an unknown status: {row['status']!r}")

        created_at = None
        if row.get("created_at"):
            try:
                created_at = parse_timestamp(str(row["created_at"]))
            except ValueError:
                raise SchemaError(f"attendance row has an invalid created_at: {row['created_at']!r}")

        embedded = row.get("employees")
        employee = Employee.from_row(embedded) if embedded else None

        return cls(
            record_id=str(row["id"]),
            employee_id=str(row["employee_id"]),
            work_date=work_date,
            status=status,
            created_at=created_at,
            employee=employee,
        )

    def sort_key(self) -> tuple:
        # Newest date first; within a day, newest created_at first.
        created = self.created_at.timestamp() if self.created_at else float("-inf")
        return (self.work_date, created)


def newest_first(records) -> list:
    return sorted(records, key=lambda r: r.sort_key(), reverse=True)
