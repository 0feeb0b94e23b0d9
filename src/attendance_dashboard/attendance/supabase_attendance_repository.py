from __future__ import annotations

from datetime import date
from typing import List

from supabase import Client

from ..backend.base import backend_call, require_single_row, rows
from ..core.constants import ATTENDANCE_SELECT, ATTENDANCE_TABLE
from ..core.enums import AttendanceStatus
from ..core.exceptions import FetchError, SchemaError
from .model import AttendanceRecord, newest_first


class SupabaseAttendanceRepository:
    def __init__(self, client: Client):
        self._client = client

    def _table(self):
        return self._client.table(ATTENDANCE_TABLE)

    def list_with_employees(self) -> List[AttendanceRecord]:
        with backend_call("list attendance", error_cls=FetchError):
            response = self._table().select(ATTENDANCE_SELECT).order("date", desc=True).execute()
        try:
            records = [AttendanceRecord.from_row(r) for r in rows(response)]
        except SchemaError as exc:
            raise FetchError("list attendance failed: unexpected row shape") from exc
        return newest_first(records)

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        payload = {
            "employee_id": employee_id,
            "date": work_date.isoformat(),
            "status": status.value,
        }
        with backend_call("create attendance"):
            response = self._table().insert(payload).execute()
        return AttendanceRecord.from_row(require_single_row(response, "create attendance"))

    def update_status(self, *, record_id: str, status: AttendanceStatus) -> AttendanceRecord:
        with backend_call("update attendance"):
            response = self._table().update({"status": status.value}).eq("id", record_id).execute()
        return AttendanceRecord.from_row(require_single_row(response, "update attendance"))

    def delete(self, record_id: str) -> AttendanceRecord:
        with backend_call("delete attendance"):
            response = self._table().delete().eq("id", record_id).execute()
        return AttendanceRecord.from_row(require_single_row(response, "delete attendance"))

