from __future__ import annotations

from typing import List

from supabase import Client

from ..backend.base import backend_call, rows
from ..core.constants import EMPLOYEES_TABLE
from ..core.exceptions import FetchError, SchemaError
from .model import Employee


class SupabaseEmployeeRepository:
    def __init__(self, client: Client):
        self._client = client

    def list_all(self) -> List[Employee]:
        with backend_call("list employees", error_cls=FetchError):
            response = self._client.table(EMPLOYEES_TABLE).select("*").order("name").execute()
        try:
            return [Employee.from_row(r) for r in rows(response)]
        except SchemaError as exc:
            raise FetchError("list employees failed: unexpected row shape") from exc
