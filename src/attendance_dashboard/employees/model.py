from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.exceptions import SchemaError


def _required_str(row: Mapping[str, Any], key: str, entity: str) -> str:
    value = row.get(key)
    if value is None:
        raise SchemaError(f"{entity} row is missing {key!r}")
    return str(value)


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee (read-only reference data)."""

    employee_id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        if not isinstance(row, Mapping):
            raise SchemaError(f"employee row must be an object, got {type(row).__name__}")
        return cls(
            employee_id=_required_str(row, "id", "employee"),
            name=_required_str(row, "name", "employee"),
            email=_required_str(row, "email", "employee"),
            role=str(row.get("role") or ""),
        )
