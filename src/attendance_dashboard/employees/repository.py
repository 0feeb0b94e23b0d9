from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only access to the `employees` collection."""

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
