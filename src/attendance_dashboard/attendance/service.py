from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Tuple

from ..common.notifications import Notification, Notifier
from ..common.validators import require_non_empty
from ..core.constants import ATTENDANCE_QUERY, EMPLOYEES_QUERY
from ..core.enums import AttendanceStatus, MutationState, QueryStatus
from ..core.exceptions import BackendError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .cache import QueryCache
from .model import AttendanceRecord, newest_first
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    status: QueryStatus = QueryStatus.PENDING
    data: Tuple = ()
    error: Optional[str] = None

    @property
    def settled(self) -> bool:
        return self.status != QueryStatus.PENDING


@dataclass
class DashboardState:
    """What the dashboard renders: both reads, each pending until it settles."""

    employees: QueryResult = field(default_factory=QueryResult)
    attendance: QueryResult = field(default_factory=QueryResult)

    @property
    def is_loading(self) -> bool:
        return not (self.employees.settled and self.attendance.settled)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a mutation; carries the affected record's new state on success."""

    succeeded: bool
    notification: Notification
    record: Optional[AttendanceRecord] = None


class MutationTracker:
    """Records the state machine of the mutations run through one view-model."""

    def __init__(self):
        self.state = MutationState.IDLE
        self.history: List[MutationState] = []

    def transition(self, state: MutationState) -> None:
        self.state = state
        self.history.append(state)


class AttendanceViewModel:
    """Use case: read and mutate attendance for the dashboard.

    Reads go through the shared query cache. Every successful mutation
    invalidates the attendance list exactly once; a failed one leaves the
    cache untouched. Failures are reported through the notifier and never
    retried.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        cache: QueryCache,
        notifier: Notifier,
        *,
        scope: str = "",
        tracker: Optional[MutationTracker] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._cache = cache
        self._notifier = notifier
        self._scope = scope
        self.tracker = tracker or MutationTracker()
        self.state = DashboardState()

    def list_employees(self) -> List[Employee]:
        return list(
            self._cache.get_or_fetch(EMPLOYEES_QUERY, lambda: tuple(self._employees.list_all()), scope=self._scope)
        )

    def list_attendance(self) -> List[AttendanceRecord]:
        records = self._cache.get_or_fetch(
            ATTENDANCE_QUERY,
            lambda: tuple(self._attendance.list_with_employees()),
            scope=self._scope,
        )
        return newest_first(records)

    def load(self) -> DashboardState:
        """Run both reads concurrently and settle each independently."""

        self.state = DashboardState()
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dashboard-read") as pool:
            employees = pool.submit(self.list_employees)
            attendance = pool.submit(self.list_attendance)
            self.state.employees = self._settle(employees, "Failed to load employees")
            self.state.attendance = self._settle(attendance, "Failed to load attendance")
        return self.state

    def _settle(self, future: Future, failure: str) -> QueryResult:
        try:
            return QueryResult(status=QueryStatus.SUCCESS, data=tuple(future.result()))
        except BackendError as exc:
            logger.warning("%s: %s", failure, exc)
            self._notifier.notify(Notification.danger(failure))
            return QueryResult(status=QueryStatus.ERROR, error=failure)

    def mark_attendance(self, *, work_date: date, status: AttendanceStatus, employee_id: Optional[str]) -> MutationResult:
        self.tracker.transition(MutationState.VALIDATING)
        try:
            employee_id = require_non_empty(employee_id, "Please select an employee")
        except ValidationError as exc:
            self.tracker.transition(MutationState.FAILED)
            return self._finish(MutationResult(False, Notification.warning(str(exc))))

        return self._run(
            lambda: self._attendance.create(employee_id=employee_id, work_date=work_date, status=status),
            success=f"Marked {status.value} for {work_date.isoformat()}",
            failure="Failed to mark attendance",
        )

    def update_status(self, record_id: str, new_status: AttendanceStatus) -> MutationResult:
        return self._run(
            lambda: self._attendance.update_status(record_id=record_id, status=new_status),
            success=f"Attendance updated to {new_status.value}",
            failure="Failed to update attendance",
        )

    def toggle_status(self, record_id: str, current_status: AttendanceStatus) -> MutationResult:
        # Two-value enum: present <-> absent.
        return self.update_status(record_id, current_status.toggled())

    def delete_attendance(self, record_id: str) -> MutationResult:
        return self._run(
            lambda: self._attendance.delete(record_id),
            success="Attendance record deleted",
            failure="Failed to delete attendance",
        )

    def _run(self, request: Callable[[], AttendanceRecord], *, success: str, failure: str) -> MutationResult:
        self.tracker.transition(MutationState.REQUESTING)
        try:
            record = request()
        except BackendError as exc:
            logger.warning("%s: %s", failure, exc)
            self.tracker.transition(MutationState.FAILED)
            return self._finish(MutationResult(False, Notification.danger(failure)))

        self.tracker.transition(MutationState.SUCCEEDED)
        self._cache.invalidate(ATTENDANCE_QUERY)
        logger.info("%s (record=%s)", success, record.record_id)
        return self._finish(MutationResult(True, Notification.success(success), record))

    def _finish(self, result: MutationResult) -> MutationResult:
        self._notifier.notify(result.notification)
        self.tracker.transition(MutationState.IDLE)
        return result
