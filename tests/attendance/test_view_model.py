from __future__ import annotations

from datetime import date

import pytest

from attendance_dashboard.core.constants import ATTENDANCE_QUERY
from attendance_dashboard.core.enums import AttendanceStatus, MutationState, NotificationLevel, QueryStatus


MUTATIONS = {
    "mark": lambda vm: vm.mark_attendance(work_date=date(2024, 1, 10), status=AttendanceStatus.PRESENT, employee_id="E1"),
    "update": lambda vm: vm.update_status("r-old", AttendanceStatus.ABSENT),
    "delete": lambda vm: vm.delete_attendance("r-old"),
}

FAILURE_MESSAGES = {
    "mark": "Failed to mark attendance",
    "update": "Failed to update attendance",
    "delete": "Failed to delete attendance",
}

REPO_OPS = {"mark": "create", "update": "update", "delete": "delete"}


@pytest.mark.parametrize("name", sorted(MUTATIONS))
def test_failed_mutation_leaves_cache_untouched(name, view_model, attendance_repo, cache, notifier):
    before = view_model.list_attendance()
    attendance_repo.fail_on.add(REPO_OPS[name])

    result = MUTATIONS[name](view_model)

    assert result.succeeded is False
    assert cache.invalidations[ATTENDANCE_QUERY] == 0
    assert cache.is_cached(ATTENDANCE_QUERY, scope="user-1")
    assert view_model.list_attendance() == before
    assert notifier.notifications[-1].level == NotificationLevel.DANGER
    assert notifier.messages[-1] == FAILURE_MESSAGES[name]


@pytest.mark.parametrize("name", sorted(MUTATIONS))
def test_successful_mutation_invalidates_exactly_once(name, view_model, cache, notifier):
    view_model.list_attendance()

    result = MUTATIONS[name](view_model)

    assert result.succeeded is True
    assert result.record is not None
    assert cache.invalidations[ATTENDANCE_QUERY] == 1
    assert not cache.is_cached(ATTENDANCE_QUERY, scope="user-1")
    assert notifier.notifications[-1].level == NotificationLevel.SUCCESS


@pytest.mark.parametrize("employee_id", ["", "   ", None])
def test_mark_without_employee_never_calls_backend(employee_id, view_model, attendance_repo, cache, notifier):
    result = view_model.mark_attendance(
        work_date=date(2024, 1, 10),
        status=AttendanceStatus.PRESENT,
        employee_id=employee_id,
    )

    assert result.succeeded is False
    assert attendance_repo.calls == []
    assert cache.invalidations[ATTENDANCE_QUERY] == 0
    assert notifier.notifications[-1].level == NotificationLevel.WARNING
    assert notifier.messages[-1] == "Please select an employee"


def test_attendance_is_listed_newest_date_first(view_model):
    view_model.mark_attendance(work_date=date(2023, 12, 31), status=AttendanceStatus.ABSENT, employee_id="E2")
    view_model.mark_attendance(work_date=date(2024, 2, 1), status=AttendanceStatus.PRESENT, employee_id="E1")

    dates = [r.work_date for r in view_model.list_attendance()]

    assert dates == sorted(dates, reverse=True)
    assert dates[0] == date(2024, 2, 1)


def test_toggle_twice_restores_initial_status(view_model, attendance_repo):
    initial = attendance_repo.get("r-new").status

    first = view_model.toggle_status("r-new", initial)
    second = view_model.toggle_status("r-new", first.record.status)

    assert first.record.status == initial.toggled()
    assert second.record.status == initial
    assert attendance_repo.get("r-new").status == initial


def test_mark_present_scenario_is_visible_after_refetch(view_model, notifier):
    view_model.list_attendance()

    result = view_model.mark_attendance(
        work_date=date(2024, 1, 10),
        status=AttendanceStatus.PRESENT,
        employee_id="E1",
    )

    assert result.record.employee_id == "E1"
    assert result.record.work_date == date(2024, 1, 10)
    assert result.record.status == AttendanceStatus.PRESENT
    assert notifier.messages[-1] == "Marked present for 2024-01-10"

    refreshed = view_model.list_attendance()
    assert refreshed[0].record_id == result.record.record_id


def test_delete_missing_record_reports_failure(view_model, cache, notifier):
    before = view_model.list_attendance()

    result = view_model.delete_attendance("does-not-exist")

    assert result.succeeded is False
    assert notifier.messages == ["Failed to delete attendance"]
    assert cache.invalidations[ATTENDANCE_QUERY] == 0
    assert view_model.list_attendance() == before


def test_mutation_state_machine(view_model, attendance_repo):
    view_model.mark_attendance(work_date=date(2024, 1, 10), status=AttendanceStatus.PRESENT, employee_id="E1")
    assert view_model.tracker.history == [
        MutationState.VALIDATING,
        MutationState.REQUESTING,
        MutationState.SUCCEEDED,
        MutationState.IDLE,
    ]

    view_model.tracker.history.clear()
    attendance_repo.fail_on.add("delete")
    view_model.delete_attendance("r-old")
    assert view_model.tracker.history == [MutationState.REQUESTING, MutationState.FAILED, MutationState.IDLE]
    assert view_model.tracker.state == MutationState.IDLE


def test_reads_are_served_from_cache_until_invalidated(view_model, employees_repo, attendance_repo):
    view_model.list_employees()
    view_model.list_employees()
    view_model.list_attendance()
    view_model.list_attendance()

    assert employees_repo.calls == 1
    assert attendance_repo.calls.count("list") == 1

    view_model.delete_attendance("r-old")
    view_model.list_attendance()
    assert attendance_repo.calls.count("list") == 2


def test_load_settles_both_queries(view_model):
    assert view_model.state.is_loading

    state = view_model.load()

    assert not state.is_loading
    assert state.employees.status == QueryStatus.SUCCESS
    assert [e.employee_id for e in state.employees.data] == ["E1", "E2"]
    assert [r.record_id for r in state.attendance.data] == ["r-new", "r-old"]


def test_load_reports_failed_read_independently(view_model, employees_repo, notifier):
    employees_repo.fail = True

    state = view_model.load()

    assert not state.is_loading
    assert state.employees.status == QueryStatus.ERROR
    assert state.employees.data == ()
    assert state.attendance.status == QueryStatus.SUCCESS
    assert notifier.messages == ["Failed to load employees"]
