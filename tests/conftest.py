from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from attendance_dashboard.attendance.cache import QueryCache
from attendance_dashboard.attendance.model import AttendanceRecord
from attendance_dashboard.attendance.service import AttendanceViewModel
from attendance_dashboard.container import Container
from attendance_dashboard.core.enums import AttendanceStatus
from attendance_dashboard.employees.model import Employee
from attendance_dashboard.main import create_app
from tests.fakes import FakeConnection, InMemoryAttendance, InMemoryEmployees, RecordingNotifier, raw_session


@pytest.fixture
def employees():
    return [
        Employee(employee_id="E1", name="Alice Nguyen", email="alice@example.com", role="engineer"),
        Employee(employee_id="E2", name="Bob Tran", email="bob@example.com", role="designer"),
    ]


@pytest.fixture
def seeded_records(employees):
    return [
        AttendanceRecord(
            record_id="r-old",
            employee_id="E1",
            work_date=date(2024, 1, 8),
            status=AttendanceStatus.PRESENT,
            created_at=datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc),
            employee=employees[0],
        ),
        AttendanceRecord(
            record_id="r-new",
            employee_id="E2",
            work_date=date(2024, 1, 9),
            status=AttendanceStatus.ABSENT,
            created_at=datetime(2024, 1, 9, 9, 0, tzinfo=timezone.utc),
            employee=employees[1],
        ),
    ]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def employees_repo(employees):
    return InMemoryEmployees(list(employees))


@pytest.fixture
def attendance_repo(seeded_records):
    return InMemoryAttendance(list(seeded_records))


@pytest.fixture
def view_model(employees_repo, attendance_repo, cache, notifier):
    return AttendanceViewModel(employees_repo, attendance_repo, cache, notifier, scope="user-1")


@pytest.fixture
def connection():
    conn = FakeConnection()
    conn.client.seed_employee("E1", "Alice Nguyen", "alice@example.com")
    conn.client.seed_employee("E2", "Bob Tran", "bob@example.com", role="designer")
    return conn


@pytest.fixture
def container(connection):
    return Container(conn=connection, cache=QueryCache())


@pytest.fixture
def app(container):
    return create_app(settings_module="attendance_dashboard.config.testing", container=container)


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def signed_in(connection):
    connection.client.auth.session = raw_session()
    return connection.client
