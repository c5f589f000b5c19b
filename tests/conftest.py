from __future__ import annotations

from datetime import date, datetime

import pytest

from src.dayflow.dayflow.container import wire_services
from src.dayflow.dayflow.core.enums import Role
from src.dayflow.dayflow.users.model import Identity

from fakes import InMemoryAttendance, InMemoryLeaves, InMemoryPayroll, InMemoryReports, InMemoryUsers


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 3, 11, 9, 0, 27)


@pytest.fixture
def today(fixed_now) -> date:
    return fixed_now.date()


@pytest.fixture
def users() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def attendance(users) -> InMemoryAttendance:
    return InMemoryAttendance(users)


@pytest.fixture
def leaves() -> InMemoryLeaves:
    return InMemoryLeaves()


@pytest.fixture
def payroll() -> InMemoryPayroll:
    return InMemoryPayroll()


@pytest.fixture
def container(users, attendance, leaves, payroll):
    return wire_services(
        users_repo=users,
        attendance_repo=attendance,
        leave_repo=leaves,
        payroll_repo=payroll,
        reports_repo=InMemoryReports(users, attendance, leaves, payroll),
    )


@pytest.fixture
def employee_id(users) -> int:
    return users.add(employee_id="EMP001", email="alice@example.com", first_name="Alice", last_name="Nguyen")


@pytest.fixture
def admin_id(users) -> int:
    return users.add(employee_id="ADMIN001", email="admin@example.com", role=Role.ADMIN, first_name="Ada", last_name="Admin")


@pytest.fixture
def employee(employee_id) -> Identity:
    return Identity(user_id=employee_id, role=Role.EMPLOYEE)


@pytest.fixture
def admin(admin_id) -> Identity:
    return Identity(user_id=admin_id, role=Role.ADMIN)
