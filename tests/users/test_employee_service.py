from __future__ import annotations

from datetime import date

import pytest

from src.dayflow.dayflow.core.enums import Role
from src.dayflow.dayflow.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.dayflow.dayflow.users.model import Identity
from src.dayflow.dayflow.users.service import EmployeeService


def test_employee_can_read_self_but_not_others(users, employee, admin_id):
    svc = EmployeeService(users)

    assert svc.get_employee(current=employee, user_id=employee.user_id)["employee_id"] == "EMP001"
    with pytest.raises(AuthorizationError):
        svc.get_employee(current=employee, user_id=admin_id)


def test_hr_has_admin_scope(users, employee_id):
    hr = Identity(user_id=users.add(employee_id="HR1", email="hr@example.com", role=Role.HR), role=Role.HR)

    profile = EmployeeService(users).get_employee(current=hr, user_id=employee_id)

    assert profile["id"] == employee_id


def test_employee_update_masks_admin_only_fields(users, employee):
    svc = EmployeeService(users)

    out = svc.update_profile(
        current=employee,
        user_id=employee.user_id,
        changes={"phone": "123", "job_title": "CEO", "salary": 1_000_000},
    )

    assert out["phone"] == "123"
    assert out["job_title"] is None
    assert out["salary"] is None
    assert users.get_profile(employee.user_id).phone == "123"


def test_admin_update_changes_any_field_and_keeps_the_rest(users, admin, employee_id):
    svc = EmployeeService(users)

    out = svc.update_profile(
        current=admin,
        user_id=employee_id,
        changes={"job_title": "Engineer", "hire_date": date(2025, 5, 1), "salary": 5000.0},
    )

    assert out["job_title"] == "Engineer"
    assert out["hire_date"] == "2025-05-01"
    assert out["salary"] == 5000.0
    assert out["first_name"] == "Alice"


def test_update_missing_profile_is_not_found(users, admin):
    with pytest.raises(NotFoundError):
        EmployeeService(users).update_profile(current=admin, user_id=404, changes={"phone": "1"})


def test_admin_cannot_delete_self(users, admin):
    with pytest.raises(ValidationError):
        EmployeeService(users).delete_employee(current=admin, user_id=admin.user_id)


def test_delete_employee(users, admin, employee_id):
    svc = EmployeeService(users)

    svc.delete_employee(current=admin, user_id=employee_id)

    assert users.get_by_id(employee_id) is None
    with pytest.raises(NotFoundError):
        svc.delete_employee(current=admin, user_id=employee_id)


def test_list_employees_newest_first(users, employee_id, admin_id):
    rows = EmployeeService(users).list_employees()
    assert [r["id"] for r in rows] == [admin_id, employee_id]


def test_admin_null_last_name_is_cleared_not_nulled(users, admin, employee_id):
    out = EmployeeService(users).update_profile(current=admin, user_id=employee_id, changes={"last_name": None})

    assert out["last_name"] == ""
    assert users.get_profile(employee_id).last_name == ""


def test_admin_null_first_name_is_rejected(users, admin, employee_id):
    with pytest.raises(ValidationError):
        EmployeeService(users).update_profile(current=admin, user_id=employee_id, changes={"first_name": None})
