from __future__ import annotations

from datetime import date, datetime

import pytest

from src.dayflow.dayflow.attendance.service import AttendanceService
from src.dayflow.dayflow.core.enums import AttendanceStatus, LeaveStatus, LeaveType
from src.dayflow.dayflow.core.exceptions import InvalidRange, NotFoundError, ValidationError
from src.dayflow.dayflow.leave.service import LeaveService


def _submit(svc: LeaveService, user_id: int, start: date, end: date) -> int:
    return svc.submit(user_id=user_id, leave_type=LeaveType.SICK, start_date=start, end_date=end, remarks=" flu ")


def test_submit_stamps_each_day_as_leave(leaves, attendance, employee_id):
    svc = LeaveService(leaves, attendance)

    rid = _submit(svc, employee_id, date(2026, 3, 9), date(2026, 3, 11))

    assert leaves.get_leave(request_id=rid).status == LeaveStatus.PENDING
    assert leaves.get_leave(request_id=rid).remarks == "flu"
    for day in (9, 10, 11):
        assert attendance.status_on(employee_id, date(2026, 3, day)) == AttendanceStatus.LEAVE
    assert attendance.status_on(employee_id, date(2026, 3, 12)) is None


def test_submit_keeps_existing_check_times(leaves, attendance, employee_id):
    AttendanceService(attendance).check_in(employee_id, now=datetime(2026, 3, 9, 9, 0))

    _submit(LeaveService(leaves, attendance), employee_id, date(2026, 3, 9), date(2026, 3, 9))

    record = attendance.get_for_user_and_date(employee_id, date(2026, 3, 9))
    assert record.status == AttendanceStatus.LEAVE
    assert record.check_in is not None


def test_submit_rejects_inverted_range(leaves, attendance, employee_id):
    with pytest.raises(InvalidRange):
        _submit(LeaveService(leaves, attendance), employee_id, date(2026, 3, 11), date(2026, 3, 9))
    assert leaves.requests == {}


def test_single_day_leave(leaves, attendance, employee_id):
    _submit(LeaveService(leaves, attendance), employee_id, date(2026, 3, 9), date(2026, 3, 9))
    assert len(attendance.rows) == 1


def test_reject_resets_days_to_absent(leaves, attendance, employee_id, admin_id):
    svc = LeaveService(leaves, attendance)
    rid = _submit(svc, employee_id, date(2026, 3, 9), date(2026, 3, 11))

    svc.decide(rid, status=LeaveStatus.REJECTED, decider_id=admin_id, admin_comment="busy week")

    req = leaves.get_leave(request_id=rid)
    assert req.status == LeaveStatus.REJECTED
    assert req.approved_by == admin_id
    assert req.admin_comment == "busy week"
    for day in (9, 10, 11):
        assert attendance.status_on(employee_id, date(2026, 3, day)) == AttendanceStatus.ABSENT


def test_approve_leaves_attendance_untouched(leaves, attendance, employee_id, admin_id):
    svc = LeaveService(leaves, attendance)
    rid = _submit(svc, employee_id, date(2026, 3, 9), date(2026, 3, 10))

    svc.decide(rid, status=LeaveStatus.APPROVED, decider_id=admin_id)

    assert leaves.get_leave(request_id=rid).status == LeaveStatus.APPROVED
    assert attendance.status_on(employee_id, date(2026, 3, 9)) == AttendanceStatus.LEAVE


def test_decide_validations(leaves, attendance, employee_id, admin_id):
    svc = LeaveService(leaves, attendance)
    rid = _submit(svc, employee_id, date(2026, 3, 9), date(2026, 3, 9))

    with pytest.raises(NotFoundError):
        svc.decide(999, status=LeaveStatus.APPROVED, decider_id=admin_id)
    with pytest.raises(ValidationError):
        svc.decide(rid, status=LeaveStatus.PENDING, decider_id=admin_id)


def test_list_mine_and_all(leaves, attendance, employee_id, admin_id):
    svc = LeaveService(leaves, attendance)
    first = _submit(svc, employee_id, date(2026, 3, 2), date(2026, 3, 2))
    second = _submit(svc, employee_id, date(2026, 3, 9), date(2026, 3, 9))
    svc.decide(first, status=LeaveStatus.APPROVED, decider_id=admin_id)

    assert [r["id"] for r in svc.list_mine(employee_id)] == [second, first]
    assert [r["id"] for r in svc.list_all(status=LeaveStatus.PENDING)] == [second]
    assert svc.list_mine(admin_id) == []


def test_submit_on_last_representable_day(leaves, attendance, employee_id):
    _submit(LeaveService(leaves, attendance), employee_id, date.max, date.max)

    assert attendance.status_on(employee_id, date.max) == AttendanceStatus.LEAVE


def test_submit_rejects_oversized_range_before_writing(leaves, attendance, employee_id):
    with pytest.raises(InvalidRange):
        _submit(LeaveService(leaves, attendance), employee_id, date(1, 1, 1), date(9999, 12, 30))

    assert leaves.requests == {}
    assert attendance.rows == {}


def test_submit_accepts_a_full_year(leaves, attendance, employee_id):
    _submit(LeaveService(leaves, attendance), employee_id, date(2028, 1, 1), date(2028, 12, 31))

    assert len(attendance.rows) == 366
