from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.dayflow.dayflow.attendance.service import AttendanceService
from src.dayflow.dayflow.core.enums import AttendanceStatus
from src.dayflow.dayflow.core.exceptions import AlreadyCheckedIn, AlreadyCheckedOut, NotCheckedIn, NotFoundError, ValidationError


def test_check_in_then_out_full_day(attendance, employee_id):
    svc = AttendanceService(attendance)
    day = date(2026, 3, 11)

    assert svc.check_in(employee_id, now=datetime(2026, 3, 11, 9, 0, 42))["check_in"] == "09:00"
    assert svc.check_out(employee_id, now=datetime(2026, 3, 11, 17, 30))["check_out"] == "17:30"

    today = svc.today(employee_id, today=day)
    assert today["check_in"] == "09:00"
    assert today["check_out"] == "17:30"
    assert today["status"] == "present"


def test_second_check_in_same_day_conflicts(attendance, employee_id, fixed_now):
    svc = AttendanceService(attendance)
    svc.check_in(employee_id, now=fixed_now)

    with pytest.raises(AlreadyCheckedIn):
        svc.check_in(employee_id, now=fixed_now)


def test_check_out_requires_check_in(attendance, employee_id, fixed_now):
    with pytest.raises(NotCheckedIn):
        AttendanceService(attendance).check_out(employee_id, now=fixed_now)


def test_second_check_out_conflicts(attendance, employee_id, fixed_now):
    svc = AttendanceService(attendance)
    svc.check_in(employee_id, now=fixed_now)
    svc.check_out(employee_id, now=fixed_now.replace(hour=17))

    with pytest.raises(AlreadyCheckedOut):
        svc.check_out(employee_id, now=fixed_now.replace(hour=18))


def test_check_in_on_leave_day_flips_to_present(attendance, employee_id, fixed_now):
    attendance.upsert_status(user_id=employee_id, work_date=fixed_now.date(), status=AttendanceStatus.LEAVE)
    svc = AttendanceService(attendance)

    svc.check_in(employee_id, now=fixed_now)

    assert attendance.status_on(employee_id, fixed_now.date()) == AttendanceStatus.PRESENT
    assert len(attendance.rows) == 1


def test_today_placeholder_is_not_persisted(attendance, employee_id, today):
    out = AttendanceService(attendance).today(employee_id, today=today)

    assert out == {"date": "2026-03-11", "status": "absent"}
    assert attendance.rows == {}


def test_weekly_window_is_seven_days_from_start(attendance, employee_id):
    svc = AttendanceService(attendance)
    for day in (1, 2, 8, 9):
        svc.check_in(employee_id, now=datetime(2026, 3, day, 9, 0))

    rows = svc.weekly(employee_id, start=date(2026, 3, 2))

    assert [r["date"] for r in rows] == ["2026-03-02", "2026-03-08"]


def test_range_for_user_filters_and_joins(attendance, employee_id, admin_id):
    svc = AttendanceService(attendance)
    svc.check_in(employee_id, now=datetime(2026, 3, 10, 9, 0))
    svc.check_in(admin_id, now=datetime(2026, 3, 10, 8, 0))
    svc.check_in(employee_id, now=datetime(2026, 3, 12, 9, 0))

    rows = svc.range_for_user(start=date(2026, 3, 10), end=date(2026, 3, 11), user_id=employee_id)

    assert len(rows) == 1
    assert rows[0]["employee_id"] == "EMP001"
    assert rows[0]["first_name"] == "Alice"


def test_admin_update_overrides_without_state_checks(attendance, employee_id, fixed_now):
    svc = AttendanceService(attendance)
    svc.check_in(employee_id, now=fixed_now)
    record_id = next(iter(attendance.rows))

    out = svc.admin_update(record_id, status=AttendanceStatus.HALF_DAY, check_in="10:15", check_out="", notes="late")

    assert out["status"] == "half-day"
    assert out["check_in"] == "10:15"
    assert out["check_out"] is None
    assert attendance.get_by_id(record_id).check_in == time(10, 15)


def test_admin_update_unknown_record(attendance):
    with pytest.raises(NotFoundError):
        AttendanceService(attendance).admin_update(99, status=AttendanceStatus.ABSENT, check_in=None, check_out=None, notes=None)


def test_admin_update_rejects_bad_clock(attendance, employee_id, fixed_now):
    svc = AttendanceService(attendance)
    svc.check_in(employee_id, now=fixed_now)

    with pytest.raises(ValidationError):
        svc.admin_update(1, status=AttendanceStatus.PRESENT, check_in="25:99", check_out=None, notes=None)


def test_weekly_start_too_close_to_calendar_end(attendance, employee_id):
    with pytest.raises(ValidationError):
        AttendanceService(attendance).weekly(employee_id, start=date(9999, 12, 30))


def test_weekly_last_full_week_of_calendar(attendance, employee_id):
    assert AttendanceService(attendance).weekly(employee_id, start=date(9999, 12, 25)) == []
