from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_month
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, InvalidRange, NotFoundError, ValidationError
from ..payroll.repository import PayrollRepository
from ..payroll.service import record_to_dict
from ..users.model import Identity
from .repository import ReportRepository


def summarize_attendance(rows: list[dict]) -> list[dict]:
    """Per-user status counts, in first-seen order."""
    summary: dict[int, dict] = {}
    for r in rows:
        s = summary.get(r["user_id"])
        if s is None:
            s = {
                "user_id": r["user_id"],
                "employee_id": r.get("employee_id"),
                "name": f"{r.get('first_name') or ''} {r.get('last_name') or ''}".strip(),
            }
            s.update({status.value: 0 for status in AttendanceStatus})
            summary[r["user_id"]] = s
        s[r["status"]] = s.get(r["status"], 0) + 1
    return list(summary.values())


class ReportService:
    def __init__(self, reports: ReportRepository, attendance: AttendanceRepository, payroll: PayrollRepository):
        self._reports = reports
        self._attendance = attendance
        self._payroll = payroll

    def analytics(self, *, today: Optional[date] = None) -> dict:
        today = today or now_local().date()
        return {
            "totalEmployees": self._reports.count_users(),
            "pendingLeaves": self._reports.count_pending_leaves(),
            "todayAttendance": self._reports.count_present_on(today),
            "monthlyPayroll": self._reports.sum_net_payroll(month=today.month, year=today.year),
        }

    def attendance_report(
        self,
        *,
        start: Optional[date],
        end: Optional[date],
        user_id: Optional[int] = None,
    ) -> dict:
        if start is None or end is None:
            raise ValidationError("Start date and end date are required")
        if start > end:
            raise InvalidRange("Start date must be on or before end date")

        rows = list(self._attendance.list_range(start_date=start, end_date=end, user_id=user_id))
        return {"records": rows, "summary": summarize_attendance(rows)}

    def salary_slip(
        self,
        *,
        current: Identity,
        user_id: int,
        month: Optional[int],
        year: Optional[int],
    ) -> dict:
        if not month or not year:
            raise ValidationError("Month and year are required")
        if not current.can_access(user_id):
            raise AuthorizationError("Access denied")

        record = self._payroll.get_for_period(user_id=int(user_id), month=require_month(month), year=int(year))
        if not record:
            raise NotFoundError("Payroll record not found")

        slip = record_to_dict(record)
        slip["employee"] = self._reports.get_employee_card(int(user_id))
        return slip
