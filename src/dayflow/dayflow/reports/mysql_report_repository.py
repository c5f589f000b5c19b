from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .repository import ReportRepository


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _scalar(self, sql: str, params: tuple = ()):
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            r = fetchone(cur)
            return r["value"] if r else None

    def count_users(self) -> int:
        return int(self._scalar("SELECT COUNT(*) AS value FROM users") or 0)

    def count_pending_leaves(self) -> int:
        return int(
            self._scalar(
                "SELECT COUNT(*) AS value FROM leave_requests WHERE status=%s",
                (LeaveStatus.PENDING.value,),
            )
            or 0
        )

    def count_present_on(self, day: date) -> int:
        return int(
            self._scalar(
                "SELECT COUNT(*) AS value FROM attendance WHERE date=%s AND status=%s",
                (day, AttendanceStatus.PRESENT.value),
            )
            or 0
        )

    def sum_net_payroll(self, *, month: int, year: int) -> float:
        total = self._scalar(
            "SELECT SUM(net_salary) AS value FROM payroll WHERE month=%s AND year=%s",
            (int(month), int(year)),
        )
        return as_float(total) or 0.0

    def get_employee_card(self, user_id: int) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT u.employee_id, p.first_name, p.last_name, p.job_title, p.department
                FROM users u
                LEFT JOIN employee_profiles p ON p.user_id = u.id
                WHERE u.id=%s
                """,
                (int(user_id),),
            )
            return fetchone(cur)
