from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

import mysql.connector

from ..common.datetime_utils import format_clock, format_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedIn
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_where, db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, user_id, date, check_in, check_out, status, notes"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        user_id=int(r["user_id"]),
        work_date=r["date"],
        check_in=normalize_mysql_time(r.get("check_in")),
        check_out=normalize_mysql_time(r.get("check_out")),
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE user_id=%s AND date=%s",
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_checkin(self, *, user_id: int, work_date: date, check_in: time, status: AttendanceStatus) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(user_id, date, check_in, status)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(user_id), work_date, check_in, status.value),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # (user_id, date) is unique: a concurrent check-in got there first.
            raise AlreadyCheckedIn() from e

    def update_checkin(self, *, attendance_id: int, check_in: time, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET check_in=%s, status=%s WHERE id=%s AND check_in IS NULL",
                (check_in, status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

    def update_checkout(self, *, attendance_id: int, check_out: time) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET check_out=%s WHERE id=%s AND check_out IS NULL",
                (check_out, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_user(self, *, user_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE user_id=%s AND date BETWEEN %s AND %s
                ORDER BY date
                """,
                (int(user_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_range(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[int] = None,
    ) -> Sequence[dict]:
        clauses: list[str] = []
        params: list[object] = []

        if user_id is not None:
            clauses.append("a.user_id=%s")
            params.append(int(user_id))
        if start_date is not None:
            clauses.append("a.date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("a.date <= %s")
            params.append(end_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.id, a.user_id, a.date, a.check_in, a.check_out, a.status, a.notes,
                       u.employee_id, p.first_name, p.last_name
                FROM attendance a
                JOIN users u ON u.id = a.user_id
                LEFT JOIN employee_profiles p ON p.user_id = u.id
                {build_where(clauses)}
                ORDER BY a.date, u.employee_id
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                {
                    "id": int(r["id"]),
                    "user_id": int(r["user_id"]),
                    "date": format_date(r["date"]),
                    "check_in": format_clock(normalize_mysql_time(r.get("check_in"))),
                    "check_out": format_clock(normalize_mysql_time(r.get("check_out"))),
                    "status": r["status"],
                    "notes": r.get("notes"),
                    "employee_id": r["employee_id"],
                    "first_name": r.get("first_name"),
                    "last_name": r.get("last_name"),
                }
                for r in rows
            ]

    def admin_update_record(
        self,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        check_in: Optional[time],
        check_out: Optional[time],
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET status=%s, check_in=%s, check_out=%s, notes=%s
                WHERE id=%s
                """,
                (status.value, check_in, check_out, notes, int(attendance_id)),
            )
            return cur.rowcount > 0

    def upsert_status(self, *, user_id: int, work_date: date, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(user_id, date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(user_id), work_date, status.value),
            )

    def set_status_if_exists(self, *, user_id: int, work_date: date, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET status=%s WHERE user_id=%s AND date=%s",
                (status.value, int(user_id), work_date),
            )
            return cur.rowcount > 0
