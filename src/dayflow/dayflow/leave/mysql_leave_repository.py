from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_date
from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_where, db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRepository


def _row_to_dict(r: dict) -> dict:
    out = {
        "id": int(r["id"]),
        "user_id": int(r["user_id"]),
        "leave_type": r["leave_type"],
        "start_date": format_date(r["start_date"]),
        "end_date": format_date(r["end_date"]),
        "remarks": r.get("remarks") or "",
        "status": r["status"],
        "approved_by": r.get("approved_by"),
        "admin_comment": r.get("admin_comment") or "",
        "created_at": r["created_at"].strftime("%Y-%m-%d %H:%M:%S") if r.get("created_at") else None,
    }
    if "employee_id" in r:
        out["employee_id"] = r["employee_id"]
        out["first_name"] = r.get("first_name")
        out["last_name"] = r.get("last_name")
    return out


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(
        self,
        *,
        user_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        remarks: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(user_id, leave_type, start_date, end_date, remarks, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), leave_type.value, start_date, end_date, remarks, LeaveStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_leave(self, *, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, leave_type, start_date, end_date, remarks, status,
                       created_at, approved_by, admin_comment
                FROM leave_requests
                WHERE id=%s
                """,
                (int(request_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return LeaveRequest(
                request_id=int(r["id"]),
                user_id=int(r["user_id"]),
                leave_type=LeaveType(r["leave_type"]),
                start_date=r["start_date"],
                end_date=r["end_date"],
                remarks=r.get("remarks") or "",
                status=LeaveStatus(r["status"]),
                created_at=r.get("created_at"),
                approved_by=r.get("approved_by"),
                admin_comment=r.get("admin_comment"),
            )

    def list_for_user(self, *, user_id: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, leave_type, start_date, end_date, remarks, status,
                       approved_by, admin_comment, created_at
                FROM leave_requests
                WHERE user_id=%s
                ORDER BY created_at DESC, id DESC
                """,
                (int(user_id),),
            )
            return [_row_to_dict(r) for r in fetchall(cur)]

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> Sequence[dict]:
        clauses: list[str] = []
        params: list[object] = []
        if status is not None:
            clauses.append("l.status=%s")
            params.append(status.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT l.id, l.user_id, l.leave_type, l.start_date, l.end_date, l.remarks, l.status,
                       l.approved_by, l.admin_comment, l.created_at,
                       u.employee_id, p.first_name, p.last_name
                FROM leave_requests l
                JOIN users u ON u.id = l.user_id
                LEFT JOIN employee_profiles p ON p.user_id = u.id
                {build_where(clauses)}
                ORDER BY l.created_at DESC, l.id DESC
                """,
                tuple(params),
            )
            return [_row_to_dict(r) for r in fetchall(cur)]

    def decide_leave(
        self,
        *,
        request_id: int,
        status: LeaveStatus,
        decided_by: int,
        admin_comment: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, approved_by=%s, admin_comment=%s
                WHERE id=%s
                """,
                (status.value, int(decided_by), admin_comment, int(request_id)),
            )
            return cur.rowcount > 0
