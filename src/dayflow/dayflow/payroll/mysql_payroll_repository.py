from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, build_where, db_cursor, fetchall, fetchone
from .model import PayrollRecord
from .repository import PayrollRepository

_COLUMNS = "id, user_id, month, year, base_salary, allowances, deductions, net_salary, status"


def _to_record(r: dict) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["id"]),
        user_id=int(r["user_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        base_salary=as_float(r["base_salary"]),
        allowances=as_float(r["allowances"]),
        deductions=as_float(r["deductions"]),
        net_salary=as_float(r["net_salary"]),
        status=PayrollStatus(r["status"]),
    )


def _row_to_dict(r: dict) -> dict:
    out = {
        "id": int(r["id"]),
        "user_id": int(r["user_id"]),
        "month": int(r["month"]),
        "year": int(r["year"]),
        "base_salary": as_float(r["base_salary"]),
        "allowances": as_float(r["allowances"]),
        "deductions": as_float(r["deductions"]),
        "net_salary": as_float(r["net_salary"]),
        "status": r["status"],
    }
    if "employee_id" in r:
        out["employee_id"] = r["employee_id"]
        out["first_name"] = r.get("first_name")
        out["last_name"] = r.get("last_name")
    return out


def _period_filters(prefix: str, year: Optional[int], month: Optional[int]) -> tuple[list[str], list[object]]:
    clauses: list[str] = []
    params: list[object] = []
    if year is not None:
        clauses.append(f"{prefix}year=%s")
        params.append(int(year))
    if month is not None:
        clauses.append(f"{prefix}month=%s")
        params.append(int(month))
    return clauses, params


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll WHERE id=%s", (int(payroll_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_period(self, *, user_id: int, month: int, year: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll WHERE user_id=%s AND month=%s AND year=%s",
                (int(user_id), int(month), int(year)),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(
        self,
        *,
        user_id: int,
        month: int,
        year: int,
        base_salary: float,
        allowances: float,
        deductions: float,
        net_salary: float,
        status: Optional[PayrollStatus],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll(user_id, month, year, base_salary, allowances, deductions, net_salary, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,COALESCE(%s, 'pending'))
                ON DUPLICATE KEY UPDATE
                    base_salary=VALUES(base_salary),
                    allowances=VALUES(allowances),
                    deductions=VALUES(deductions),
                    net_salary=VALUES(net_salary),
                    status=COALESCE(%s, status)
                """,
                (
                    int(user_id),
                    int(month),
                    int(year),
                    base_salary,
                    allowances,
                    deductions,
                    net_salary,
                    status.value if status else None,
                    status.value if status else None,
                ),
            )

    def update_record(self, record: PayrollRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll
                SET base_salary=%s, allowances=%s, deductions=%s, net_salary=%s, status=%s
                WHERE id=%s
                """,
                (
                    record.base_salary,
                    record.allowances,
                    record.deductions,
                    record.net_salary,
                    record.status.value,
                    record.payroll_id,
                ),
            )
            return cur.rowcount > 0

    def set_status(self, *, payroll_id: int, status: PayrollStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE payroll SET status=%s WHERE id=%s", (status.value, int(payroll_id)))
            return cur.rowcount > 0

    def list_for_user(self, *, user_id: int, year: Optional[int] = None, month: Optional[int] = None) -> Sequence[dict]:
        clauses, params = _period_filters("", year, month)
        clauses.insert(0, "user_id=%s")
        params.insert(0, int(user_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payroll
                {build_where(clauses)}
                ORDER BY year DESC, month DESC
                """,
                tuple(params),
            )
            return [_row_to_dict(r) for r in fetchall(cur)]

    def list_all(
        self,
        *,
        user_id: Optional[int] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Sequence[dict]:
        clauses, params = _period_filters("pr.", year, month)
        if user_id is not None:
            clauses.append("pr.user_id=%s")
            params.append(int(user_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT pr.id, pr.user_id, pr.month, pr.year, pr.base_salary, pr.allowances,
                       pr.deductions, pr.net_salary, pr.status,
                       u.employee_id, p.first_name, p.last_name
                FROM payroll pr
                JOIN users u ON u.id = pr.user_id
                LEFT JOIN employee_profiles p ON p.user_id = u.id
                {build_where(clauses)}
                ORDER BY pr.year DESC, pr.month DESC, u.employee_id
                """,
                tuple(params),
            )
            return [_row_to_dict(r) for r in fetchall(cur)]
