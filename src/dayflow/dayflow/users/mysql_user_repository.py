from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..common.datetime_utils import format_date
from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import EmployeeProfile, User
from .repository import UserRepository

_USER_COLUMNS = "id, employee_id, username, email, password_hash, role, created_at"
_PROFILE_COLUMNS = (
    "user_id, first_name, last_name, phone, address, profile_picture, "
    "job_title, department, hire_date, employment_type, salary"
)


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        employee_id=row["employee_id"],
        username=row.get("username"),
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        created_at=row.get("created_at"),
    )


def _to_profile(row: dict) -> EmployeeProfile:
    return EmployeeProfile(
        user_id=int(row["user_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        phone=row.get("phone"),
        address=row.get("address"),
        profile_picture=row.get("profile_picture"),
        job_title=row.get("job_title"),
        department=row.get("department"),
        hire_date=row.get("hire_date"),
        employment_type=row.get("employment_type"),
        salary=as_float(row.get("salary")),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE {column}=%s", (value,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("id", int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email", email)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        return self._get_one("employee_id", employee_id)

    def create_user(
        self,
        *,
        employee_id: str,
        username: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(employee_id, username, email, password_hash, role)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (employee_id, username, email, password_hash, role.value),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # Lost a race with a concurrent signup; the unique keys decide.
            raise ConflictError("User already exists") from e

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (int(user_id),))
            return cur.rowcount > 0

    def get_profile(self, user_id: int) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM employee_profiles WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def create_profile(self, *, user_id: int, first_name: str, last_name: str, phone: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_profiles(user_id, first_name, last_name, phone)
                VALUES(%s,%s,%s,%s)
                """,
                (int(user_id), first_name, last_name, phone),
            )

    def update_profile(self, profile: EmployeeProfile) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employee_profiles
                SET first_name=%s, last_name=%s, phone=%s, address=%s, profile_picture=%s,
                    job_title=%s, department=%s, hire_date=%s, employment_type=%s, salary=%s
                WHERE user_id=%s
                """,
                (
                    profile.first_name,
                    profile.last_name,
                    profile.phone,
                    profile.address,
                    profile.profile_picture,
                    profile.job_title,
                    profile.department,
                    profile.hire_date,
                    profile.employment_type,
                    profile.salary,
                    int(profile.user_id),
                ),
            )
            return cur.rowcount > 0

    def set_salary(self, user_id: int, salary: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employee_profiles SET salary=%s WHERE user_id=%s", (salary, int(user_id)))
            return cur.rowcount > 0

    def list_with_profiles(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT u.id, u.employee_id, u.username, u.email, u.role,
                       p.first_name, p.last_name, p.phone, p.address, p.profile_picture,
                       p.job_title, p.department, p.hire_date, p.employment_type, p.salary
                FROM users u
                LEFT JOIN employee_profiles p ON p.user_id = u.id
                ORDER BY u.created_at DESC, u.id DESC
                """
            )
            rows = fetchall(cur)
            return [
                {
                    "id": int(r["id"]),
                    "employee_id": r["employee_id"],
                    "username": r.get("username"),
                    "email": r["email"],
                    "role": r["role"],
                    "first_name": r.get("first_name"),
                    "last_name": r.get("last_name"),
                    "phone": r.get("phone"),
                    "address": r.get("address"),
                    "profile_picture": r.get("profile_picture"),
                    "job_title": r.get("job_title"),
                    "department": r.get("department"),
                    "hire_date": format_date(r.get("hire_date")),
                    "employment_type": r.get("employment_type"),
                    "salary": as_float(r.get("salary")),
                }
                for r in rows
            ]
