from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object (no DB access code).
    """

    user_id: int
    employee_id: str
    username: Optional[str]
    email: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class EmployeeProfile:
    user_id: int
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    profile_picture: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    hire_date: Optional[date] = None
    employment_type: Optional[str] = None
    salary: Optional[float] = None


# Fields an employee may edit on their own profile; everything else is admin-only.
SELF_EDITABLE_FIELDS = ("phone", "address", "profile_picture")
ADMIN_EDITABLE_FIELDS = (
    "first_name",
    "last_name",
    "phone",
    "address",
    "profile_picture",
    "job_title",
    "department",
    "hire_date",
    "employment_type",
    "salary",
)


@dataclass(frozen=True)
class Identity:
    """Who is calling, as extracted from a verified token."""

    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin

    def can_access(self, user_id: int) -> bool:
        return self.is_admin or self.user_id == int(user_id)
