from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import EmployeeProfile, User


class UserRepository(Protocol):
    """Repository interface for users and their 1:1 profiles.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        employee_id: str,
        username: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        """Delete the user; the store cascades to dependent rows."""

        raise NotImplementedError

    def get_profile(self, user_id: int) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def create_profile(self, *, user_id: int, first_name: str, last_name: str, phone: Optional[str]) -> None:
        raise NotImplementedError

    def update_profile(self, profile: EmployeeProfile) -> bool:
        raise NotImplementedError

    def set_salary(self, user_id: int, salary: float) -> bool:
        raise NotImplementedError

    def list_with_profiles(self) -> Sequence[dict]:
        """Roster rows (user joined with profile), newest first."""

        raise NotImplementedError
