from __future__ import annotations

import logging
from dataclasses import asdict, replace
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import format_date
from ..common.validators import require_non_empty, require_password_complexity
from ..core.constants import NEW_USER_FIRST_NAME
from ..core.enums import SELF_ASSIGNABLE_ROLES, Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidCredentials,
    NotFoundError,
    ValidationError,
)
from .model import ADMIN_EDITABLE_FIELDS, SELF_EDITABLE_FIELDS, EmployeeProfile, Identity, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def split_display_name(username: str) -> tuple[str, str]:
    """First whitespace token is the first name, the rest is the last name."""
    parts = username.split()
    if not parts:
        return NEW_USER_FIRST_NAME, ""
    return parts[0], " ".join(parts[1:])


def profile_to_dict(profile: Optional[EmployeeProfile]) -> Optional[dict]:
    if profile is None:
        return None
    out = asdict(profile)
    out["hire_date"] = format_date(profile.hire_date)
    return out


def public_user(user: User, profile: Optional[EmployeeProfile]) -> dict:
    """User view safe to send to clients (no password hash)."""
    return {
        "id": user.user_id,
        "employee_id": user.employee_id,
        "username": user.username,
        "email": user.email,
        "role": user.role.value,
        "profile": profile_to_dict(profile),
    }


class AuthService:
    """Use cases: sign up, sign in, resolve the current user."""

    def __init__(self, users: UserRepository):
        self._users = users

    def sign_up(
        self,
        *,
        employee_id: str,
        username: str,
        email: str,
        password: str,
        role: Role = Role.EMPLOYEE,
        phone: Optional[str] = None,
    ) -> int:
        if role not in SELF_ASSIGNABLE_ROLES:
            raise ValidationError("Role must be employee or hr")

        employee_id = require_non_empty(employee_id, "Employee ID")
        username = require_non_empty(username, "Username")
        email = require_non_empty(email, "Email").lower()
        require_password_complexity(password)

        if self._users.get_by_employee_id(employee_id):
            raise ConflictError("Employee ID already registered")
        if self._users.get_by_username(username):
            raise ConflictError("Username already taken")
        if self._users.get_by_email(email):
            raise ConflictError("Email already registered")

        user_id = self._users.create_user(
            employee_id=employee_id,
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
        )

        first_name, last_name = split_display_name(username)
        self._users.create_profile(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            phone=(phone or "").strip() or None,
        )

        logger.info("New account %s (%s, role=%s)", user_id, employee_id, role.value)
        return user_id

    def sign_in(self, email: str, password: str) -> dict:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            logger.info("Sign-in rejected: unknown email")
            raise InvalidCredentials()

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("Sign-in rejected for user %s", user.user_id)
            raise InvalidCredentials()

        return public_user(user, self._users.get_profile(user.user_id))

    def me(self, user_id: int) -> dict:
        user = self._users.get_by_id(user_id)
        if not user:
            raise AuthenticationError("Invalid token")
        return public_user(user, self._users.get_profile(user.user_id))


class EmployeeService:
    """Use cases: employee roster and profile maintenance."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_employees(self) -> list[dict]:
        return list(self._users.list_with_profiles())

    def get_employee(self, *, current: Identity, user_id: int) -> dict:
        if not current.can_access(user_id):
            raise AuthorizationError("Access denied")

        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("Employee not found")
        return public_user(user, self._users.get_profile(user_id))

    def update_profile(self, *, current: Identity, user_id: int, changes: Mapping[str, Any]) -> dict:
        """Apply ``changes`` to a profile, masking fields by the caller's role.

        Employees may only touch their own phone, address and picture; admin-only
        fields they send are ignored rather than rejected.
        """

        if not current.can_access(user_id):
            raise AuthorizationError("Access denied")

        profile = self._users.get_profile(user_id)
        if not profile:
            raise NotFoundError("Employee profile not found")

        allowed = ADMIN_EDITABLE_FIELDS if current.is_admin else SELF_EDITABLE_FIELDS
        updates = {k: v for k, v in changes.items() if k in allowed}
        if "first_name" in updates:
            updates["first_name"] = require_non_empty(updates["first_name"], "First name")
        if "last_name" in updates:
            # Column is NOT NULL; an explicit null clears it.
            updates["last_name"] = (updates["last_name"] or "").strip()

        updated = replace(profile, **updates)
        self._users.update_profile(updated)
        return profile_to_dict(updated)

    def delete_employee(self, *, current: Identity, user_id: int) -> None:
        if not current.is_admin:
            raise AuthorizationError("Admin access required")
        if current.user_id == int(user_id):
            raise ValidationError("You cannot delete your own account")

        if not self._users.get_by_id(user_id):
            raise NotFoundError("Employee not found")

        if not self._users.delete_by_id(user_id):
            raise NotFoundError("Employee not found")
        logger.info("User %s deleted by %s", user_id, current.user_id)
