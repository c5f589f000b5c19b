from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create_leave(
        self,
        *,
        user_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        remarks: str,
    ) -> int:
        raise NotImplementedError

    def get_leave(self, *, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int) -> Sequence[dict]:
        """The user's requests, newest first."""

        raise NotImplementedError

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> Sequence[dict]:
        """Every request joined with employee identity, newest first."""

        raise NotImplementedError

    def decide_leave(
        self,
        *,
        request_id: int,
        status: LeaveStatus,
        decided_by: int,
        admin_comment: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
