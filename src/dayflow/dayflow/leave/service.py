from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import iter_days
from ..common.validators import require_date_range
from ..core.constants import MAX_LEAVE_DAYS
from ..core.enums import AttendanceStatus, LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

DECISION_STATUSES = frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED})


class LeaveService:
    """Leave requests and their attendance side effects.

    Submitting stamps every covered day ``leave``; rejecting resets the days
    that have a row back to ``absent``. The per-day writes are not atomic.
    """

    def __init__(self, leaves: LeaveRepository, attendance: AttendanceRepository):
        self._leaves = leaves
        self._attendance = attendance

    def submit(
        self,
        *,
        user_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        remarks: str = "",
    ) -> int:
        require_date_range(start_date, end_date, max_days=MAX_LEAVE_DAYS)

        request_id = self._leaves.create_leave(
            user_id=int(user_id),
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            remarks=(remarks or "").strip(),
        )

        for day in iter_days(start_date, end_date):
            self._attendance.upsert_status(user_id=int(user_id), work_date=day, status=AttendanceStatus.LEAVE)

        logger.info(
            "Leave %s submitted by user %s (%s, %s..%s)",
            request_id,
            user_id,
            leave_type.value,
            start_date,
            end_date,
        )
        return request_id

    def list_mine(self, user_id: int) -> list[dict]:
        return list(self._leaves.list_for_user(user_id=int(user_id)))

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> list[dict]:
        return list(self._leaves.list_all(status=status))

    def decide(
        self,
        request_id: int,
        *,
        status: LeaveStatus,
        decider_id: int,
        admin_comment: Optional[str] = None,
    ) -> None:
        req = self._leaves.get_leave(request_id=int(request_id))
        if not req:
            raise NotFoundError("Leave request not found")
        if status not in DECISION_STATUSES:
            raise ValidationError("Status must be approved or rejected")

        self._leaves.decide_leave(
            request_id=req.request_id,
            status=status,
            decided_by=int(decider_id),
            admin_comment=(admin_comment or "").strip() or None,
        )

        if status == LeaveStatus.REJECTED:
            # Overwrites whatever the day held, including other approved leave.
            for day in iter_days(req.start_date, req.end_date):
                self._attendance.set_status_if_exists(
                    user_id=req.user_id, work_date=day, status=AttendanceStatus.ABSENT
                )

        logger.info("Leave %s %s by user %s", req.request_id, status.value, decider_id)
