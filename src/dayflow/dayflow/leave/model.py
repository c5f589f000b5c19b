from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    user_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    remarks: str
    status: LeaveStatus
    created_at: Optional[datetime] = None
    approved_by: Optional[int] = None
    admin_comment: Optional[str] = None
