from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..core.enums import LeaveStatus, LeaveType


class LeaveCreateRequest(BaseModel):
    leave_type: LeaveType
    start_date: date
    end_date: date
    remarks: str = Field(default="", max_length=2000)


class LeaveDecisionRequest(BaseModel):
    status: LeaveStatus
    admin_comment: Optional[str] = Field(default=None, max_length=2000)
