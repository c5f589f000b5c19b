from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..core.enums import AttendanceStatus


class AttendanceUpdateRequest(BaseModel):
    status: AttendanceStatus
    check_in: Optional[str] = Field(default=None, description="HH:MM")
    check_out: Optional[str] = Field(default=None, description="HH:MM")
    notes: Optional[str] = None
