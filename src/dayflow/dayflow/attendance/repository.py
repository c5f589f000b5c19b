from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, *, user_id: int, work_date: date, check_in: time, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def update_checkin(self, *, attendance_id: int, check_in: time, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    def update_checkout(self, *, attendance_id: int, check_out: time) -> bool:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Persisted rows in [start_date, end_date], ordered by date."""

        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[int] = None,
    ) -> Sequence[dict]:
        """Admin rows joined with employee identity."""

        raise NotImplementedError

    def admin_update_record(
        self,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        check_in: Optional[time],
        check_out: Optional[time],
        notes: Optional[str] = None,
    ) -> bool:
        """Admin-only override; bypasses the check-in/out state machine."""

        raise NotImplementedError

    def upsert_status(self, *, user_id: int, work_date: date, status: AttendanceStatus) -> None:
        """Set the day's status, creating the row if needed and keeping check times."""

        raise NotImplementedError

    def set_status_if_exists(self, *, user_id: int, work_date: date, status: AttendanceStatus) -> bool:
        raise NotImplementedError
