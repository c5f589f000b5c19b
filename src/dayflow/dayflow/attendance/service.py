from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_clock, format_date, now_local, parse_clock, week_start, window_end
from ..core.constants import WEEK_LENGTH_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedIn, AlreadyCheckedOut, NotCheckedIn, NotFoundError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.attendance_id,
        "user_id": r.user_id,
        "date": format_date(r.work_date),
        "check_in": format_clock(r.check_in),
        "check_out": format_clock(r.check_out),
        "status": r.status.value,
        "notes": r.notes,
    }


class AttendanceService:
    """Daily check-in/out per (user, date): no record -> checked in -> checked out.

    A leave stamp can set the day's status independently of the check times.
    Days without a row read as absent; reads never write that default back.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def check_in(self, user_id: int, *, now: Optional[datetime] = None) -> dict:
        now = now or now_local()
        today = now.date()
        clock = now.time().replace(second=0, microsecond=0)

        existing = self._attendance.get_for_user_and_date(user_id, today)
        if existing and existing.check_in is not None:
            raise AlreadyCheckedIn()

        if existing:
            # Row created earlier by a leave stamp; check-in flips it to present.
            if not self._attendance.update_checkin(
                attendance_id=existing.attendance_id, check_in=clock, status=AttendanceStatus.PRESENT
            ):
                raise AlreadyCheckedIn()
        else:
            self._attendance.create_checkin(
                user_id=user_id,
                work_date=today,
                check_in=clock,
                status=AttendanceStatus.PRESENT,
            )

        return {"message": "Checked in successfully", "check_in": format_clock(clock)}

    def check_out(self, user_id: int, *, now: Optional[datetime] = None) -> dict:
        now = now or now_local()
        today = now.date()
        clock = now.time().replace(second=0, microsecond=0)

        record = self._attendance.get_for_user_and_date(user_id, today)
        if not record or record.check_in is None:
            raise NotCheckedIn()
        if record.check_out is not None:
            raise AlreadyCheckedOut()

        if not self._attendance.update_checkout(attendance_id=record.attendance_id, check_out=clock):
            raise AlreadyCheckedOut()

        return {"message": "Checked out successfully", "check_out": format_clock(clock)}

    def today(self, user_id: int, *, today: Optional[date] = None) -> dict:
        today = today or now_local().date()
        record = self._attendance.get_for_user_and_date(user_id, today)
        if record is None:
            return {"date": format_date(today), "status": AttendanceStatus.ABSENT.value}
        return record_to_dict(record)

    def weekly(self, user_id: int, *, start: Optional[date] = None) -> list[dict]:
        start = start or week_start(now_local().date())
        end = window_end(start, WEEK_LENGTH_DAYS)
        rows = self._attendance.list_for_user(user_id=user_id, start_date=start, end_date=end)
        return [record_to_dict(r) for r in rows]

    def range_for_user(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        user_id: Optional[int] = None,
    ) -> list[dict]:
        """Persisted rows only; callers fill in missing days as absent."""
        return list(self._attendance.list_range(start_date=start, end_date=end, user_id=user_id))

    def admin_update(
        self,
        attendance_id: int,
        *,
        status: AttendanceStatus,
        check_in: Optional[str],
        check_out: Optional[str],
        notes: Optional[str],
    ) -> dict:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")

        in_t = parse_clock(check_in)
        out_t = parse_clock(check_out)
        self._attendance.admin_update_record(
            attendance_id=attendance_id,
            status=status,
            check_in=in_t,
            check_out=out_t,
            notes=notes,
        )
        logger.info("Attendance %s overridden (status=%s)", attendance_id, status.value)

        return record_to_dict(
            AttendanceRecord(
                attendance_id=record.attendance_id,
                user_id=record.user_id,
                work_date=record.work_date,
                check_in=in_t,
                check_out=out_t,
                status=status,
                notes=notes,
            )
        )
