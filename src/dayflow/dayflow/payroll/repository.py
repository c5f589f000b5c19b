from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def get_for_period(self, *, user_id: int, month: int, year: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        user_id: int,
        month: int,
        year: int,
        base_salary: float,
        allowances: float,
        deductions: float,
        net_salary: float,
        status: Optional[PayrollStatus],
    ) -> None:
        """Insert or overwrite the (user, month, year) row.

        ``status=None`` keeps the stored status, or ``pending`` for a new row.
        """

        raise NotImplementedError

    def update_record(self, record: PayrollRecord) -> bool:
        raise NotImplementedError

    def set_status(self, *, payroll_id: int, status: PayrollStatus) -> bool:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int, year: Optional[int] = None, month: Optional[int] = None) -> Sequence[dict]:
        raise NotImplementedError

    def list_all(
        self,
        *,
        user_id: Optional[int] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Sequence[dict]:
        """Rows joined with employee identity, newest period first."""

        raise NotImplementedError
