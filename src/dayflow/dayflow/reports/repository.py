from __future__ import annotations

from datetime import date
from typing import Optional, Protocol


class ReportRepository(Protocol):
    """Read-only aggregates across tables."""

    def count_users(self) -> int:
        raise NotImplementedError

    def count_pending_leaves(self) -> int:
        raise NotImplementedError

    def count_present_on(self, day: date) -> int:
        raise NotImplementedError

    def sum_net_payroll(self, *, month: int, year: int) -> float:
        """0 when the period has no rows."""

        raise NotImplementedError

    def get_employee_card(self, user_id: int) -> Optional[dict]:
        raise NotImplementedError
