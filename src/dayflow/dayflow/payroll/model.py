from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollRecord:
    payroll_id: int
    user_id: int
    month: int
    year: int
    base_salary: float
    allowances: float
    deductions: float
    net_salary: float
    status: PayrollStatus
