from __future__ import annotations

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base + allowances - deductions, rounded to cents."""

    def net_salary(self, base_salary: float, allowances: float, deductions: float) -> float:
        return round(float(base_salary) + float(allowances or 0) - float(deductions or 0), 2)
