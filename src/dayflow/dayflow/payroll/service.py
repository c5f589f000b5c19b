from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import require_month, require_non_negative
from ..core.enums import PayrollStatus
from ..core.exceptions import InvalidStatus, NotFoundError
from ..users.repository import UserRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def record_to_dict(r: PayrollRecord) -> dict:
    return {
        "id": r.payroll_id,
        "user_id": r.user_id,
        "month": r.month,
        "year": r.year,
        "base_salary": r.base_salary,
        "allowances": r.allowances,
        "deductions": r.deductions,
        "net_salary": r.net_salary,
        "status": r.status.value,
    }


def _coerce_status(value) -> PayrollStatus:
    try:
        return PayrollStatus(value)
    except ValueError:
        raise InvalidStatus("Status must be pending or paid")


class PayrollService:
    """Monthly payroll rows; the net salary is recomputed on every write."""

    def __init__(
        self,
        payroll: PayrollRepository,
        users: UserRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._users = users
        self._calculator = calculator or StandardPayrollCalculator()

    def upsert(
        self,
        *,
        user_id: int,
        month: int,
        year: int,
        base_salary: float,
        allowances: float = 0,
        deductions: float = 0,
        status: Optional[PayrollStatus] = None,
    ) -> dict:
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("User not found")

        month = require_month(month)
        base_salary = require_non_negative(base_salary, "Base salary")
        allowances = require_non_negative(allowances or 0, "Allowances")
        deductions = require_non_negative(deductions or 0, "Deductions")
        if status is not None:
            status = _coerce_status(status)

        net = self._calculator.net_salary(base_salary, allowances, deductions)
        self._payroll.upsert(
            user_id=int(user_id),
            month=month,
            year=int(year),
            base_salary=base_salary,
            allowances=allowances,
            deductions=deductions,
            net_salary=net,
            status=status,
        )
        logger.info("Payroll %s/%s for user %s written (net=%.2f)", month, year, user_id, net)

        record = self._payroll.get_for_period(user_id=int(user_id), month=month, year=int(year))
        if not record:
            raise NotFoundError("Payroll record not found")
        return record_to_dict(record)

    def set_status(self, payroll_id: int, status) -> None:
        status = _coerce_status(status)
        if not self._payroll.get_by_id(int(payroll_id)):
            raise NotFoundError("Payroll record not found")
        self._payroll.set_status(payroll_id=int(payroll_id), status=status)
        logger.info("Payroll %s marked %s", payroll_id, status.value)

    def update_fields(
        self,
        payroll_id: int,
        *,
        base_salary: Optional[float] = None,
        allowances: Optional[float] = None,
        deductions: Optional[float] = None,
        status: Optional[PayrollStatus] = None,
    ) -> dict:
        record = self._payroll.get_by_id(int(payroll_id))
        if not record:
            raise NotFoundError("Payroll record not found")

        base = record.base_salary if base_salary is None else require_non_negative(base_salary, "Base salary")
        allow = record.allowances if allowances is None else require_non_negative(allowances, "Allowances")
        deduct = record.deductions if deductions is None else require_non_negative(deductions, "Deductions")

        updated = replace(
            record,
            base_salary=base,
            allowances=allow,
            deductions=deduct,
            net_salary=self._calculator.net_salary(base, allow, deduct),
            status=record.status if status is None else _coerce_status(status),
        )
        self._payroll.update_record(updated)
        logger.info("Payroll %s updated (net=%.2f)", payroll_id, updated.net_salary)
        return record_to_dict(updated)

    def mine(self, user_id: int, *, year: Optional[int] = None, month: Optional[int] = None) -> list[dict]:
        return list(self._payroll.list_for_user(user_id=int(user_id), year=year, month=month))

    def all(
        self,
        *,
        user_id: Optional[int] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> list[dict]:
        return list(self._payroll.list_all(user_id=user_id, year=year, month=month))

    def set_base_salary(self, user_id: int, salary: float) -> None:
        salary = require_non_negative(salary, "Salary")
        if not self._users.get_profile(int(user_id)):
            raise NotFoundError("Employee profile not found")
        self._users.set_salary(int(user_id), salary)
        logger.info("Base salary for user %s set to %.2f", user_id, salary)
