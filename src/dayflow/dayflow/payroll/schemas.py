from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..core.enums import PayrollStatus


class PayrollUpsertRequest(BaseModel):
    user_id: int
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900, le=9999)
    base_salary: float = Field(ge=0)
    allowances: float = Field(default=0, ge=0)
    deductions: float = Field(default=0, ge=0)
    status: Optional[PayrollStatus] = None


class PayrollUpdateRequest(BaseModel):
    base_salary: Optional[float] = Field(default=None, ge=0)
    allowances: Optional[float] = Field(default=None, ge=0)
    deductions: Optional[float] = Field(default=None, ge=0)
    status: Optional[PayrollStatus] = None


class PayrollStatusRequest(BaseModel):
    # Plain string so an unknown value reaches the service as InvalidStatus.
    status: str


class SalaryRequest(BaseModel):
    salary: float = Field(ge=0)
