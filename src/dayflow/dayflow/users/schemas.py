from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from ..core.enums import Role


class SignUpRequest(BaseModel):
    employee_id: str = Field(min_length=1, max_length=50)
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=30)
    password: str
    role: Role = Role.EMPLOYEE


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ProfileUpdateRequest(BaseModel):
    """Every field optional; which ones apply depends on the caller's role."""

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    address: Optional[str] = Field(default=None, max_length=255)
    profile_picture: Optional[str] = Field(default=None, max_length=500)
    job_title: Optional[str] = Field(default=None, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    hire_date: Optional[date] = None
    employment_type: Optional[str] = Field(default=None, max_length=50)
    salary: Optional[float] = Field(default=None, ge=0)
