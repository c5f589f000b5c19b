from __future__ import annotations

from datetime import date

from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import InvalidRange, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_password_complexity(password: str) -> str:
    require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
    has_lower = any(c.islower() for c in password)
    has_upper = any(c.isupper() for c in password)
    has_digit = any(c.isdigit() for c in password)
    if not (has_lower and has_upper and has_digit):
        raise ValidationError("Password must contain uppercase, lowercase, and number")
    return password


def require_month(month: int) -> int:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return int(month)


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or float(value) < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return float(value)


def require_date_range(start: date, end: date, *, max_days: int) -> int:
    """Number of days in [start, end]; rejects inverted or oversized ranges."""
    if start > end:
        raise InvalidRange("Start date must be on or before end date")
    days = (end - start).days + 1
    if days > max_days:
        raise InvalidRange(f"Range must not exceed {max_days} days")
    return days
