from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return parse_iso_date(value)


def parse_clock(value: Optional[str]) -> Optional[time]:
    """Parse a HH:MM (or HH:MM:SS) wall-clock string; blank means no time."""
    v = (value or "").strip()
    if not v:
        return None
    for fmt in (TIME_FORMAT, "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time {value!r} (expected HH:MM)")


def format_clock(value: Optional[time]) -> Optional[str]:
    return value.strftime(TIME_FORMAT) if value else None


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(DATE_FORMAT) if value else None


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day in [start, end], inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def window_end(start: date, days: int) -> date:
    """Last day of a ``days``-long window starting at ``start``."""
    try:
        return start + timedelta(days=days - 1)
    except OverflowError:
        raise ValidationError(f"Date {start.isoformat()} is too late for a {days}-day window")
