"""
Month-key and calendar-date helpers.

Month keys are fixed-width ``YYYY-MM`` strings and calendar dates are
``YYYY-MM-DD`` strings, so both sort lexicographically in chronological order.
Arithmetic is done on ``datetime.date`` values, which have no time-of-day and
therefore cannot drift across daylight-saving transitions.
"""

import calendar
import re
from datetime import date, timedelta
from decimal import Decimal

MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def to_decimal(value) -> Decimal:
    """Convert an amount to Decimal; missing amounts count as zero."""
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() first so 0.1 stays 0.1 instead of its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def parse_month_key(month_key: str) -> tuple[int, int]:
    """Split ``YYYY-MM`` into (year, month)."""
    match = MONTH_KEY_RE.match(month_key or "")
    if not match:
        raise ValueError(f"Invalid month key: {month_key!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month key: {month_key!r}")
    return year, month


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def parse_date(value: str) -> date:
    """Parse ``YYYY-MM-DD``; raises ValueError on anything else."""
    return date.fromisoformat(value)


def format_iso(d: date) -> str:
    return d.isoformat()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Create a date, clamping day to the last day of the month."""
    return date(year, month, min(day, days_in_month(year, month)))


def month_bounds(key: str) -> tuple[date, date]:
    """Return the first and last day of a month."""
    year, month = parse_month_key(key)
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def shift_month(key: str, months: int) -> str:
    """Move a month key forwards (or backwards for negative ``months``)."""
    year, month = parse_month_key(key)
    index = year * 12 + (month - 1) + months
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def month_range(start_key: str, end_key: str) -> list[str]:
    """Inclusive list of month keys from start to end; empty if start > end."""
    parse_month_key(start_key)
    parse_month_key(end_key)
    keys = []
    cursor = start_key
    while cursor <= end_key:
        keys.append(cursor)
        cursor = shift_month(cursor, 1)
    return keys


def trailing_month_keys(end_key: str, count: int) -> list[str]:
    """The ``count`` months ending with ``end_key``, oldest first."""
    if count <= 0:
        return []
    return month_range(shift_month(end_key, -(count - 1)), end_key)


def date_in_month(date_str: str | None, key: str) -> bool:
    """True when a YYYY-MM-DD string falls in the given month."""
    return bool(date_str) and date_str[:7] == key


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def today() -> date:
    return date.today()


def current_month_key() -> str:
    return month_key(today())
