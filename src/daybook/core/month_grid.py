"""Pure month-calendar arithmetic - no I/O dependencies."""

import calendar
from datetime import date, timedelta

from .headings import WEEKDAY_NAMES, weekday_number


def shift_month(day: date, months: int) -> date:
    """Move by whole months, clamping the day to the target month's length."""
    index = day.year * 12 + day.month - 1 + months
    year, month = divmod(index, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def month_weeks(day: date) -> list[list[date]]:
    """
    Weeks covering day's month, Sunday first.

    Leading and trailing days from adjacent months fill the first and
    last weeks so every row has seven dates.
    """
    first = day.replace(day=1)
    last = shift_month(first, 1) - timedelta(days=1)
    current = first - timedelta(days=weekday_number(first))

    weeks = []
    while current <= last:
        weeks.append([current + timedelta(days=i) for i in range(7)])
        current += timedelta(days=7)
    return weeks


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def weekday_header() -> list[str]:
    """Short weekday names in grid order."""
    return [name[:2] for name in WEEKDAY_NAMES]
