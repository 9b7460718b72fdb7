"""Date arithmetic helpers."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def day_of_week(day: date) -> int:
    """Return the day of the week with 1=Sunday .. 7=Saturday."""
    return day.isoweekday() % 7 + 1


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def is_same_day(left: date, right: date) -> bool:
    # datetime is a date subclass, so only the calendar fields are compared
    return (
        left.year == right.year
        and left.month == right.month
        and left.day == right.day
    )


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    index = day.year * 12 + (day.month - 1) + months
    year, month_index = divmod(index, 12)
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def parse_month(ym: str) -> date:
    text = str(ym).strip()
    try:
        year_str, month_str = text.split("-", 1)
        return date(int(year_str), int(month_str), 1)
    except ValueError as exc:
        raise ValueError(f"Invalid month (YYYY-MM): {ym!r}") from exc


def parse_date(value: str) -> date:
    text = str(value).strip()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValueError(f"Invalid date (YYYY-MM-DD): {value!r}") from exc
