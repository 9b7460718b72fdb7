"""Immutable month navigation cursor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable

from monthgrid import calendar_utils


@dataclass(frozen=True)
class DateCursor:
    """The month currently displayed, as a reference date.

    Navigation returns a new cursor. Moving by months clamps the day of month
    to the target month's length, so Jan 31 moves to the last day of February.
    """

    date: date

    @classmethod
    def today(cls, clock: Callable[[], date] = date.today) -> "DateCursor":
        return cls(clock())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    def shift_months(self, months: int) -> "DateCursor":
        return DateCursor(calendar_utils.add_months(self.date, months))

    def previous_month(self) -> "DateCursor":
        return self.shift_months(-1)

    def next_month(self) -> "DateCursor":
        return self.shift_months(1)

    def reset_to_today(self, today: date | None = None) -> "DateCursor":
        if today is None:
            return DateCursor.today()
        return DateCursor(today)
