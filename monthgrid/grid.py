"""Month grid construction."""

from __future__ import annotations

import logging
from datetime import date

from monthgrid import calendar_utils
from monthgrid.domain import (
    DAYS_PER_WEEK,
    WEEK_DAY_LABELS,
    WEEKS_PER_GRID,
    CellState,
    DayCell,
    MonthGrid,
    MonthHeader,
)

logger = logging.getLogger(__name__)

WEEK_START = 1  # Sunday, in day_of_week numbering


def classify_day(day: date, target_month: int, today: date) -> CellState:
    if calendar_utils.is_same_day(day, today):
        return CellState.SELECTED
    if day.month != target_month:
        return CellState.OTHER
    return CellState.NORMAL


def grid_start(reference: date) -> date:
    """Return the week-start on or before the first day of ``reference``'s month."""
    anchor = calendar_utils.first_of_month(reference)
    first_weekday = calendar_utils.day_of_week(anchor)
    return calendar_utils.add_days(anchor, -(first_weekday - WEEK_START))


def build_month_grid(reference: date, today: date) -> MonthGrid:
    """Build the fixed 6x7 grid for the month containing ``reference``.

    Leading and trailing cells come from the adjacent months and are marked
    ``OTHER``; the cell equal to ``today`` is ``SELECTED`` whichever month it
    falls in. The grid is always six weeks tall.
    """
    anchor = calendar_utils.first_of_month(reference)
    target_month = anchor.month
    start = grid_start(anchor)
    logger.debug(
        "Building grid for %s (start %s, today %s)",
        anchor.isoformat(),
        start.isoformat(),
        today.isoformat(),
    )

    weeks: list[tuple[DayCell, ...]] = []
    for week_index in range(WEEKS_PER_GRID):
        week: list[DayCell] = []
        for day_index in range(DAYS_PER_WEEK):
            day = calendar_utils.add_days(start, week_index * DAYS_PER_WEEK + day_index)
            week.append(
                DayCell(
                    label=str(day.day),
                    state=classify_day(day, target_month, today),
                    date=day,
                )
            )
        weeks.append(tuple(week))

    return MonthGrid(
        header=MonthHeader(year=anchor.year, month=target_month),
        week_day_labels=WEEK_DAY_LABELS,
        weeks=tuple(weeks),
    )
