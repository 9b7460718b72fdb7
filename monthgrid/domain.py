"""Domain models for the month grid."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

WEEK_DAY_LABELS: tuple[str, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
WEEKS_PER_GRID = 6
DAYS_PER_WEEK = 7


class CellState(str, Enum):
    NORMAL = "NORMAL"
    SELECTED = "SELECTED"
    OTHER = "OTHER"


class DayCell(BaseModel):
    label: str
    state: CellState
    date: date

    model_config = {"frozen": True}


class MonthHeader(BaseModel):
    year: int
    month: int = Field(ge=1, le=12)

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"{self.year} / {self.month}"


class MonthGrid(BaseModel):
    header: MonthHeader
    week_day_labels: tuple[str, ...] = WEEK_DAY_LABELS
    weeks: tuple[tuple[DayCell, ...], ...]

    model_config = {"frozen": True}

    @field_validator("week_day_labels")
    @classmethod
    def _validate_labels(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if tuple(value) != WEEK_DAY_LABELS:
            raise ValueError(f"Week day labels must be {WEEK_DAY_LABELS}, got {value!r}")
        return value

    @model_validator(mode="after")
    def _validate_shape(self) -> "MonthGrid":
        if len(self.weeks) != WEEKS_PER_GRID:
            raise ValueError(f"Grid must have {WEEKS_PER_GRID} weeks, got {len(self.weeks)}")
        for index, week in enumerate(self.weeks):
            if len(week) != DAYS_PER_WEEK:
                raise ValueError(
                    f"Week {index} must have {DAYS_PER_WEEK} days, got {len(week)}"
                )
        days = self.dates()
        for previous, current in zip(days, days[1:]):
            if current - previous != timedelta(days=1):
                raise ValueError(f"Grid dates are not consecutive at {current.isoformat()}")
        return self

    def cells(self) -> list[DayCell]:
        return [cell for week in self.weeks for cell in week]

    def dates(self) -> list[date]:
        return [cell.date for cell in self.cells()]

    def selected_cell(self) -> DayCell | None:
        return next(
            (cell for cell in self.cells() if cell.state == CellState.SELECTED),
            None,
        )


class Settings(BaseModel):
    header_format: str = "{year} / {month}"
    normal_format: str = "{label}"
    selected_format: str = "[{label}]"
    other_format: str = "({label})"
    cell_width: int = Field(default=4, ge=2)
    normal_font: str = "000000"
    selected_font: str = "FFFFFF"
    selected_fill: str = "0000FF"
    other_font: str = "C0C0C0"

    model_config = {
        "extra": "ignore",
    }

    @field_validator("normal_font", "selected_font", "selected_fill", "other_font", mode="before")
    @classmethod
    def _normalize_color(cls, value: object) -> str:
        text = str(value).strip().lstrip("#").upper()
        if len(text) != 6 or any(char not in "0123456789ABCDEF" for char in text):
            raise ValueError(f"Invalid colour (RRGGBB): {value!r}")
        return text

    @field_validator("header_format")
    @classmethod
    def _validate_header_format(cls, value: str) -> str:
        try:
            value.format(year=2000, month=1)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise ValueError(f"header_format may only use {{year}} and {{month}}: {value!r}") from exc
        return value

    @field_validator("normal_format", "selected_format", "other_format")
    @classmethod
    def _validate_cell_format(cls, value: str) -> str:
        try:
            value.format(label="1")
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise ValueError(f"Cell format may only use {{label}}: {value!r}") from exc
        return value
