"""Text and table views of a month grid."""

from __future__ import annotations

import pandas as pd

from monthgrid.domain import CellState, DayCell, MonthGrid, Settings


def grid_rows(grid: MonthGrid) -> list[dict[str, str]]:
    return [
        {label: cell.label for label, cell in zip(grid.week_day_labels, week)}
        for week in grid.weeks
    ]


def format_cell(cell: DayCell, settings: Settings) -> str:
    match cell.state:
        case CellState.NORMAL:
            template = settings.normal_format
        case CellState.SELECTED:
            template = settings.selected_format
        case CellState.OTHER:
            template = settings.other_format
        case _:
            raise ValueError(f"Unknown cell state: {cell.state!r}")
    return template.format(label=cell.label)


def format_header(grid: MonthGrid, settings: Settings) -> str:
    return settings.header_format.format(year=grid.header.year, month=grid.header.month)


def render_grid(grid: MonthGrid, settings: Settings | None = None) -> str:
    if settings is None:
        settings = Settings()
    width = settings.cell_width

    lines = [format_header(grid, settings)]
    lines.append(" ".join(label.rjust(width) for label in grid.week_day_labels))
    for week in grid.weeks:
        lines.append(" ".join(format_cell(cell, settings).rjust(width) for cell in week))
    return "\n".join(lines)


def render_table(grid: MonthGrid) -> str:
    df = pd.DataFrame(grid_rows(grid), columns=list(grid.week_day_labels))
    return df.to_string(index=False)
