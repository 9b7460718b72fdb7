"""Excel export helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from monthgrid.domain import CellState, DayCell, MonthGrid, Settings
from monthgrid.report import format_header, grid_rows

logger = logging.getLogger(__name__)

GRID_SHEET = "grid"
INFO_SHEET = "info"


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 60)


def _cell_style(cell: DayCell, settings: Settings) -> tuple[Font, PatternFill | None]:
    match cell.state:
        case CellState.NORMAL:
            return Font(color=settings.normal_font), None
        case CellState.SELECTED:
            fill = PatternFill(fill_type="solid", fgColor=settings.selected_fill)
            return Font(color=settings.selected_font, bold=True), fill
        case CellState.OTHER:
            return Font(color=settings.other_font), None
        case _:
            raise ValueError(f"Unknown cell state: {cell.state!r}")


def _style_grid_sheet(worksheet, grid: MonthGrid, settings: Settings) -> None:
    worksheet.freeze_panes = "A2"
    for row_offset, week in enumerate(grid.weeks):
        for col_offset, day_cell in enumerate(week):
            # row 1 holds the week day labels
            target = worksheet.cell(row=row_offset + 2, column=col_offset + 1)
            font, fill = _cell_style(day_cell, settings)
            target.font = font
            if fill is not None:
                target.fill = fill
            target.alignment = Alignment(horizontal="center")
    _auto_fit_columns(worksheet)


def export_month_grid_excel(
    path: str | Path,
    grid: MonthGrid,
    settings: Settings | None = None,
) -> Path:
    if settings is None:
        settings = Settings()
    output_path = Path(path)

    grid_df = pd.DataFrame(grid_rows(grid), columns=list(grid.week_day_labels))
    info_df = pd.DataFrame(
        [
            {
                "year": grid.header.year,
                "month": grid.header.month,
                "label": format_header(grid, settings),
            }
        ]
    )

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        grid_df.to_excel(writer, sheet_name=GRID_SHEET, index=False)
        info_df.to_excel(writer, sheet_name=INFO_SHEET, index=False)

        _style_grid_sheet(writer.sheets[GRID_SHEET], grid, settings)
        _auto_fit_columns(writer.sheets[INFO_SHEET])

    logger.info("Exported %s to %s", grid.header.label, output_path)
    return output_path
