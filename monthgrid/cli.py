"""CLI for printing and exporting month grids."""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path

from monthgrid.calendar_utils import parse_date, parse_month
from monthgrid.cursor import DateCursor
from monthgrid.domain import Settings
from monthgrid.export_excel import export_month_grid_excel
from monthgrid.grid import build_month_grid
from monthgrid.io_settings import SettingsLoadError, load_settings
from monthgrid.logging_config import setup_logging
from monthgrid.report import render_grid, render_table

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Month grid CLI")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--date", help="Reference date in YYYY-MM-DD format")
    target.add_argument("--month", help="Month in YYYY-MM format")
    parser.add_argument("--today", help="Override today's date (YYYY-MM-DD)")
    parser.add_argument("--next", type=int, default=0, help="Move forward N months")
    parser.add_argument("--prev", type=int, default=0, help="Move back N months")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Jump back to today after other navigation",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print plain day numbers as a table",
    )
    parser.add_argument("--out", help="Path to output Excel file")
    parser.add_argument("--config", help="Path to JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _parse_or_exit(parser_fn, value: str) -> date:
    try:
        return parser_fn(value)
    except ValueError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc


def _load_settings_or_exit(path: str | None) -> Settings:
    try:
        return load_settings(path)
    except SettingsLoadError as exc:
        print(f"Errors in settings file {exc.path} (first 5):")
        for issue in exc.issues[:5]:
            print(f"- field {issue['field']}: {issue['message']}")
        raise SystemExit(1) from exc


def build_cursor(args: argparse.Namespace, today: date) -> DateCursor:
    if args.date:
        cursor = DateCursor(_parse_or_exit(parse_date, args.date))
    elif args.month:
        cursor = DateCursor(_parse_or_exit(parse_month, args.month))
    else:
        cursor = DateCursor(today)
    cursor = cursor.shift_months(args.next - args.prev)
    if args.reset:
        cursor = cursor.reset_to_today(today)
    return cursor


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        setup_logging(level=logging.DEBUG)
    settings = _load_settings_or_exit(args.config)
    today = _parse_or_exit(parse_date, args.today) if args.today else date.today()

    cursor = build_cursor(args, today)
    logger.debug("Cursor at %s", cursor.date.isoformat())
    grid = build_month_grid(cursor.date, today)

    if args.table:
        print(render_table(grid))
    else:
        print(render_grid(grid, settings))

    if args.out:
        output_path = export_month_grid_excel(Path(args.out), grid, settings)
        print(f"OK: {output_path}")


if __name__ == "__main__":
    main()
