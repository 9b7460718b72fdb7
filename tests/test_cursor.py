import dataclasses
import unittest
from datetime import date

from monthgrid.cursor import DateCursor


class DateCursorTests(unittest.TestCase):
    def test_next_and_previous_month(self) -> None:
        cursor = DateCursor(date(2024, 8, 15))
        self.assertEqual(cursor.next_month().date, date(2024, 9, 15))
        self.assertEqual(cursor.previous_month().date, date(2024, 7, 15))

    def test_year_rolls_over(self) -> None:
        self.assertEqual(DateCursor(date(2023, 12, 10)).next_month().date, date(2024, 1, 10))
        self.assertEqual(DateCursor(date(2024, 1, 10)).previous_month().date, date(2023, 12, 10))

    def test_navigation_does_not_mutate(self) -> None:
        cursor = DateCursor(date(2024, 8, 15))
        moved = cursor.next_month()
        self.assertIsNot(moved, cursor)
        self.assertEqual(cursor.date, date(2024, 8, 15))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cursor.date = date(2000, 1, 1)

    def test_month_end_is_clamped(self) -> None:
        self.assertEqual(DateCursor(date(2024, 1, 31)).next_month().date, date(2024, 2, 29))
        self.assertEqual(DateCursor(date(2023, 1, 31)).next_month().date, date(2023, 2, 28))
        self.assertEqual(DateCursor(date(2024, 3, 31)).previous_month().date, date(2024, 2, 29))

    def test_round_trip_keeps_month_and_year(self) -> None:
        for start in (date(2024, 1, 31), date(2023, 12, 31), date(2024, 8, 15), date(2024, 2, 29)):
            cursor = DateCursor(start)
            back = cursor.next_month().previous_month()
            self.assertEqual((back.year, back.month), (cursor.year, cursor.month))
        # day may change after clamping
        self.assertEqual(DateCursor(date(2024, 1, 31)).next_month().previous_month().date, date(2024, 1, 29))

    def test_shift_months(self) -> None:
        cursor = DateCursor(date(2024, 5, 20))
        self.assertEqual(cursor.shift_months(0), cursor)
        self.assertEqual(cursor.shift_months(13).date, date(2025, 6, 20))
        self.assertEqual(cursor.shift_months(-5).date, date(2023, 12, 20))

    def test_reset_to_today(self) -> None:
        cursor = DateCursor(date(2020, 3, 1)).next_month().next_month()
        reset = cursor.reset_to_today(date(2024, 8, 15))
        self.assertEqual(reset, DateCursor(date(2024, 8, 15)))

    def test_reset_to_today_without_argument_uses_clock(self) -> None:
        reset = DateCursor(date(2020, 3, 1)).reset_to_today()
        self.assertEqual(reset.date, date.today())

    def test_navigation_past_supported_years_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            DateCursor(date(9999, 12, 1)).next_month()
        with self.assertRaises(ValueError):
            DateCursor(date(1, 1, 31)).previous_month()
        self.assertEqual(DateCursor(date(9999, 11, 30)).next_month().date, date(9999, 12, 30))

    def test_today_uses_injected_clock(self) -> None:
        cursor = DateCursor.today(clock=lambda: date(2024, 2, 29))
        self.assertEqual((cursor.year, cursor.month), (2024, 2))


if __name__ == "__main__":
    unittest.main()
