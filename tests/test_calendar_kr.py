import unittest
from datetime import date

from holiday_data import build_engine, static_source

from lunar_holidays import calendar_kr, policy
from lunar_holidays.classifier import HolidayEngine
from lunar_holidays.domain import HolidayType, RawHolidayEntry
from lunar_holidays.source import SourceFetchError


class FailingSource:
    def holidays_for_year(self, year: int) -> list[RawHolidayEntry]:
        raise SourceFetchError(year, "upstream unavailable")


class PartialSource:
    def __init__(self, failing_year: int) -> None:
        self.failing_year = failing_year
        self.source = static_source()

    def holidays_for_year(self, year: int) -> list[RawHolidayEntry]:
        if year == self.failing_year:
            raise SourceFetchError(year, "upstream unavailable")
        return self.source.holidays_for_year(year)


class CalendarKRTests(unittest.TestCase):
    def test_month_days_length(self) -> None:
        days = calendar_kr.month_days("2026-02")
        self.assertEqual(len(days), 28)
        self.assertEqual(days[0], date(2026, 2, 1))
        self.assertEqual(days[-1], date(2026, 2, 28))

    def test_month_days_december(self) -> None:
        days = calendar_kr.month_days("2025-12")
        self.assertEqual(len(days), 31)
        self.assertEqual(days[-1], date(2025, 12, 31))

    def test_parse_month_rejects_garbage(self) -> None:
        for value in ("2025", "2025-13", "abcd-01", ""):
            with self.assertRaises(ValueError):
                calendar_kr.parse_month(value)

    def test_weekend(self) -> None:
        self.assertTrue(calendar_kr.is_weekend(date(2026, 1, 3)))  # Saturday
        self.assertFalse(calendar_kr.is_weekend(date(2026, 1, 5)))  # Monday

    def test_zodiac(self) -> None:
        self.assertEqual(calendar_kr.zodiac_for(1900).name, "Rat")
        self.assertEqual(calendar_kr.zodiac_for(2025).name, "Snake")
        self.assertEqual(calendar_kr.zodiac_for(2026).name, "Horse")
        self.assertEqual(calendar_kr.zodiac_for(1899).name, "Pig")


class MonthGridTests(unittest.TestCase):
    def test_october_2025_layout(self) -> None:
        weeks = calendar_kr.month_grid(build_engine(), 2025, 10, today=date(2025, 10, 9))
        self.assertEqual(len(weeks), 5)
        self.assertTrue(all(len(week) == 7 for week in weeks))
        self.assertEqual(weeks[0][0].date, date(2025, 9, 28))
        self.assertFalse(weeks[0][0].is_current_month)
        self.assertTrue(weeks[0][0].is_sunday)
        self.assertEqual(weeks[0][3].date, date(2025, 10, 1))
        self.assertEqual(weeks[-1][-1].date, date(2025, 11, 1))
        self.assertFalse(weeks[-1][-1].is_current_month)
        self.assertEqual(weeks[-1][-1].classification.all_names, ())

    def test_october_2025_annotations(self) -> None:
        weeks = calendar_kr.month_grid(build_engine(), 2025, 10, today=date(2025, 10, 9))
        cells = {cell.date: cell for week in weeks for cell in week if cell.is_current_month}
        self.assertEqual(len(cells), 31)
        self.assertIs(cells[date(2025, 10, 6)].classification.type, HolidayType.CHUSEOK)
        self.assertEqual(cells[date(2025, 10, 6)].lunar_marker, "lunar 8.15")
        self.assertIs(cells[date(2025, 10, 8)].classification.type, HolidayType.SUBSTITUTE)
        self.assertEqual(
            cells[date(2025, 10, 9)].classification.primary_name, policy.HANGUL_DAY
        )
        self.assertTrue(cells[date(2025, 10, 9)].is_today)
        self.assertFalse(cells[date(2025, 10, 8)].is_today)

    def test_february_2026_starts_on_sunday(self) -> None:
        weeks = calendar_kr.month_grid(build_engine(), 2026, 2, today=date(2026, 1, 1))
        self.assertEqual(len(weeks), 4)
        self.assertTrue(all(cell.is_current_month for week in weeks for cell in week))

    def test_source_failure_leaves_cells_unannotated(self) -> None:
        engine = HolidayEngine(source=FailingSource())
        with self.assertLogs("lunar_holidays.calendar_kr", level="WARNING"):
            weeks = calendar_kr.month_grid(engine, 2025, 10, today=date(2025, 10, 1))
        for week in weeks:
            for cell in week:
                self.assertEqual(cell.classification.all_names, ())
                self.assertEqual(cell.lunar_marker, "")

    def test_previous_year_failure_only_blanks_affected_cells(self) -> None:
        engine = HolidayEngine(source=PartialSource(failing_year=2024))
        with self.assertLogs("lunar_holidays.calendar_kr", level="WARNING"):
            weeks = calendar_kr.month_grid(engine, 2025, 1, today=date(2025, 1, 1))
        cells = {cell.date: cell for week in weeks for cell in week if cell.is_current_month}
        self.assertEqual(cells[date(2025, 1, 2)].classification.all_names, ())
        self.assertIs(
            cells[date(2025, 1, 29)].classification.type, HolidayType.LUNAR_NEW_YEAR
        )
        self.assertEqual(cells[date(2025, 1, 29)].lunar_marker, "lunar 1.1")


if __name__ == "__main__":
    unittest.main()
