"""Solar/lunar date conversion backed by korean-lunar-calendar."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from korean_lunar_calendar import KoreanLunarCalendar

from lunar_holidays.domain import LunarDate

logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    def __init__(self, message: str, year: int, month: int, day: int) -> None:
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day


class LunarConverter:
    """Thin wrapper over ``KoreanLunarCalendar``.

    The underlying tables cover solar dates from 1000-02-13 to 2050-12-31.
    ``to_lunar`` raises :class:`ConversionError` outside that range, while
    ``try_to_lunar`` returns ``None`` so callers probing neighbouring days can
    branch on the result instead of catching.
    """

    def to_lunar(self, day: date) -> LunarDate:
        calendar = KoreanLunarCalendar()
        if not calendar.setSolarDate(day.year, day.month, day.day):
            raise ConversionError(
                f"Solar date out of supported range: {day.isoformat()}",
                day.year,
                day.month,
                day.day,
            )
        return LunarDate(
            year=calendar.lunarYear,
            month=calendar.lunarMonth,
            day=calendar.lunarDay,
            is_intercalary=bool(calendar.isIntercalation),
        )

    def try_to_lunar(self, day: date) -> LunarDate | None:
        try:
            return self.to_lunar(day)
        except ConversionError as exc:
            logger.debug("No lunar date for %s: %s", day, exc)
            return None

    def to_solar(self, year: int, month: int, day: int, intercalary: bool = False) -> date:
        calendar = KoreanLunarCalendar()
        if not calendar.setLunarDate(year, month, day, intercalary):
            raise ConversionError(
                f"Lunar date out of supported range: {year}-{month:02d}-{day:02d}",
                year,
                month,
                day,
            )
        return date(calendar.solarYear, calendar.solarMonth, calendar.solarDay)


def probe(converter: LunarConverter, day: date, offset: int = 0) -> LunarDate | None:
    """Lunar date of ``day + offset`` days, or ``None`` when it cannot be computed."""
    try:
        target = day + timedelta(days=offset)
    except OverflowError:
        return None
    return converter.try_to_lunar(target)
