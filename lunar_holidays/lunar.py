"""Lunar month markers and the Lunar New Year / Chuseok holiday spans."""

from __future__ import annotations

from datetime import date

from lunar_holidays import policy
from lunar_holidays.converter import LunarConverter, probe
from lunar_holidays.domain import NO_HOLIDAY, HolidayLabel, HolidayType, LunarDate

CHUSEOK_MONTH = 8
CHUSEOK_DAY = 15


def _is_new_year(lunar: LunarDate | None) -> bool:
    return lunar is not None and lunar.month == 1 and lunar.day == 1


def marker_for(day: date, converter: LunarConverter, prefix: str = "lunar") -> str:
    """Label ``day`` when it is the 1st, 15th or last day of its lunar month."""
    lunar = probe(converter, day)
    if lunar is None:
        return ""
    label = f"{prefix} {lunar.month}.{lunar.day}"
    if lunar.day in (1, 15):
        return label
    # Last day of the month: tomorrow starts a new lunar month.
    following = probe(converter, day, 1)
    if following is not None and following.day == 1:
        return label
    return ""


def lunar_holiday_for(day: date, converter: LunarConverter) -> HolidayLabel:
    lunar = probe(converter, day)
    if _is_new_year(lunar):
        return HolidayLabel(name=policy.LUNAR_NEW_YEAR, type=HolidayType.LUNAR_NEW_YEAR)
    if _is_new_year(probe(converter, day, 1)):
        return HolidayLabel(name=policy.LUNAR_NEW_YEAR_EVE, type=HolidayType.LUNAR_NEW_YEAR)
    if _is_new_year(probe(converter, day, -1)):
        return HolidayLabel(
            name=policy.LUNAR_NEW_YEAR_HOLIDAY, type=HolidayType.LUNAR_NEW_YEAR
        )
    if lunar is not None and lunar.month == CHUSEOK_MONTH:
        if lunar.day == CHUSEOK_DAY:
            return HolidayLabel(name=policy.HARVEST_FESTIVAL, type=HolidayType.CHUSEOK)
        if lunar.day in (CHUSEOK_DAY - 1, CHUSEOK_DAY + 1):
            return HolidayLabel(
                name=policy.HARVEST_FESTIVAL_HOLIDAY, type=HolidayType.CHUSEOK
            )
    return NO_HOLIDAY
