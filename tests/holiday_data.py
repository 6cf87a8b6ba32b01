"""Korean public holidays of 2025 and 2026 as an upstream source reports them.

No substitute days, plus the stale Constitution Day entry the source still
carries.
"""

from __future__ import annotations

from datetime import date

from lunar_holidays import policy
from lunar_holidays.classifier import HolidayEngine
from lunar_holidays.domain import RawHolidayEntry
from lunar_holidays.source import StaticHolidaySource


def _entry(name: str, year: int, month: int, day: int, substitute: bool = False) -> RawHolidayEntry:
    return RawHolidayEntry(
        name=name, solar_date=date(year, month, day), is_known_substitute=substitute
    )


HOLIDAYS_2025 = [
    _entry(policy.NEW_YEARS_DAY, 2025, 1, 1),
    _entry(policy.LUNAR_NEW_YEAR_EVE, 2025, 1, 28),
    _entry(policy.LUNAR_NEW_YEAR, 2025, 1, 29),
    _entry(policy.LUNAR_NEW_YEAR_HOLIDAY, 2025, 1, 30),
    _entry(policy.INDEPENDENCE_MOVEMENT_DAY, 2025, 3, 1),
    _entry(policy.CHILDRENS_DAY, 2025, 5, 5),
    _entry(policy.BUDDHAS_BIRTHDAY, 2025, 5, 5),
    _entry(policy.MEMORIAL_DAY, 2025, 6, 6),
    _entry(policy.CONSTITUTION_DAY, 2025, 7, 17),
    _entry(policy.LIBERATION_DAY, 2025, 8, 15),
    _entry(policy.NATIONAL_FOUNDATION_DAY, 2025, 10, 3),
    _entry(policy.HARVEST_FESTIVAL_HOLIDAY, 2025, 10, 5),
    _entry(policy.HARVEST_FESTIVAL, 2025, 10, 6),
    _entry(policy.HARVEST_FESTIVAL_HOLIDAY, 2025, 10, 7),
    _entry(policy.HANGUL_DAY, 2025, 10, 9),
    # Misclassified: 2025-10-25 falls in the 9th lunar month.
    _entry(policy.HARVEST_FESTIVAL, 2025, 10, 25),
    _entry(policy.CHRISTMAS_DAY, 2025, 12, 25),
]

HOLIDAYS_2026 = [
    _entry(policy.NEW_YEARS_DAY, 2026, 1, 1),
    _entry(policy.LUNAR_NEW_YEAR_EVE, 2026, 2, 16),
    _entry(policy.LUNAR_NEW_YEAR, 2026, 2, 17),
    _entry(policy.LUNAR_NEW_YEAR_HOLIDAY, 2026, 2, 18),
    _entry(policy.INDEPENDENCE_MOVEMENT_DAY, 2026, 3, 1),
    _entry(policy.CHILDRENS_DAY, 2026, 5, 5),
    _entry(policy.BUDDHAS_BIRTHDAY, 2026, 5, 24),
    _entry(policy.MEMORIAL_DAY, 2026, 6, 6),
    _entry(policy.CONSTITUTION_DAY, 2026, 7, 17),
    _entry(policy.LIBERATION_DAY, 2026, 8, 15),
    _entry(policy.HARVEST_FESTIVAL_HOLIDAY, 2026, 9, 24),
    _entry(policy.HARVEST_FESTIVAL, 2026, 9, 25),
    _entry(policy.HARVEST_FESTIVAL_HOLIDAY, 2026, 9, 26),
    _entry(policy.NATIONAL_FOUNDATION_DAY, 2026, 10, 3),
    _entry(policy.HANGUL_DAY, 2026, 10, 9),
    _entry(policy.CHRISTMAS_DAY, 2026, 12, 25),
]


def static_source(*extra: RawHolidayEntry) -> StaticHolidaySource:
    return StaticHolidaySource.from_entries([*HOLIDAYS_2025, *HOLIDAYS_2026, *extra])


def build_engine(*extra: RawHolidayEntry) -> HolidayEngine:
    return HolidayEngine(source=static_source(*extra))
