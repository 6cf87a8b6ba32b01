"""Substitute holiday rules."""

from __future__ import annotations

from datetime import date, timedelta

from lunar_holidays import policy
from lunar_holidays.calendar_kr import SATURDAY, SUNDAY, is_weekend
from lunar_holidays.converter import LunarConverter
from lunar_holidays.domain import NO_HOLIDAY, HolidayLabel, HolidayType, SubstitutionGroup
from lunar_holidays.lunar import lunar_holiday_for
from lunar_holidays.source import HolidaySourceAdapter


SUBSTITUTE = HolidayLabel(name=policy.SUBSTITUTE_HOLIDAY, type=HolidayType.SUBSTITUTE)


class SubstituteRuleEngine:
    """Decides whether a weekday is the substitute for an earlier holiday.

    Looking back from the candidate day, nearest first, each earlier day that
    holds a holiday eligible for substitution is walked forward to its next
    workday. The candidate is a substitute holiday when that walk lands on it.
    """

    def __init__(
        self,
        adapter: HolidaySourceAdapter,
        converter: LunarConverter,
        lookback_days: int = 7,
    ) -> None:
        self.adapter = adapter
        self.converter = converter
        self.lookback_days = lookback_days

    def holidays_at(self, day: date) -> list[str]:
        names = list(self.adapter.holidays_on(day))
        lunar = lunar_holiday_for(day, self.converter)
        if lunar:
            policy.merge_names(names, lunar.name)
        return names

    def is_holiday(self, day: date) -> bool:
        if self.adapter.holidays_on(day):
            return True
        return bool(lunar_holiday_for(day, self.converter))

    def requires_substitute(self, day: date, names: list[str]) -> bool:
        weekday = day.weekday()
        overlapping = len(names) > 1
        for name in names:
            group = policy.substitution_group(name)
            if group is SubstitutionGroup.FULL:
                if weekday in (SATURDAY, SUNDAY) or overlapping:
                    return True
            elif group is SubstitutionGroup.SUNDAY_ONLY:
                if weekday == SUNDAY:
                    return True
                # Lunar span days overlapping each other do not count.
                if overlapping and any(not policy.is_lunar_family(other) for other in names):
                    return True
        return False

    def next_workday(self, day: date) -> date | None:
        """First weekday after ``day`` that is not a holiday, or ``None`` past ``date.max``."""
        current = day
        while True:
            try:
                current += timedelta(days=1)
            except OverflowError:
                return None
            if not is_weekend(current) and not self.is_holiday(current):
                return current

    def substitute_for(self, day: date) -> HolidayLabel:
        if is_weekend(day) or self.is_holiday(day):
            return NO_HOLIDAY
        for days_back in range(1, self.lookback_days + 1):
            try:
                origin = day - timedelta(days=days_back)
            except OverflowError:
                break
            names = self.holidays_at(origin)
            if not names or not self.requires_substitute(origin, names):
                continue
            if self.next_workday(origin) == day:
                return SUBSTITUTE
        return NO_HOLIDAY
