"""Per-date holiday classification."""

from __future__ import annotations

from datetime import date

from lunar_holidays import policy
from lunar_holidays.converter import LunarConverter
from lunar_holidays.domain import (
    EngineSettings,
    HolidayClassification,
    HolidayType,
)
from lunar_holidays.lunar import lunar_holiday_for, marker_for
from lunar_holidays.source import (
    HolidaySource,
    HolidaySourceAdapter,
    KoreanHolidaySource,
    YearCache,
)
from lunar_holidays.substitute import SubstituteRuleEngine


class InvalidDateError(ValueError):
    pass


def to_date(year: int, month: int, day: int) -> date:
    if any(isinstance(value, bool) or not isinstance(value, int) for value in (year, month, day)):
        raise InvalidDateError(f"Date parts must be integers: {year!r}-{month!r}-{day!r}")
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date: {year}-{month}-{day}") from exc


class HolidayEngine:
    """Classification queries consumed by the calendar view.

    One engine owns one per-year holiday cache; the source is fetched at most
    once per year for the lifetime of the engine. ``classify`` lets a
    ``SourceFetchError`` propagate, conversion failures never do.
    """

    def __init__(
        self,
        source: HolidaySource | None = None,
        converter: LunarConverter | None = None,
        settings: EngineSettings | None = None,
        cache: YearCache | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.converter = converter or LunarConverter()
        self.source = source or KoreanHolidaySource(
            self.settings.country, self.settings.language
        )
        self.adapter = HolidaySourceAdapter(self.source, self.converter, cache)
        self.substitutes = SubstituteRuleEngine(
            self.adapter, self.converter, self.settings.lookback_days
        )

    def classify(self, year: int, month: int, day: int) -> HolidayClassification:
        return self.classify_date(to_date(year, month, day))

    def lunar_marker(self, year: int, month: int, day: int) -> str:
        return self.marker_for_date(to_date(year, month, day))

    def marker_for_date(self, day: date) -> str:
        return marker_for(day, self.converter, self.settings.marker_prefix)

    def classify_date(self, day: date) -> HolidayClassification:
        names: list[str] = []
        primary = HolidayType.NONE

        for entry in self.adapter.entries_on(day):
            if entry.name in names:
                continue
            names.append(entry.name)
            if primary is HolidayType.NONE:
                primary = policy.holiday_type_for(entry.name, entry.is_known_substitute)

        lunar = lunar_holiday_for(day, self.converter)
        if lunar and policy.merge_names(names, lunar.name):
            if primary is HolidayType.NONE:
                primary = lunar.type

        if not names:
            substitute = self.substitutes.substitute_for(day)
            if substitute:
                names.append(substitute.name)
                primary = HolidayType.SUBSTITUTE

        return HolidayClassification(
            primary_name=names[0] if names else "",
            all_names=tuple(names),
            type=primary,
        )

    def clear_cache(self) -> None:
        self.adapter.cache.clear()
