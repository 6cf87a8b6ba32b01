"""Holiday source, per-year cache and the cleaning adapter."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from datetime import date
from typing import Protocol

import holidays

from lunar_holidays import policy
from lunar_holidays.converter import LunarConverter
from lunar_holidays.domain import HolidayFamily, RawHolidayEntry

logger = logging.getLogger(__name__)


class SourceFetchError(RuntimeError):
    def __init__(self, year: int, message: str) -> None:
        super().__init__(f"Cannot fetch holidays for {year}: {message}")
        self.year = year


class HolidaySource(Protocol):
    def holidays_for_year(self, year: int) -> list[RawHolidayEntry]: ...


class KoreanHolidaySource:
    """Public holidays computed by the ``holidays`` package.

    Observed (alternative) days are switched off so that substitute days are
    decided by the engine alone.
    """

    def __init__(self, country: str = "KR", language: str | None = "en_US") -> None:
        self.country = country
        self.language = language

    def holidays_for_year(self, year: int) -> list[RawHolidayEntry]:
        try:
            calendar = holidays.country_holidays(
                self.country,
                years=year,
                language=self.language,
                observed=False,
            )
            entries: list[RawHolidayEntry] = []
            for day in sorted(calendar.keys()):
                for upstream in calendar.get_list(day):
                    name, is_substitute = policy.canonical_name(upstream)
                    entries.append(
                        RawHolidayEntry(
                            name=name,
                            solar_date=day,
                            is_known_substitute=is_substitute,
                        )
                    )
        except Exception as exc:
            raise SourceFetchError(year, str(exc)) from exc
        return entries


class StaticHolidaySource:
    """Holidays supplied up front, keyed by year."""

    def __init__(self, entries: Mapping[int, Iterable[RawHolidayEntry]] | None = None) -> None:
        self._entries = {year: list(items) for year, items in (entries or {}).items()}

    @classmethod
    def from_entries(cls, entries: Iterable[RawHolidayEntry]) -> "StaticHolidaySource":
        by_year: dict[int, list[RawHolidayEntry]] = {}
        for entry in entries:
            by_year.setdefault(entry.solar_date.year, []).append(entry)
        return cls(by_year)

    def holidays_for_year(self, year: int) -> list[RawHolidayEntry]:
        return list(self._entries.get(year, []))


class YearCache:
    """Read-through cache keyed by year.

    A miss takes the lock of that year only, re-checks, and fetches once, so
    concurrent misses on the same year share a single fetch. Failed fetches
    are not stored.
    """

    def __init__(self) -> None:
        self._values: dict[int, tuple[RawHolidayEntry, ...]] = {}
        self._locks: dict[int, threading.Lock] = {}
        self._guard = threading.Lock()
        self.fetch_count = 0

    def __contains__(self, year: int) -> bool:
        return year in self._values

    def get_or_fetch(
        self,
        year: int,
        fetch: Callable[[int], Iterable[RawHolidayEntry]],
    ) -> tuple[RawHolidayEntry, ...]:
        cached = self._values.get(year)
        if cached is not None:
            return cached
        with self._guard:
            lock = self._locks.setdefault(year, threading.Lock())
        with lock:
            cached = self._values.get(year)
            if cached is not None:
                return cached
            with self._guard:
                self.fetch_count += 1
            value = tuple(fetch(year))
            self._values[year] = value
            logger.debug("Cached %d holiday entries for %d", len(value), year)
            return value

    def clear(self) -> None:
        with self._guard:
            self._values.clear()
            self._locks.clear()


class HolidaySourceAdapter:
    def __init__(
        self,
        source: HolidaySource,
        converter: LunarConverter,
        cache: YearCache | None = None,
    ) -> None:
        self.source = source
        self.converter = converter
        self.cache = cache if cache is not None else YearCache()

    def _keep(self, entry: RawHolidayEntry) -> bool:
        if policy.is_retired(entry.name):
            logger.debug("Dropping retired holiday %s on %s", entry.name, entry.solar_date)
            return False
        if policy.family_of(entry.name) is HolidayFamily.CHUSEOK:
            lunar = self.converter.try_to_lunar(entry.solar_date)
            if lunar is not None and lunar.month != 8:
                logger.debug(
                    "Dropping %s on %s (lunar %d.%d)",
                    entry.name,
                    entry.solar_date,
                    lunar.month,
                    lunar.day,
                )
                return False
        return True

    def _fetch_cleaned(self, year: int) -> list[RawHolidayEntry]:
        cleaned: list[RawHolidayEntry] = []
        for entry in self.source.holidays_for_year(year):
            if entry in cleaned or not self._keep(entry):
                continue
            cleaned.append(entry)
        return cleaned

    def cleaned_holidays(self, year: int) -> tuple[RawHolidayEntry, ...]:
        return self.cache.get_or_fetch(year, self._fetch_cleaned)

    def entries_on(self, day: date) -> list[RawHolidayEntry]:
        return [entry for entry in self.cleaned_holidays(day.year) if entry.solar_date == day]

    def holidays_on(self, day: date) -> list[str]:
        names: list[str] = []
        for entry in self.entries_on(day):
            if entry.name not in names:
                names.append(entry.name)
        return names
