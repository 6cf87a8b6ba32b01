"""Korean calendar helpers: month days, month grid and zodiac years."""

from __future__ import annotations

import logging
from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import TYPE_CHECKING

from lunar_holidays.domain import HolidayClassification
from lunar_holidays.source import SourceFetchError

if TYPE_CHECKING:
    from lunar_holidays.classifier import HolidayEngine

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class Zodiac:
    name: str
    emoji: str


ZODIAC_ANIMALS: tuple[Zodiac, ...] = (
    Zodiac("Rat", "🐭"),
    Zodiac("Ox", "🐮"),
    Zodiac("Tiger", "🐯"),
    Zodiac("Rabbit", "🐰"),
    Zodiac("Dragon", "🐲"),
    Zodiac("Snake", "🐍"),
    Zodiac("Horse", "🐴"),
    Zodiac("Goat", "🐑"),
    Zodiac("Monkey", "🐵"),
    Zodiac("Rooster", "🐓"),
    Zodiac("Dog", "🐶"),
    Zodiac("Pig", "🐷"),
)
ZODIAC_BASE_YEAR = 1900  # year of the Rat


@dataclass(frozen=True)
class CalendarCell:
    date: date
    is_current_month: bool
    is_weekend: bool
    is_sunday: bool
    is_today: bool = False
    lunar_marker: str = ""
    classification: HolidayClassification = field(default_factory=HolidayClassification)


def zodiac_for(year: int) -> Zodiac:
    return ZODIAC_ANIMALS[(year - ZODIAC_BASE_YEAR) % 12]


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def parse_month(ym: str) -> tuple[int, int]:
    try:
        year_str, month_str = ym.strip().split("-", 1)
        year = int(year_str)
        month = int(month_str)
    except ValueError as exc:
        raise ValueError(f"Month must be in YYYY-MM format: {ym!r}") from exc
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in YYYY-MM format: {ym!r}")
    return year, month


def month_days(ym: str) -> list[date]:
    year, month = parse_month(ym)
    _, last_day = monthrange(year, month)
    return [date(year, month, day) for day in range(1, last_day + 1)]


def _padding_cell(day: date) -> CalendarCell:
    return CalendarCell(
        date=day,
        is_current_month=False,
        is_weekend=is_weekend(day),
        is_sunday=day.weekday() == SUNDAY,
    )


def month_grid(
    engine: HolidayEngine,
    year: int,
    month: int,
    today: date | None = None,
) -> list[list[CalendarCell]]:
    """Lay the month out in Sunday-first weeks of annotated cells.

    Cells of the neighbouring months only pad the first and last week. A cell
    whose classification fails is left unannotated; when the failing year is
    the month's own year, so are all remaining cells.
    """
    days = month_days(f"{year:04d}-{month:02d}")
    today = today or date.today()
    leading = (days[0].weekday() + 1) % 7

    cells: list[CalendarCell] = [
        _padding_cell(days[0] - timedelta(days=offset)) for offset in range(leading, 0, -1)
    ]
    degraded = False
    for day in days:
        marker = ""
        classification = HolidayClassification()
        if not degraded:
            try:
                classification = engine.classify_date(day)
                marker = engine.marker_for_date(day)
            except SourceFetchError as exc:
                logger.warning("Holiday data unavailable for %s: %s", day, exc)
                degraded = exc.year == year
        cells.append(
            CalendarCell(
                date=day,
                is_current_month=True,
                is_weekend=is_weekend(day),
                is_sunday=day.weekday() == SUNDAY,
                is_today=day == today,
                lunar_marker=marker,
                classification=classification,
            )
        )
    trailing = (-len(cells)) % 7
    cells.extend(_padding_cell(days[-1] + timedelta(days=offset)) for offset in range(1, trailing + 1))
    return [cells[index : index + 7] for index in range(0, len(cells), 7)]
