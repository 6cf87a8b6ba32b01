"""Korean public holiday policy tables.

Every rule that depends on a holiday's name lives here as data: which
substitution group a holiday belongs to, which lunar family it is part of,
which upstream entries are stale, and how upstream names map onto the
canonical names used by the engine.
"""

from __future__ import annotations

from lunar_holidays.domain import HolidayFamily, HolidayType, SubstitutionGroup

NEW_YEARS_DAY = "New Year's Day"
LUNAR_NEW_YEAR = "Lunar New Year"
LUNAR_NEW_YEAR_EVE = "Lunar New Year Eve"
LUNAR_NEW_YEAR_HOLIDAY = "Lunar New Year Holiday"
INDEPENDENCE_MOVEMENT_DAY = "Independence Movement Day"
CHILDRENS_DAY = "Children's Day"
BUDDHAS_BIRTHDAY = "Buddha's Birthday"
MEMORIAL_DAY = "Memorial Day"
LIBERATION_DAY = "Liberation Day"
HARVEST_FESTIVAL = "Harvest Festival"
HARVEST_FESTIVAL_HOLIDAY = "Harvest Festival Holiday"
NATIONAL_FOUNDATION_DAY = "National Foundation Day"
HANGUL_DAY = "Hangul Day"
CHRISTMAS_DAY = "Christmas Day"
LABOR_DAY = "Labor Day"
CONSTITUTION_DAY = "Constitution Day"
SUBSTITUTE_HOLIDAY = "Substitute Holiday"

SUBSTITUTION_GROUPS: dict[str, SubstitutionGroup] = {
    INDEPENDENCE_MOVEMENT_DAY: SubstitutionGroup.FULL,
    CHILDRENS_DAY: SubstitutionGroup.FULL,
    LIBERATION_DAY: SubstitutionGroup.FULL,
    NATIONAL_FOUNDATION_DAY: SubstitutionGroup.FULL,
    HANGUL_DAY: SubstitutionGroup.FULL,
    LUNAR_NEW_YEAR: SubstitutionGroup.SUNDAY_ONLY,
    LUNAR_NEW_YEAR_EVE: SubstitutionGroup.SUNDAY_ONLY,
    LUNAR_NEW_YEAR_HOLIDAY: SubstitutionGroup.SUNDAY_ONLY,
    HARVEST_FESTIVAL: SubstitutionGroup.SUNDAY_ONLY,
    HARVEST_FESTIVAL_HOLIDAY: SubstitutionGroup.SUNDAY_ONLY,
    NEW_YEARS_DAY: SubstitutionGroup.NONE,
    BUDDHAS_BIRTHDAY: SubstitutionGroup.NONE,
    MEMORIAL_DAY: SubstitutionGroup.NONE,
    CHRISTMAS_DAY: SubstitutionGroup.NONE,
    LABOR_DAY: SubstitutionGroup.NONE,
    SUBSTITUTE_HOLIDAY: SubstitutionGroup.NONE,
}

FAMILIES: dict[str, HolidayFamily] = {
    LUNAR_NEW_YEAR: HolidayFamily.LUNAR_NEW_YEAR,
    LUNAR_NEW_YEAR_EVE: HolidayFamily.LUNAR_NEW_YEAR,
    LUNAR_NEW_YEAR_HOLIDAY: HolidayFamily.LUNAR_NEW_YEAR,
    HARVEST_FESTIVAL: HolidayFamily.CHUSEOK,
    HARVEST_FESTIVAL_HOLIDAY: HolidayFamily.CHUSEOK,
}

FAMILY_TYPES: dict[HolidayFamily, HolidayType] = {
    HolidayFamily.LUNAR_NEW_YEAR: HolidayType.LUNAR_NEW_YEAR,
    HolidayFamily.CHUSEOK: HolidayType.CHUSEOK,
}

# Constitution Day has not been a public holiday since 2008.
RETIRED_HOLIDAYS: frozenset[str] = frozenset({CONSTITUTION_DAY})

# Names reported by the ``holidays`` package (en_US and ko) -> canonical names.
UPSTREAM_NAMES: dict[str, str] = {
    "New Year's Day": NEW_YEARS_DAY,
    "The day preceding Korean New Year": LUNAR_NEW_YEAR_EVE,
    "Korean New Year": LUNAR_NEW_YEAR,
    "The second day of Korean New Year": LUNAR_NEW_YEAR_HOLIDAY,
    "Independence Movement Day": INDEPENDENCE_MOVEMENT_DAY,
    "Children's Day": CHILDRENS_DAY,
    "Buddha's Birthday": BUDDHAS_BIRTHDAY,
    "Memorial Day": MEMORIAL_DAY,
    "Constitution Day": CONSTITUTION_DAY,
    "Liberation Day": LIBERATION_DAY,
    "The day preceding Chuseok": HARVEST_FESTIVAL_HOLIDAY,
    "Chuseok": HARVEST_FESTIVAL,
    "The second day of Chuseok": HARVEST_FESTIVAL_HOLIDAY,
    "National Foundation Day": NATIONAL_FOUNDATION_DAY,
    "Hangul Day": HANGUL_DAY,
    "Christmas Day": CHRISTMAS_DAY,
    "Labor Day": LABOR_DAY,
    "Workers' Day": LABOR_DAY,
    "신정연휴": NEW_YEARS_DAY,
    "신정": NEW_YEARS_DAY,
    "설날 전날": LUNAR_NEW_YEAR_EVE,
    "설날": LUNAR_NEW_YEAR,
    "설날 다음날": LUNAR_NEW_YEAR_HOLIDAY,
    "삼일절": INDEPENDENCE_MOVEMENT_DAY,
    "어린이날": CHILDRENS_DAY,
    "부처님오신날": BUDDHAS_BIRTHDAY,
    "석가탄신일": BUDDHAS_BIRTHDAY,
    "현충일": MEMORIAL_DAY,
    "제헌절": CONSTITUTION_DAY,
    "광복절": LIBERATION_DAY,
    "추석 전날": HARVEST_FESTIVAL_HOLIDAY,
    "추석": HARVEST_FESTIVAL,
    "추석 다음날": HARVEST_FESTIVAL_HOLIDAY,
    "개천절": NATIONAL_FOUNDATION_DAY,
    "한글날": HANGUL_DAY,
    "기독탄신일": CHRISTMAS_DAY,
    "근로자의 날": LABOR_DAY,
}

SUBSTITUTE_MARKERS = ("alternative holiday", "substitute holiday", "대체공휴일", "대체 휴일")


def canonical_name(upstream: str) -> tuple[str, bool]:
    """Map an upstream name to ``(canonical name, is_known_substitute)``."""
    text = upstream.strip()
    folded = text.casefold()
    if any(folded.startswith(marker) for marker in SUBSTITUTE_MARKERS):
        return SUBSTITUTE_HOLIDAY, True
    return UPSTREAM_NAMES.get(text, text), False


def substitution_group(name: str) -> SubstitutionGroup:
    return SUBSTITUTION_GROUPS.get(name, SubstitutionGroup.NONE)


def family_of(name: str) -> HolidayFamily | None:
    return FAMILIES.get(name)


def is_lunar_family(name: str) -> bool:
    return name in FAMILIES


def same_occurrence(first: str, second: str) -> bool:
    """True when two names on one date refer to the same holiday occurrence."""
    if first == second:
        return True
    family = family_of(first)
    return family is not None and family == family_of(second)


def is_retired(name: str) -> bool:
    return name in RETIRED_HOLIDAYS


def holiday_type_for(name: str, is_known_substitute: bool = False) -> HolidayType:
    if is_known_substitute:
        return HolidayType.SUBSTITUTE
    family = family_of(name)
    if family is not None:
        return FAMILY_TYPES[family]
    return HolidayType.NORMAL


def merge_names(names: list[str], candidate: str) -> bool:
    """Append ``candidate`` unless an equivalent name is already present."""
    if any(same_occurrence(existing, candidate) for existing in names):
        return False
    names.append(candidate)
    return True
