"""Domain models shared by the classification engine."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class HolidayType(str, Enum):
    NORMAL = "normal"
    SUBSTITUTE = "substitute"
    LUNAR_NEW_YEAR = "lunar_new_year"
    CHUSEOK = "chuseok"
    NONE = "none"


class SubstitutionGroup(str, Enum):
    """Whether a named holiday produces a substitute day, and when."""

    FULL = "full"
    SUNDAY_ONLY = "sunday_only"
    NONE = "none"


class HolidayFamily(str, Enum):
    LUNAR_NEW_YEAR = "lunar_new_year"
    CHUSEOK = "chuseok"


class LunarDate(BaseModel):
    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=30)
    is_intercalary: bool = False

    model_config = {"frozen": True}


class RawHolidayEntry(BaseModel):
    name: str
    solar_date: date
    is_known_substitute: bool = False

    model_config = {"frozen": True}

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> str:
        if value is None:
            raise ValueError("Holiday name is required")
        text = str(value).strip()
        if not text:
            raise ValueError("Holiday name is required")
        return text


class HolidayLabel(BaseModel):
    """A single (name, type) answer from one resolver."""

    name: str = ""
    type: HolidayType = HolidayType.NONE

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return bool(self.name)


NO_HOLIDAY = HolidayLabel()


class HolidayClassification(BaseModel):
    primary_name: str = ""
    all_names: tuple[str, ...] = ()
    type: HolidayType = HolidayType.NONE

    model_config = {"frozen": True}

    @property
    def is_holiday(self) -> bool:
        return bool(self.all_names)


class EngineSettings(BaseModel):
    country: str = "KR"
    language: str | None = "en_US"
    lookback_days: int = Field(default=7, ge=1)
    marker_prefix: str = "lunar"
