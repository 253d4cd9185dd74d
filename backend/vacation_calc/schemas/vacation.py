# ruff: noqa: TC003
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from vacation_calc.models.enums import DayCategory


class HolidayInfo(BaseModel):
    """A holiday event that affects the vacation count."""

    model_config = ConfigDict(frozen=True)

    date: date
    name: str
    is_half_day: bool
    is_hol_hamoed: bool


class VacationCalculation(BaseModel):
    """Breakdown of the days in a range and the vacation they cost."""

    model_config = ConfigDict(frozen=True)

    total_days: int = Field(ge=1)
    work_days: int = Field(ge=0)
    weekend_days: int = Field(ge=0)
    holiday_days: int = Field(ge=0)
    half_days: int = Field(ge=0)
    vacation_days_needed: float = Field(ge=0)
    holidays: tuple[HolidayInfo, ...]


class VacationCalculationResponse(VacationCalculation):
    """Calculation with human-readable day counts."""

    total_days_text: str
    vacation_days_text: str


class HolidayListResponse(BaseModel):
    """Holidays falling in a date range."""

    items: list[HolidayInfo]
    total: int


class DayClassificationResponse(BaseModel):
    """How a single date counts against vacation."""

    date: date
    category: DayCategory
    work_value: float
    events: list[str]


class DaysBetweenResponse(BaseModel):
    """Inclusive day count between two dates."""

    days: int
    text: str
