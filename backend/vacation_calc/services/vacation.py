"""Vacation-day aggregation over a date range."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vacation_calc.config import get_settings
from vacation_calc.models.enums import DayCategory
from vacation_calc.schemas.vacation import HolidayInfo, VacationCalculation
from vacation_calc.services.classifier import (
    classify_day,
    get_calendar_events,
    is_half_day_event,
    is_hol_hamoed_event,
    is_major_holiday_event,
)
from vacation_calc.services.date_range import validate_date_range

if TYPE_CHECKING:
    from vacation_calc.services.date_range import DateRange

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Holiday enumeration
# ---------------------------------------------------------------------------


def enumerate_holidays(date_range: DateRange, include_hol_hamoed: bool = True) -> list[HolidayInfo]:
    """List the half-day and full-holiday events in a range, ascending by date.

    Every qualifying event is listed, so a date with two events appears twice.
    Dates whose calendar lookup fails contribute nothing.
    """
    settings = get_settings()
    holidays: list[HolidayInfo] = []

    for day in date_range.iter_dates():
        for event in get_calendar_events(day):
            is_half_day = is_half_day_event(event, settings.half_day_observances)
            if not is_half_day and not is_major_holiday_event(
                event, include_hol_hamoed, settings.national_observances
            ):
                continue
            holidays.append(
                HolidayInfo(
                    date=day,
                    name=event.desc,
                    is_half_day=is_half_day,
                    is_hol_hamoed=is_hol_hamoed_event(event),
                )
            )

    return holidays


def get_jewish_holidays_in_range(
    start_date: str | None,
    end_date: str | None,
    include_hol_hamoed: bool = True,
) -> list[HolidayInfo]:
    """Holidays between two date strings; empty when the range is invalid."""
    date_range = validate_date_range(start_date, end_date)
    if date_range is None:
        return []
    return enumerate_holidays(date_range, include_hol_hamoed)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def aggregate(date_range: DateRange, include_hol_hamoed: bool = True) -> VacationCalculation:
    """Classify every date in a validated range and total the vacation cost."""
    counts = dict.fromkeys(DayCategory, 0)
    vacation_days_needed = 0.0

    for day in date_range.iter_dates():
        classification = classify_day(day, include_hol_hamoed)
        counts[classification.category] += 1
        vacation_days_needed += classification.work_value

    holidays = enumerate_holidays(date_range, include_hol_hamoed)

    logger.debug(
        "Vacation for %s..%s: %s days needed over %d days",
        date_range.start,
        date_range.end,
        vacation_days_needed,
        date_range.days,
    )

    return VacationCalculation(
        total_days=date_range.days,
        work_days=counts[DayCategory.WORKDAY],
        weekend_days=counts[DayCategory.WEEKEND],
        holiday_days=counts[DayCategory.HOLIDAY],
        half_days=counts[DayCategory.HALF_DAY],
        vacation_days_needed=vacation_days_needed,
        holidays=tuple(holidays),
    )


def calculate_vacation_days_detailed(
    start_date: str | None,
    end_date: str | None,
    include_hol_hamoed: bool = True,
) -> VacationCalculation | None:
    """Full vacation breakdown between two date strings, or None if the range is invalid."""
    date_range = validate_date_range(start_date, end_date)
    if date_range is None:
        return None
    return aggregate(date_range, include_hol_hamoed)


def calculate_vacation_days(
    start_date: str | None,
    end_date: str | None,
    include_hol_hamoed: bool = True,
) -> float | None:
    """Vacation days needed between two date strings, or None if the range is invalid."""
    result = calculate_vacation_days_detailed(start_date, end_date, include_hol_hamoed)
    if result is None:
        return None
    return result.vacation_days_needed
