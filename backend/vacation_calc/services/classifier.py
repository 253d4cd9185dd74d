"""Per-day classification: weekend, half day, holiday or workday."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from vacation_calc.config import get_settings
from vacation_calc.models.enums import DayCategory
from vacation_calc.services.hebrew_calendar import CalendarEvent, HolidayFlag, get_holiday_calendar

if TYPE_CHECKING:
    from collections.abc import Collection
    from datetime import date

logger = logging.getLogger(__name__)

# date.weekday(): Friday is 4, Saturday is 5.
_WEEKEND_WEEKDAYS = frozenset({4, 5})
_EREV_MARKER = "Erev"

_WORK_VALUES: dict[DayCategory, float] = {
    DayCategory.WEEKEND: 0.0,
    DayCategory.HALF_DAY: 0.5,
    DayCategory.HOLIDAY: 0.0,
    DayCategory.WORKDAY: 1.0,
}


@dataclass(frozen=True)
class DayClassification:
    """Category and vacation cost of a single date."""

    date: date
    category: DayCategory
    work_value: float
    events: tuple[CalendarEvent, ...] = ()


# ---------------------------------------------------------------------------
# Event predicates
# ---------------------------------------------------------------------------


def is_half_day_event(event: CalendarEvent, observances: Collection[str] | None = None) -> bool:
    """Holiday eves and the configured half-day observances."""
    if observances is None:
        observances = get_settings().half_day_observances
    return event.has(HolidayFlag.EREV) or _EREV_MARKER in event.desc or event.desc in observances


def is_hol_hamoed_event(event: CalendarEvent) -> bool:
    return event.has(HolidayFlag.CHOL_HAMOED)


def is_major_holiday_event(
    event: CalendarEvent,
    include_hol_hamoed: bool = True,
    observances: Collection[str] | None = None,
) -> bool:
    """Whether an event makes its date a full day off.

    Yom tov days (but not their eves), the closing day of a festival, chol
    hamoed when enabled, and the configured national observances. Anything
    described as an eve is a half day instead.
    """
    if observances is None:
        observances = get_settings().national_observances

    is_major = (
        (event.has(HolidayFlag.CHAG) and not event.has(HolidayFlag.EREV))
        or event.has(HolidayFlag.YOM_TOV_ENDS)
        or (include_hol_hamoed and event.has(HolidayFlag.CHOL_HAMOED))
        or event.desc in observances
    )
    return is_major and _EREV_MARKER not in event.desc


# ---------------------------------------------------------------------------
# Day-level checks
# ---------------------------------------------------------------------------


def get_calendar_events(day: date) -> list[CalendarEvent]:
    """Holiday events for ``day``; a failed lookup counts as no events."""
    try:
        return get_holiday_calendar().events_on(day)
    except Exception:
        logger.warning("Hebrew calendar lookup failed for %s; treating as no holidays", day, exc_info=True)
        return []


def is_weekend(day: date) -> bool:
    """Friday or Saturday."""
    return day.weekday() in _WEEKEND_WEEKDAYS


def is_jewish_half_day(day: date) -> bool:
    observances = get_settings().half_day_observances
    return any(is_half_day_event(event, observances) for event in get_calendar_events(day))


def is_jewish_holiday(day: date, include_hol_hamoed: bool = True) -> bool:
    observances = get_settings().national_observances
    return any(is_major_holiday_event(event, include_hol_hamoed, observances) for event in get_calendar_events(day))


def classify_day(day: date, include_hol_hamoed: bool = True) -> DayClassification:
    """Classify a date. Weekend beats half day, which beats holiday; otherwise a workday."""
    settings = get_settings()
    events = tuple(get_calendar_events(day))

    if is_weekend(day):
        category = DayCategory.WEEKEND
    elif any(is_half_day_event(e, settings.half_day_observances) for e in events):
        category = DayCategory.HALF_DAY
    elif any(is_major_holiday_event(e, include_hol_hamoed, settings.national_observances) for e in events):
        category = DayCategory.HOLIDAY
    else:
        category = DayCategory.WORKDAY

    return DayClassification(date=day, category=category, work_value=_WORK_VALUES[category], events=events)


def get_work_day_value(day: date, include_hol_hamoed: bool = True) -> float:
    """0 for weekends and full holidays, 0.5 for half days, 1 for workdays."""
    return classify_day(day, include_hol_hamoed).work_value


def is_work_day(day: date, include_hol_hamoed: bool = True) -> bool:
    return classify_day(day, include_hol_hamoed).category is DayCategory.WORKDAY
