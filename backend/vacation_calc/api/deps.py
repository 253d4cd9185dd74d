# ruff: noqa: B008, TC001
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query

from vacation_calc.config import Settings, get_settings
from vacation_calc.exceptions import DateRangeTooLongError, InvalidDateRangeError
from vacation_calc.models.enums import DisplayLanguage
from vacation_calc.services.date_range import DateRange, validate_date_range

SettingsDep = Annotated[Settings, Depends(get_settings)]


async def resolve_include_hol_hamoed(
    settings: SettingsDep,
    include_hol_hamoed: bool | None = Query(default=None),
) -> bool:
    """Use the query flag when given, else the configured default."""
    if include_hol_hamoed is None:
        return settings.include_hol_hamoed_default
    return include_hol_hamoed


IncludeHolHamoedDep = Annotated[bool, Depends(resolve_include_hol_hamoed)]


async def resolve_language(
    settings: SettingsDep,
    lang: DisplayLanguage | None = Query(default=None),
) -> DisplayLanguage:
    """Use the requested display language when given, else the configured default."""
    if lang is None:
        return DisplayLanguage(settings.default_language)
    return lang


LanguageDep = Annotated[DisplayLanguage, Depends(resolve_language)]


async def resolve_date_range(
    settings: SettingsDep,
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
) -> DateRange:
    """Parse the range query and reject ranges longer than the configured cap."""
    date_range = validate_date_range(start_date, end_date)
    if date_range is None:
        raise InvalidDateRangeError()
    if date_range.days > settings.max_range_days:
        raise DateRangeTooLongError(date_range.days, settings.max_range_days)
    return date_range


DateRangeDep = Annotated[DateRange, Depends(resolve_date_range)]
