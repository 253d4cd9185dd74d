from __future__ import annotations

from fastapi import APIRouter, Query

from vacation_calc.api.deps import DateRangeDep, IncludeHolHamoedDep, LanguageDep
from vacation_calc.exceptions import InvalidDateRangeError
from vacation_calc.schemas.vacation import DaysBetweenResponse, VacationCalculationResponse
from vacation_calc.services import vacation as vacation_service
from vacation_calc.services.date_range import calculate_days_between
from vacation_calc.services.formatting import format_days

vacation_router = APIRouter(tags=["vacation"])


@vacation_router.get(
    "/vacation-days",
    response_model=VacationCalculationResponse,
)
async def get_vacation_days(
    date_range: DateRangeDep,
    include_hol_hamoed: IncludeHolHamoedDep,
    lang: LanguageDep,
) -> VacationCalculationResponse:
    """Vacation days needed between two dates, with a per-category breakdown."""
    result = vacation_service.aggregate(date_range, include_hol_hamoed)

    return VacationCalculationResponse(
        **result.model_dump(),
        total_days_text=format_days(result.total_days, lang),
        vacation_days_text=format_days(result.vacation_days_needed, lang),
    )


@vacation_router.get(
    "/days-between",
    response_model=DaysBetweenResponse,
)
async def get_days_between(
    lang: LanguageDep,
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
) -> DaysBetweenResponse:
    """Inclusive calendar day count between two dates."""
    days = calculate_days_between(start_date, end_date)
    if days is None:
        raise InvalidDateRangeError()
    return DaysBetweenResponse(days=days, text=format_days(days, lang))
