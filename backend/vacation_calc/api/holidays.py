from __future__ import annotations

from fastapi import APIRouter

from vacation_calc.api.deps import DateRangeDep, IncludeHolHamoedDep
from vacation_calc.schemas.vacation import HolidayListResponse
from vacation_calc.services import vacation as vacation_service

holidays_router = APIRouter(prefix="/holidays", tags=["holidays"])


@holidays_router.get(
    "",
    response_model=HolidayListResponse,
)
async def list_holidays(
    date_range: DateRangeDep,
    include_hol_hamoed: IncludeHolHamoedDep,
) -> HolidayListResponse:
    """Holidays and half days between two dates."""
    items = vacation_service.enumerate_holidays(date_range, include_hol_hamoed)
    return HolidayListResponse(items=items, total=len(items))
