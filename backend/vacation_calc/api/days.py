# ruff: noqa: TC003
from __future__ import annotations

from datetime import date

from fastapi import APIRouter

from vacation_calc.api.deps import IncludeHolHamoedDep
from vacation_calc.schemas.vacation import DayClassificationResponse
from vacation_calc.services.classifier import classify_day

days_router = APIRouter(prefix="/days", tags=["days"])


@days_router.get(
    "/{day}",
    response_model=DayClassificationResponse,
)
async def get_day(day: date, include_hol_hamoed: IncludeHolHamoedDep) -> DayClassificationResponse:
    """Classify a single date."""
    classification = classify_day(day, include_hol_hamoed)
    return DayClassificationResponse(
        date=classification.date,
        category=classification.category,
        work_value=classification.work_value,
        events=[event.desc for event in classification.events],
    )
