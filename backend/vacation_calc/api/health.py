import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from vacation_calc.config import get_settings
from vacation_calc.services.hebrew_calendar import get_holiday_calendar

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    try:
        get_holiday_calendar().events_on(date.today())
    except Exception:
        logger.exception("Health check: holiday calendar lookup failed")
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
    )
