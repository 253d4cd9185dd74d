from fastapi import APIRouter

from vacation_calc.api.days import days_router
from vacation_calc.api.holidays import holidays_router
from vacation_calc.api.vacation import vacation_router

api_router = APIRouter()
api_router.include_router(vacation_router)
api_router.include_router(holidays_router)
api_router.include_router(days_router)
