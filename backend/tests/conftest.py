from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from vacation_calc.main import app
from vacation_calc.services.hebrew_calendar import StaticHolidayCalendar, set_holiday_calendar

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator


@pytest.fixture(autouse=True)
def _restore_holiday_calendar() -> Iterator[None]:
    """Put the default pyluach calendar back after every test."""
    yield
    set_holiday_calendar(None)


@pytest.fixture
def static_calendar() -> StaticHolidayCalendar:
    """Install an empty in-memory calendar that tests can seed."""
    calendar = StaticHolidayCalendar()
    set_holiday_calendar(calendar)
    return calendar


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
