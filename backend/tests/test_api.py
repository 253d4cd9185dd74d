"""Integration tests for the vacation, holiday and day-classification endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from vacation_calc.config import get_settings

if TYPE_CHECKING:
    from httpx import AsyncClient

VACATION_URL = "/vacation-days"
HOLIDAYS_URL = "/holidays"
DAYS_BETWEEN_URL = "/days-between"


def _range(start: str, end: str, **extra: str) -> dict[str, str]:
    return {"start_date": start, "end_date": end, **extra}


# ---------------------------------------------------------------------------
# Vacation days
# ---------------------------------------------------------------------------


async def test_vacation_days_plain_week(async_client: AsyncClient) -> None:
    resp = await async_client.get(VACATION_URL, params=_range("2024-01-01", "2024-01-07"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_days"] == 7
    assert data["weekend_days"] == 2
    assert data["work_days"] == 5
    assert data["vacation_days_needed"] == 5
    assert data["holidays"] == []
    assert data["total_days_text"] == "7 days"
    assert data["vacation_days_text"] == "5 days"


async def test_vacation_days_hebrew_text(async_client: AsyncClient) -> None:
    resp = await async_client.get(VACATION_URL, params=_range("2024-01-07", "2024-01-08", lang="he"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_days_text"] == "יומיים"
    assert data["vacation_days_text"] == "יומיים"


async def test_vacation_days_lists_holidays(async_client: AsyncClient) -> None:
    resp = await async_client.get(VACATION_URL, params=_range("2024-10-01", "2024-10-05"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["vacation_days_needed"] == 1.5
    assert data["vacation_days_text"] == "1.5 days"
    assert data["holidays"][0] == {
        "date": "2024-10-02",
        "name": "Erev Rosh Hashana",
        "is_half_day": True,
        "is_hol_hamoed": False,
    }


async def test_vacation_days_hol_hamoed_toggle(async_client: AsyncClient) -> None:
    params = _range("2024-10-20", "2024-10-22")

    included = await async_client.get(VACATION_URL, params=params)
    excluded = await async_client.get(VACATION_URL, params={**params, "include_hol_hamoed": "false"})

    assert included.json()["vacation_days_needed"] == 0
    assert excluded.json()["vacation_days_needed"] == 3


async def test_vacation_days_uses_configured_hol_hamoed_default(
    async_client: AsyncClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(get_settings(), "include_hol_hamoed_default", False)

    resp = await async_client.get(VACATION_URL, params=_range("2024-10-20", "2024-10-22"))

    assert resp.json()["vacation_days_needed"] == 3


@pytest.mark.parametrize(
    "params",
    [
        _range("", "2024-01-10"),
        _range("2024-01-01", ""),
        _range("2024-01-10", "2024-01-05"),
        _range("not-a-date", "2024-01-05"),
        {},
    ],
)
async def test_vacation_days_invalid_range(async_client: AsyncClient, params: dict[str, str]) -> None:
    resp = await async_client.get(VACATION_URL, params=params)
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "InvalidDateRangeError"
    assert data["status_code"] == 422


async def test_vacation_days_rejects_unknown_language(async_client: AsyncClient) -> None:
    resp = await async_client.get(VACATION_URL, params=_range("2024-01-01", "2024-01-07", lang="fr"))
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


async def test_vacation_days_range_at_cap(async_client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings(), "max_range_days", 30)

    resp = await async_client.get(VACATION_URL, params=_range("2024-01-01", "2024-01-30"))

    assert resp.status_code == 200
    assert resp.json()["total_days"] == 30


async def test_vacation_days_range_over_cap(async_client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings(), "max_range_days", 30)

    resp = await async_client.get(VACATION_URL, params=_range("2024-01-01", "2024-01-31"))

    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "DateRangeTooLongError"
    assert "31 days" in data["detail"]


async def test_vacation_days_rejects_multi_century_range(async_client: AsyncClient) -> None:
    resp = await async_client.get(VACATION_URL, params=_range("1800-01-01", "2199-12-31"))
    assert resp.status_code == 422
    assert resp.json()["error"] == "DateRangeTooLongError"


# ---------------------------------------------------------------------------
# Days between
# ---------------------------------------------------------------------------


async def test_days_between(async_client: AsyncClient) -> None:
    resp = await async_client.get(DAYS_BETWEEN_URL, params=_range("2024-01-01", "2024-01-01"))
    assert resp.status_code == 200
    assert resp.json() == {"days": 1, "text": "1 day"}


async def test_days_between_invalid(async_client: AsyncClient) -> None:
    resp = await async_client.get(DAYS_BETWEEN_URL, params=_range("2024-01-02", "2024-01-01"))
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Holidays
# ---------------------------------------------------------------------------


async def test_list_holidays(async_client: AsyncClient) -> None:
    resp = await async_client.get(HOLIDAYS_URL, params=_range("2024-04-21", "2024-04-30"))
    assert resp.status_code == 200
    data = resp.json()
    names = [item["name"] for item in data["items"]]
    assert names[0] == "Erev Pesach"
    assert "Pesach I" in names
    assert "Pesach VII" in names
    assert data["total"] == len(data["items"])


async def test_list_holidays_without_hol_hamoed(async_client: AsyncClient) -> None:
    resp = await async_client.get(
        HOLIDAYS_URL,
        params=_range("2024-04-21", "2024-04-30", include_hol_hamoed="false"),
    )
    data = resp.json()
    assert not any(item["is_hol_hamoed"] for item in data["items"])
    assert [item["name"] for item in data["items"]] == ["Erev Pesach", "Pesach I", "Pesach VII"]


async def test_list_holidays_invalid(async_client: AsyncClient) -> None:
    resp = await async_client.get(HOLIDAYS_URL, params=_range("", ""))
    assert resp.status_code == 422


async def test_list_holidays_range_at_cap(async_client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings(), "max_range_days", 10)

    resp = await async_client.get(HOLIDAYS_URL, params=_range("2024-04-21", "2024-04-30"))

    assert resp.status_code == 200
    assert resp.json()["total"] > 0


async def test_list_holidays_range_over_cap(async_client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings(), "max_range_days", 10)

    resp = await async_client.get(HOLIDAYS_URL, params=_range("2024-04-21", "2024-05-01"))

    assert resp.status_code == 422
    assert resp.json()["error"] == "DateRangeTooLongError"


# ---------------------------------------------------------------------------
# Single day
# ---------------------------------------------------------------------------


async def test_get_day_holiday(async_client: AsyncClient) -> None:
    resp = await async_client.get("/days/2024-10-03")
    assert resp.status_code == 200
    assert resp.json() == {
        "date": "2024-10-03",
        "category": "HOLIDAY",
        "work_value": 0.0,
        "events": ["Rosh Hashana 5785"],
    }


async def test_get_day_weekend(async_client: AsyncClient) -> None:
    resp = await async_client.get("/days/2024-01-05")
    data = resp.json()
    assert data["category"] == "WEEKEND"
    assert data["work_value"] == 0


async def test_get_day_invalid_date(async_client: AsyncClient) -> None:
    resp = await async_client.get("/days/2024-02-30")
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"
