"""Date range parsing and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    """An inclusive range of calendar dates."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        """Number of dates in the range, counting both ends."""
        return (self.end - self.start).days + 1

    def iter_dates(self) -> Iterator[date]:
        """Yield every date from start to end, ascending."""
        for offset in range(self.days):
            yield self.start + timedelta(days=offset)


def parse_date(value: str | None) -> date | None:
    """Parse an ISO date (or datetime, dropping the time) into a calendar date.

    Returns None for empty or unparseable input.
    """
    if not value or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def validate_date_range(start_date: str | None, end_date: str | None) -> DateRange | None:
    """Parse and validate a pair of date strings.

    Returns None when either input is missing or malformed, or when the end
    date falls before the start date.
    """
    if not start_date or not end_date:
        logger.debug("Both start and end dates are required (start=%r, end=%r)", start_date, end_date)
        return None

    start = parse_date(start_date)
    if start is None:
        logger.debug("Invalid start date format: %r", start_date)
        return None

    end = parse_date(end_date)
    if end is None:
        logger.debug("Invalid end date format: %r", end_date)
        return None

    if start > end:
        logger.debug("End date %s is before start date %s", end, start)
        return None

    return DateRange(start=start, end=end)


def calculate_days_between(start_date: str | None, end_date: str | None) -> int | None:
    """Number of days between two date strings, inclusive of both ends.

    A range from a date to itself is one day. Returns None for invalid input.
    """
    date_range = validate_date_range(start_date, end_date)
    if date_range is None:
        return None
    return date_range.days
