from __future__ import annotations

import enum


class DayCategory(enum.StrEnum):
    """How a single calendar day counts against vacation."""

    WORKDAY = "WORKDAY"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
    HALF_DAY = "HALF_DAY"


class DisplayLanguage(enum.StrEnum):
    """Languages day counts can be rendered in."""

    EN = "en"
    HE = "he"
