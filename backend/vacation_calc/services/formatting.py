from __future__ import annotations

from vacation_calc.models.enums import DisplayLanguage

HEBREW_DAY_ONE = "יום אחד"
HEBREW_DAY_TWO = "יומיים"
HEBREW_DAYS_MANY = "ימים"


def _format_number(days: float) -> str:
    """Render whole floats without a trailing ``.0``."""
    if isinstance(days, float) and days.is_integer():
        return str(int(days))
    return str(days)


def _is_whole(days: float) -> bool:
    return float(days).is_integer()


def format_day_count(days: float) -> str:
    """English day count: singular only for exactly one."""
    unit = "day" if days == 1 else "days"
    return f"{_format_number(days)} {unit}"


def format_day_count_hebrew(days: float) -> str:
    """Hebrew day count with the fixed singular and dual forms."""
    if not _is_whole(days) or days < 0:
        return f"{_format_number(days)} {HEBREW_DAYS_MANY}"
    if days == 1:
        return HEBREW_DAY_ONE
    if days == 2:
        return HEBREW_DAY_TWO
    return f"{_format_number(days)} {HEBREW_DAYS_MANY}"


def format_days(days: float, language: DisplayLanguage = DisplayLanguage.EN) -> str:
    if language is DisplayLanguage.HE:
        return format_day_count_hebrew(days)
    return format_day_count(days)
