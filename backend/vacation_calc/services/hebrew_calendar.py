"""Hebrew-calendar holiday oracle.

Converts Gregorian dates to Hebrew dates with pyluach and reports the holiday
events falling on them. Each event carries ``HolidayFlag`` bits describing its
observance (yom tov, eve, chol hamoed, fast, modern Israeli holiday) so that
callers can apply their own workday rules without string matching.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pyluach import dates, hebrewcal

from vacation_calc.config import get_settings

if TYPE_CHECKING:
    from datetime import date


class HolidayFlag(enum.IntFlag):
    """Semantic flags attached to a holiday event."""

    NONE = 0
    CHAG = enum.auto()
    LIGHT_CANDLES = enum.auto()
    YOM_TOV_ENDS = enum.auto()
    MINOR_FAST = enum.auto()
    MAJOR_FAST = enum.auto()
    MODERN_HOLIDAY = enum.auto()
    MINOR_HOLIDAY = enum.auto()
    EREV = enum.auto()
    CHOL_HAMOED = enum.auto()
    CHANUKAH_CANDLES = enum.auto()


# pyluach month numbers count from Nisan; Adar I is 12 in leap years.
NISAN = 1
IYYAR = 2
SIVAN = 3
ELUL = 6
TISHREI = 7
KISLEV = 9
ADAR_I = 12
ADAR_II = 13

# pyluach weekday numbering: Sunday is 1, Saturday is 7.
_SUNDAY = 1
_TUESDAY = 3
_FRIDAY = 6
_SHABBAT = 7

_ROMAN = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII")
_CHOL_HAMOED_SUFFIX = " (CH''M)"
_CHANUKAH_CANDLES = HolidayFlag.MINOR_HOLIDAY | HolidayFlag.CHANUKAH_CANDLES

# First Hebrew years in which the modern Israeli observances were held.
_YOM_HAATZMAUT_SINCE = 5708
_YOM_HASHOAH_SINCE = 5711
_YOM_YERUSHALAYIM_SINCE = 5727
_ZIKARON_MONDAY_RULE_SINCE = 5764


@dataclass(frozen=True)
class CalendarEvent:
    """A single holiday event on a Gregorian date."""

    date: date
    desc: str
    flags: HolidayFlag

    def has(self, flag: HolidayFlag) -> bool:
        return bool(self.flags & flag)


_DayKey = tuple[int, int]
_YearEvents = dict[_DayKey, tuple[tuple[str, HolidayFlag], ...]]


# ---------------------------------------------------------------------------
# Year table construction
# ---------------------------------------------------------------------------

# pyluach fast names mapped to Hebcal spelling. pyluach already postpones
# fasts that fall on Shabbat.
_FASTS: dict[str, tuple[str, HolidayFlag]] = {
    "Tzom Gedalia": ("Tzom Gedaliah", HolidayFlag.MINOR_FAST),
    "10 of Teves": ("Asara B'Tevet", HolidayFlag.MINOR_FAST),
    "Taanis Esther": ("Ta'anit Esther", HolidayFlag.MINOR_FAST),
    "17 of Tamuz": ("Tzom Tammuz", HolidayFlag.MINOR_FAST),
    "9 of Av": ("Tish'a B'Av", HolidayFlag.MAJOR_FAST),
}

_MINOR_FESTIVALS: dict[str, str] = {
    "Tu B'shvat": "Tu BiShvat",
    "Purim Katan": "Purim Katan",
    "Purim": "Purim",
    "Shushan Purim": "Shushan Purim",
    "Pesach Sheni": "Pesach Sheni",
    "Lag Ba'omer": "Lag BaOmer",
    "Tu B'av": "Tu B'Av",
}


def _yom_tov(last: bool) -> HolidayFlag:
    return HolidayFlag.CHAG | (HolidayFlag.YOM_TOV_ENDS if last else HolidayFlag.LIGHT_CANDLES)


def _pilgrimage_day(name: str, day: int, israel: bool) -> tuple[str, HolidayFlag]:
    """Name and flags for a day of Sukkot or Pesach, counted from the 15th."""
    yom_tov_days = 1 if israel else 2
    offset = day - 15
    if offset < yom_tov_days:
        return f"{name} {_ROMAN[offset]}", _yom_tov(offset == yom_tov_days - 1)
    if day <= 20:
        return f"{name} {_ROMAN[offset]}{_CHOL_HAMOED_SUFFIX}", HolidayFlag.CHOL_HAMOED
    if name == "Sukkot":
        if day == 21:
            return "Sukkot VII (Hoshana Raba)", HolidayFlag.CHOL_HAMOED | HolidayFlag.LIGHT_CANDLES
        if day == 22:
            return "Shmini Atzeret", _yom_tov(israel)
        return "Simchat Torah", _yom_tov(True)
    return f"Pesach {_ROMAN[offset]}", _yom_tov(israel or day == 22)


def _festival_event(name: str, hd: dates.HebrewDate, israel: bool) -> tuple[str, HolidayFlag] | None:
    """Translate a pyluach festival name into a Hebcal-style event."""
    if name == "Rosh Hashana":
        if hd.day == 1:
            return f"Rosh Hashana {hd.year}", _yom_tov(False)
        return "Rosh Hashana II", _yom_tov(True)
    if name == "Yom Kippur":
        return "Yom Kippur", HolidayFlag.CHAG | HolidayFlag.MAJOR_FAST | HolidayFlag.YOM_TOV_ENDS
    if name in ("Succos", "Shmini Atzeres", "Simchas Torah"):
        return _pilgrimage_day("Sukkot", hd.day, israel)
    if name == "Pesach":
        return _pilgrimage_day("Pesach", hd.day, israel)
    if name == "Shavuos":
        if israel:
            return "Shavuot", _yom_tov(True)
        return f"Shavuot {_ROMAN[hd.day - 6]}", _yom_tov(hd.day == 7)
    if name in _MINOR_FESTIVALS:
        return _MINOR_FESTIVALS[name], HolidayFlag.MINOR_HOLIDAY
    return None


@lru_cache(maxsize=64)
def _year_events(year: int, israel: bool) -> _YearEvents:
    """Build the holiday table for one Hebrew year, keyed by (month, day).

    Festivals, fasts and Chanukah come from pyluach. Eves, Rosh Hashana
    LaBehemot and the modern Israeli observances are added here.
    """
    table: dict[_DayKey, list[tuple[str, HolidayFlag]]] = {}

    def add(month: int, day: int, desc: str, flags: HolidayFlag) -> None:
        table.setdefault((month, day), []).append((desc, flags))

    def weekday(month: int, day: int) -> int:
        return dates.HebrewDate(year, month, day).weekday()

    chanukah_day = 0
    hd = dates.HebrewDate(year, TISHREI, 1)
    while hd.year == year:
        name = hd.festival(israel=israel, include_working_days=True)
        if name == "Chanuka":
            chanukah_day += 1
            if chanukah_day < 8:
                add(hd.month, hd.day, f"Chanukah: {chanukah_day + 1} Candles", _CHANUKAH_CANDLES)
            else:
                add(hd.month, hd.day, "Chanukah: 8th Day", HolidayFlag.MINOR_HOLIDAY)
        elif name is not None:
            event = _festival_event(name, hd, israel)
            if event is not None:
                add(hd.month, hd.day, *event)

        fast = _FASTS.get(hd.fast_day())
        if fast is not None:
            if fast[1] & HolidayFlag.MAJOR_FAST:
                erev = hd - 1
                add(erev.month, erev.day, "Erev Tish'a B'Av", HolidayFlag.EREV | HolidayFlag.MAJOR_FAST)
            add(hd.month, hd.day, *fast)
        hd += 1

    adar = ADAR_II if hebrewcal.Year(year).leap else ADAR_I

    add(TISHREI, 9, "Erev Yom Kippur", HolidayFlag.EREV | HolidayFlag.LIGHT_CANDLES)
    add(TISHREI, 14, "Erev Sukkot", HolidayFlag.EREV | HolidayFlag.LIGHT_CANDLES)
    add(KISLEV, 24, "Chanukah: 1 Candle", _CHANUKAH_CANDLES)
    add(adar, 13, "Erev Purim", HolidayFlag.EREV | HolidayFlag.MINOR_HOLIDAY)
    add(NISAN, 14, "Erev Pesach", HolidayFlag.EREV | HolidayFlag.LIGHT_CANDLES)
    add(SIVAN, 5, "Erev Shavuot", HolidayFlag.EREV | HolidayFlag.LIGHT_CANDLES)
    add(ELUL, 1, "Rosh Hashana LaBehemot", HolidayFlag.MINOR_HOLIDAY)
    add(ELUL, 29, "Erev Rosh Hashana", HolidayFlag.EREV | HolidayFlag.LIGHT_CANDLES)

    if year >= _YOM_HASHOAH_SINCE:
        shoah_day = 27
        if weekday(NISAN, 27) == _FRIDAY:
            shoah_day = 26
        elif weekday(NISAN, 27) == _SUNDAY:
            shoah_day = 28
        add(NISAN, shoah_day, "Yom HaShoah", HolidayFlag.MODERN_HOLIDAY)

    if year >= _YOM_HAATZMAUT_SINCE:
        # Yom HaZikaron and Yom HaAtzmaut move so that neither touches Shabbat.
        pesach_weekday = weekday(NISAN, 15)
        if pesach_weekday == _SUNDAY:
            zikaron_day = 2
        elif pesach_weekday == _SHABBAT:
            zikaron_day = 3
        elif year >= _ZIKARON_MONDAY_RULE_SINCE and pesach_weekday == _TUESDAY:
            zikaron_day = 5
        else:
            zikaron_day = 4
        add(IYYAR, zikaron_day, "Yom HaZikaron", HolidayFlag.MODERN_HOLIDAY)
        add(IYYAR, zikaron_day + 1, "Yom HaAtzmaut", HolidayFlag.MODERN_HOLIDAY)

    if year >= _YOM_YERUSHALAYIM_SINCE:
        add(IYYAR, 28, "Yom Yerushalayim", HolidayFlag.MODERN_HOLIDAY)

    return {key: tuple(events) for key, events in table.items()}


def get_holidays_on_date(day: date, israel: bool = True) -> list[CalendarEvent]:
    """Return the holiday events on a Gregorian date, in calendar order."""
    hd = dates.HebrewDate.from_pydate(day)
    events = _year_events(hd.year, israel).get((hd.month, hd.day), ())
    return [CalendarEvent(date=day, desc=desc, flags=flags) for desc, flags in events]


# ---------------------------------------------------------------------------
# Calendar service
# ---------------------------------------------------------------------------


@runtime_checkable
class HolidayCalendar(Protocol):
    """Interface for a holiday lookup."""

    def events_on(self, day: date) -> list[CalendarEvent]:
        """Return the holiday events on ``day``. May raise for dates it cannot convert."""
        ...


class HebrewHolidayCalendar:
    """pyluach-backed Jewish holiday calendar."""

    def __init__(self, israel: bool = True) -> None:
        self.israel = israel

    def events_on(self, day: date) -> list[CalendarEvent]:
        return get_holidays_on_date(day, israel=self.israel)


class StaticHolidayCalendar:
    """In-memory stub implementation for development and tests."""

    def __init__(self) -> None:
        self._events: dict[date, list[CalendarEvent]] = {}
        self._failing: set[date] = set()

    def seed(self, event: CalendarEvent) -> None:
        """Seed an event on its date."""
        self._events.setdefault(event.date, []).append(event)

    def fail_on(self, day: date) -> None:
        """Make lookups for ``day`` raise, simulating a conversion failure."""
        self._failing.add(day)

    def events_on(self, day: date) -> list[CalendarEvent]:
        if day in self._failing:
            raise ValueError(f"Cannot convert {day} to a Hebrew date")
        return list(self._events.get(day, []))


_holiday_calendar: HolidayCalendar | None = None


def get_holiday_calendar() -> HolidayCalendar:
    """Return the active holiday calendar, building the default on first use."""
    global _holiday_calendar
    if _holiday_calendar is None:
        _holiday_calendar = HebrewHolidayCalendar(israel=get_settings().israel)
    return _holiday_calendar


def set_holiday_calendar(calendar: HolidayCalendar | None) -> None:
    """Override the calendar (for testing or alternative wiring). ``None`` restores the default."""
    global _holiday_calendar
    _holiday_calendar = calendar
