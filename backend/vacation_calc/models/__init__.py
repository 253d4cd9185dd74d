from vacation_calc.models.enums import DayCategory, DisplayLanguage

__all__ = [
    "DayCategory",
    "DisplayLanguage",
]
