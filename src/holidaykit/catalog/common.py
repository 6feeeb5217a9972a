"""
Common Holidays

Secular holidays shared by many jurisdictions.
"""
from __future__ import annotations

from datetime import date

from ..rules import MONDAY, SUNDAY, fixed_date, last_weekday, nth_weekday
from .base import RuleGroup


def new_years_day(year: int) -> date:
    return fixed_date(year, 1, 1)


def new_years_eve(year: int) -> date:
    return fixed_date(year, 12, 31)


def international_womens_day(year: int) -> date:
    return fixed_date(year, 3, 8)


def international_workers_day(year: int) -> date:
    return fixed_date(year, 5, 1)


def valentines_day(year: int) -> date:
    return fixed_date(year, 2, 14)


def victory_in_europe_day(year: int) -> date:
    return fixed_date(year, 5, 8)


def armistice_day(year: int) -> date:
    return fixed_date(year, 11, 11)


def mothers_day(year: int) -> date:
    """Second Sunday of May (US, Canada and most of the world)."""
    return nth_weekday(year, 5, SUNDAY, 2)


def fathers_day(year: int) -> date:
    """Third Sunday of June."""
    return nth_weekday(year, 6, SUNDAY, 3)


def labour_day(year: int) -> date:
    """First Monday of September (North America)."""
    return nth_weekday(year, 9, MONDAY, 1)


def summer_time(year: int) -> date:
    """Start of European summer time: last Sunday of March."""
    return last_weekday(year, 3, SUNDAY)


def winter_time(year: int) -> date:
    """End of European summer time: last Sunday of October."""
    return last_weekday(year, 10, SUNDAY)


COMMON = RuleGroup(
    name="Common",
    functions={
        "newYearsDay": new_years_day,
        "newYearsEve": new_years_eve,
        "internationalWomensDay": international_womens_day,
        "internationalWorkersDay": international_workers_day,
        "valentinesDay": valentines_day,
        "victoryInEuropeDay": victory_in_europe_day,
        "armisticeDay": armistice_day,
        "mothersDay": mothers_day,
        "fathersDay": fathers_day,
        "labourDay": labour_day,
        "summerTime": summer_time,
        "winterTime": winter_time,
    },
)
