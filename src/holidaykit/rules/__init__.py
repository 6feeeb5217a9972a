"""
HolidayKit Date Rules

Rule primitives used by the holiday catalog and the providers:

- dates: fixed dates, Computus, Easter offsets, nth weekday
- hebrew_calendar / islamic_calendar: lunar and lunisolar conversions
- substitution: observed-date policies for holidays on excluded weekdays
"""
from __future__ import annotations

from .dates import (
    ASCENSION_DAY,
    ASH_WEDNESDAY,
    CORPUS_CHRISTI,
    EASTER_MONDAY,
    EASTER_SATURDAY,
    FRIDAY,
    GOOD_FRIDAY,
    GREAT_PRAYER_DAY,
    MAUNDY_THURSDAY,
    MONDAY,
    PALM_SUNDAY,
    PENTECOST,
    PENTECOST_MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    easter,
    easter_offset,
    fixed_date,
    is_leap_year,
    last_weekday,
    nth_weekday,
    weekday_on_or_after,
    weekday_on_or_before,
)
from .hebrew_calendar import hebrew_date_in_year
from .islamic_calendar import islamic_date_in_year, islamic_dates_in_year
from .substitution import (
    NEAREST_WEEKDAY,
    NEXT_MONDAY,
    NEXT_WORKING_DAY,
    NO_SUBSTITUTION,
    WEEKEND,
    ShiftRule,
    SubstitutionPolicy,
)

__all__ = [
    # Weekdays
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    # Easter offsets
    "ASH_WEDNESDAY",
    "PALM_SUNDAY",
    "MAUNDY_THURSDAY",
    "GOOD_FRIDAY",
    "EASTER_SATURDAY",
    "EASTER_MONDAY",
    "GREAT_PRAYER_DAY",
    "ASCENSION_DAY",
    "PENTECOST",
    "PENTECOST_MONDAY",
    "CORPUS_CHRISTI",
    # Functions
    "fixed_date",
    "easter",
    "easter_offset",
    "nth_weekday",
    "last_weekday",
    "weekday_on_or_before",
    "weekday_on_or_after",
    "is_leap_year",
    "hebrew_date_in_year",
    "islamic_date_in_year",
    "islamic_dates_in_year",
    # Substitution
    "ShiftRule",
    "SubstitutionPolicy",
    "WEEKEND",
    "NO_SUBSTITUTION",
    "NEXT_WORKING_DAY",
    "NEXT_MONDAY",
    "NEAREST_WEEKDAY",
]
