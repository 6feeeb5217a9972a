"""
HolidayKit Date Rules

Pure functions turning a year plus a rule into a calendar day:
- Fixed dates (with strict validation, e.g. Feb 29)
- Easter Sunday (Gregorian Computus) and Easter-relative offsets
- Nth / last weekday of a month
- Weekday on-or-before / on-or-after a reference day

Year gates ("since 1836") are not handled here; providers enforce them.
"""
from __future__ import annotations

import calendar
from datetime import date, timedelta

from ..exceptions import InvalidDateError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

# Offsets from Easter Sunday, in days
ASH_WEDNESDAY = -46
PALM_SUNDAY = -7
MAUNDY_THURSDAY = -3
GOOD_FRIDAY = -2
EASTER_SATURDAY = -1
EASTER_MONDAY = 1
GREAT_PRAYER_DAY = 26      # Fourth Friday after Easter
ASCENSION_DAY = 39
PENTECOST = 49
PENTECOST_MONDAY = 50
CORPUS_CHRISTI = 60


def fixed_date(year: int, month: int, day: int) -> date:
    """
    Build a fixed calendar date.

    Raises:
        InvalidDateError: If the combination does not exist (e.g. Feb 29 in 2023)
    """
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(
            f"{year:04d}-{month:02d}-{day:02d} is not a valid date: {e}",
            details={"year": year, "month": month, "day": day},
        )


def easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    Steps: golden number (a), century and its leap-year corrections
    (b, d, e, f, g), epact (h), weekday correction (l), and the
    correction for late paschal full moons (m).
    """
    if year < 1:
        raise InvalidDateError(f"Easter is undefined for year {year}", details={"year": year})
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def easter_offset(year: int, days: int) -> date:
    """Easter Sunday of ``year`` shifted by a signed number of days."""
    return easter(year) + timedelta(days=days)


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        n: Which occurrence; 1=first, 2=second, ... and -1=last, -2=second to last

    Returns:
        The date of the nth weekday

    Raises:
        InvalidDateError: If n is 0 or the month has no such occurrence
    """
    if n == 0:
        raise InvalidDateError("Occurrence index must not be 0", details={"month": month})
    if not 0 <= weekday <= 6:
        raise InvalidDateError(f"Weekday {weekday} outside 0..6", details={"weekday": weekday})

    first_day = fixed_date(year, month, 1)
    if n > 0:
        days_until_weekday = (weekday - first_day.weekday()) % 7
        result = first_day + timedelta(days=days_until_weekday, weeks=n - 1)
    else:
        last_day = fixed_date(year, month, calendar.monthrange(year, month)[1])
        days_since_weekday = (last_day.weekday() - weekday) % 7
        result = last_day - timedelta(days=days_since_weekday, weeks=-n - 1)

    if result.month != month:
        raise InvalidDateError(
            f"Month {year}-{month:02d} has no occurrence {n} of weekday {weekday}",
            details={"year": year, "month": month, "weekday": weekday, "n": n},
        )
    return result


def last_weekday(year: int, month: int, weekday: int) -> date:
    """Last occurrence of a weekday in a month (e.g. Memorial Day)."""
    return nth_weekday(year, month, weekday, -1)


def weekday_on_or_before(day: date, weekday: int) -> date:
    """The given weekday on or before ``day`` (e.g. Victoria Day: Monday on or before May 24)."""
    return day - timedelta(days=(day.weekday() - weekday) % 7)


def weekday_on_or_after(day: date, weekday: int) -> date:
    """The given weekday on or after ``day`` (e.g. Midsummer Day: Saturday from June 20)."""
    return day + timedelta(days=(weekday - day.weekday()) % 7)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)
