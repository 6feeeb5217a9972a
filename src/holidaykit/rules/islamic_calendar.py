"""
HolidayKit Islamic Calendar

Tabular (arithmetic) Hijri calendar: 30-year cycle with 11 leap years,
alternating 30/29-day months. Real observance depends on moon sighting
and can differ by a day or two; this is the standard civil approximation.

A Hijri year is about 11 days shorter than a Gregorian one, so a given
Hijri date occurs zero, one or (rarely) two times in a Gregorian year.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from ..exceptions import InvalidDateError

MUHARRAM = 1
SAFAR = 2
RABI_AL_AWWAL = 3
RABI_AL_THANI = 4
JUMADA_AL_AWWAL = 5
JUMADA_AL_THANI = 6
RAJAB = 7
SHABAN = 8
RAMADAN = 9
SHAWWAL = 10
DHU_AL_QADAH = 11
DHU_AL_HIJJAH = 12

# Ordinal of 1 Muharram AH 1 (Julian 16 July 622)
ISLAMIC_EPOCH = 227015


def is_leap_year(h_year: int) -> bool:
    return (14 + 11 * h_year) % 30 < 11


def days_in_month(h_year: int, month: int) -> int:
    if month == DHU_AL_HIJJAH and is_leap_year(h_year):
        return 30
    return 30 if month % 2 == 1 else 29


def to_ordinal(h_year: int, month: int, day: int) -> int:
    """
    Ordinal of a Hijri date.

    Raises:
        InvalidDateError: If the month or day does not exist
    """
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Hijri month {month} outside 1..12", details={"month": month})
    if not 1 <= day <= days_in_month(h_year, month):
        raise InvalidDateError(
            f"Hijri month {month} of {h_year} has no day {day}",
            details={"h_year": h_year, "month": month, "day": day},
        )
    return (
        day
        + 29 * (month - 1)
        + (6 * month - 1) // 11
        + (h_year - 1) * 354
        + (3 + 11 * h_year) // 30
        + ISLAMIC_EPOCH
        - 1
    )


def from_ordinal(ordinal: int) -> tuple[int, int, int]:
    """Hijri (year, month, day) of an ordinal."""
    h_year = (30 * (ordinal - ISLAMIC_EPOCH) + 10646) // 10631
    prior_days = ordinal - to_ordinal(h_year, MUHARRAM, 1)
    month = (11 * prior_days + 330) // 325
    day = ordinal - to_ordinal(h_year, month, 1) + 1
    return h_year, month, day


def to_gregorian(h_year: int, month: int, day: int) -> date:
    ordinal = to_ordinal(h_year, month, day)
    try:
        return date.fromordinal(ordinal)
    except (ValueError, OverflowError):
        raise InvalidDateError(
            f"Hijri date {h_year}-{month}-{day} is outside the Gregorian date range",
            details={"h_year": h_year, "month": month, "day": day},
        )


def islamic_dates_in_year(year: int, month: int, day: int) -> tuple[date, ...]:
    """All Gregorian dates in ``year`` on which Hijri ``month``/``day`` falls, in order."""
    first_h_year = from_ordinal(date(year, 1, 1).toordinal())[0]
    last_h_year = from_ordinal(date(year, 12, 31).toordinal())[0]

    found = []
    for h_year in range(first_h_year, last_h_year + 1):
        try:
            result = to_gregorian(h_year, month, day)
        except InvalidDateError:
            continue
        if result.year == year:
            found.append(result)
    return tuple(found)


def islamic_date_in_year(year: int, month: int, day: int) -> Optional[date]:
    """Earliest occurrence of Hijri ``month``/``day`` in Gregorian ``year``, or None."""
    found = islamic_dates_in_year(year, month, day)
    return found[0] if found else None
