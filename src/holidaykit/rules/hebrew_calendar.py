"""
HolidayKit Hebrew Calendar

Arithmetic Hebrew -> Gregorian conversion.

Day numbers are Python proleptic Gregorian ordinals (date.toordinal()),
where 0001-01-01 is day 1.

Key rules implemented:
- 19-year leap cycle (years 3, 6, 8, 11, 14, 17, 19 have 13 months)
- Molad (mean conjunction) of Tishrei counted in parts (1/1080 hour)
- Postponements (dehiyyot) keeping Rosh Hashanah off Sun/Wed/Fri and
  keeping year lengths within 353-355 / 383-385 days
- Variable Marheshvan and Kislev lengths derived from the year length

Months are numbered from Nisan (1) as in the biblical count; the civil
year starts at Tishrei (7). Adar II is month 13 in leap years.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from ..exceptions import InvalidDateError

NISAN = 1
IYYAR = 2
SIVAN = 3
TAMMUZ = 4
AV = 5
ELUL = 6
TISHREI = 7
MARHESHVAN = 8
KISLEV = 9
TEVET = 10
SHEVAT = 11
ADAR = 12
ADAR_II = 13

# Ordinal of 1 Tishrei AM 1 (Julian 7 October 3761 BCE)
HEBREW_EPOCH = -1373427

# Gregorian year N spans the end of Hebrew year N + 3760 and the start of N + 3761
ANNO_MUNDI_OFFSET = 3760


def is_leap_year(h_year: int) -> bool:
    return (7 * h_year + 1) % 19 < 7


def months_in_year(h_year: int) -> int:
    return 13 if is_leap_year(h_year) else 12


def _elapsed_days(h_year: int) -> int:
    """Days from the epoch to the molad of Tishrei, with the weekday postponement."""
    months_elapsed = (235 * h_year - 234) // 19
    parts_elapsed = 12084 + 13753 * months_elapsed
    days = 29 * months_elapsed + parts_elapsed // 25920
    # Rosh Hashanah never on Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def _year_length_correction(h_year: int) -> int:
    """Extra delay keeping the preceding or current year within legal lengths."""
    ny0 = _elapsed_days(h_year - 1)
    ny1 = _elapsed_days(h_year)
    ny2 = _elapsed_days(h_year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


def new_year(h_year: int) -> int:
    """Ordinal of 1 Tishrei of ``h_year``."""
    return HEBREW_EPOCH + _elapsed_days(h_year) + _year_length_correction(h_year)


def days_in_year(h_year: int) -> int:
    return new_year(h_year + 1) - new_year(h_year)


def days_in_month(h_year: int, month: int) -> int:
    length = days_in_year(h_year)
    if month in (IYYAR, TAMMUZ, ELUL, TEVET, ADAR_II):
        return 29
    if month == MARHESHVAN:
        # Long Marheshvan only in "complete" years
        return 30 if length in (355, 385) else 29
    if month == KISLEV:
        # Short Kislev only in "deficient" years
        return 29 if length in (353, 383) else 30
    if month == ADAR:
        return 30 if is_leap_year(h_year) else 29
    return 30


def to_ordinal(h_year: int, month: int, day: int) -> int:
    """
    Ordinal of a Hebrew date.

    Raises:
        InvalidDateError: If the month or day does not exist in that year
    """
    if not 1 <= month <= months_in_year(h_year):
        raise InvalidDateError(
            f"Hebrew year {h_year} has no month {month}",
            details={"h_year": h_year, "month": month},
        )
    if not 1 <= day <= days_in_month(h_year, month):
        raise InvalidDateError(
            f"Hebrew month {month} of {h_year} has no day {day}",
            details={"h_year": h_year, "month": month, "day": day},
        )

    ordinal = new_year(h_year) + day - 1
    if month < TISHREI:
        # Tishrei .. end of year, then Nisan .. month before ``month``
        for m in range(TISHREI, months_in_year(h_year) + 1):
            ordinal += days_in_month(h_year, m)
        for m in range(NISAN, month):
            ordinal += days_in_month(h_year, m)
    else:
        for m in range(TISHREI, month):
            ordinal += days_in_month(h_year, m)
    return ordinal


def to_gregorian(h_year: int, month: int, day: int) -> date:
    ordinal = to_ordinal(h_year, month, day)
    try:
        return date.fromordinal(ordinal)
    except (ValueError, OverflowError):
        raise InvalidDateError(
            f"Hebrew date {h_year}-{month}-{day} is outside the Gregorian date range",
            details={"h_year": h_year, "month": month, "day": day},
        )


def hebrew_date_in_year(
    year: int, month: int, day: int, *, adar_ii_in_leap_years: bool = False
) -> Optional[date]:
    """
    The Gregorian date of Hebrew ``month``/``day`` falling inside Gregorian ``year``.

    Both Hebrew years overlapping the Gregorian year are tried and the
    earliest match wins (early-Tevet dates can land twice in one Gregorian
    year). Returns None when neither occurrence lands in the year or the
    day does not exist, e.g. 30 Kislev in a deficient year.

    Args:
        adar_ii_in_leap_years: Map ADAR to Adar II in leap years (Purim rule)
    """
    for h_year in (year + ANNO_MUNDI_OFFSET, year + ANNO_MUNDI_OFFSET + 1):
        h_month = month
        if adar_ii_in_leap_years and month == ADAR and is_leap_year(h_year):
            h_month = ADAR_II
        try:
            result = to_gregorian(h_year, h_month, day)
        except InvalidDateError:
            continue
        if result.year == year:
            return result
    return None
