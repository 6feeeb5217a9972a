"""
United Kingdom Holidays

England and Wales bank holidays (Banking and Financial Dealings Act 1971)
plus the common-law holidays Good Friday and Christmas Day.

Observed holidays: a holiday on a weekend is substituted by the next
working day not already taken, so Christmas Day and Boxing Day on a
weekend are observed on the following Monday and Tuesday.
"""
from __future__ import annotations

from datetime import date

from ..catalog import CHRISTIAN, COMMON, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import MONDAY, NEXT_WORKING_DAY, fixed_date, last_weekday, nth_weekday
from .base import ProviderDefinition
from .canada import BOXING_DAY_NAMES

# Years a bank holiday was moved by royal proclamation
_EARLY_MAY_MOVED = {1995: (5, 8), 2020: (5, 8)}
_SPRING_MOVED = {1977: (6, 6), 2002: (6, 4), 2012: (6, 4), 2022: (6, 2)}


def early_may_bank_holiday(year: int) -> date:
    if year in _EARLY_MAY_MOVED:
        return fixed_date(year, *_EARLY_MAY_MOVED[year])
    return nth_weekday(year, 5, MONDAY, 1)


def spring_bank_holiday(year: int) -> date:
    if year in _SPRING_MOVED:
        return fixed_date(year, *_SPRING_MOVED[year])
    return last_weekday(year, 5, MONDAY)


def summer_bank_holiday(year: int) -> date:
    return last_weekday(year, 8, MONDAY)


def _bank_holiday(short_name, compute, since) -> RuleSpec:
    return RuleSpec(short_name, compute, type=HolidayType.BANK, tags=DAY_OFF_TAGS, since=since)


UNITED_KINGDOM = ProviderDefinition(
    id="GB",
    name="United Kingdom",
    timezone="Europe/London",
    rules=(
        COMMON.rule(
            "newYearsDay",
            type=HolidayType.BANK,
            tags=DAY_OFF_TAGS,
            since=1974,
            substitution=NEXT_WORKING_DAY,
        ),
        CHRISTIAN.rule("goodFriday", tags=DAY_OFF_TAGS | {Tag.RELIGION}),
        CHRISTIAN.rule("easterMonday", type=HolidayType.BANK, tags=DAY_OFF_TAGS | {Tag.RELIGION}, since=1871),
        _bank_holiday("earlyMayBankHoliday", early_may_bank_holiday, since=1978),
        _bank_holiday("springBankHoliday", spring_bank_holiday, since=1971),
        _bank_holiday("summerBankHoliday", summer_bank_holiday, since=1971),
        CHRISTIAN.rule(
            "christmasDay",
            tags=DAY_OFF_TAGS | {Tag.RELIGION},
            substitution=NEXT_WORKING_DAY,
        ),
        CHRISTIAN.rule(
            "secondChristmasDay",
            type=HolidayType.BANK,
            tags=DAY_OFF_TAGS,
            names=BOXING_DAY_NAMES,
            since=1871,
            substitution=NEXT_WORKING_DAY,
        ),
        COMMON.rule("summerTime", type=HolidayType.SEASON),
        COMMON.rule("winterTime", type=HolidayType.SEASON),
    ),
)
