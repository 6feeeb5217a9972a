"""
US Federal Holidays

Federal holidays (5 U.S.C. 6103):
- New Year's Day (January 1)
- Martin Luther King Jr. Day (3rd Monday in January) - Since 1986
- Washington's Birthday (February 22; 3rd Monday in February since 1971)
- Memorial Day (May 30; last Monday in May since 1971)
- Juneteenth (June 19) - Since 2021
- Independence Day (July 4)
- Labor Day (1st Monday in September)
- Columbus Day (October 12; 2nd Monday in October since 1971) - Since 1937
- Veterans Day (November 11)
- Thanksgiving Day (4th Thursday in November)
- Christmas Day (December 25)

Observed holidays: When a fixed-date holiday falls on Saturday, it's
observed on Friday. When it falls on Sunday, it's observed on Monday.
"""
from __future__ import annotations

from datetime import date

from ..catalog import CHRISTIAN, COMMON, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import MONDAY, NEAREST_WEEKDAY, THURSDAY, fixed_date, last_weekday, nth_weekday
from .base import ProviderDefinition

# Uniform Monday Holiday Act took effect in 1971
UNIFORM_MONDAY_YEAR = 1971


def martin_luther_king_day(year: int) -> date:
    return nth_weekday(year, 1, MONDAY, 3)


def washingtons_birthday(year: int) -> date:
    if year < UNIFORM_MONDAY_YEAR:
        return fixed_date(year, 2, 22)
    return nth_weekday(year, 2, MONDAY, 3)


def memorial_day(year: int) -> date:
    if year < UNIFORM_MONDAY_YEAR:
        return fixed_date(year, 5, 30)
    return last_weekday(year, 5, MONDAY)


def juneteenth(year: int) -> date:
    return fixed_date(year, 6, 19)


def independence_day(year: int) -> date:
    return fixed_date(year, 7, 4)


def columbus_day(year: int) -> date:
    if year < UNIFORM_MONDAY_YEAR:
        return fixed_date(year, 10, 12)
    return nth_weekday(year, 10, MONDAY, 2)


def veterans_day(year: int) -> date:
    return fixed_date(year, 11, 11)


def thanksgiving_day(year: int) -> date:
    return nth_weekday(year, 11, THURSDAY, 4)


def _federal(short_name, compute, *tags, **options) -> RuleSpec:
    return RuleSpec(short_name, compute, tags=DAY_OFF_TAGS | set(tags), **options)


UNITED_STATES = ProviderDefinition(
    id="US",
    name="United States",
    timezone="America/New_York",
    rules=(
        COMMON.rule("newYearsDay", tags=DAY_OFF_TAGS, substitution=NEAREST_WEEKDAY),
        _federal("martinLutherKingDay", martin_luther_king_day, Tag.PERSON, since=1986),
        _federal("washingtonsBirthday", washingtons_birthday, Tag.PERSON, since=1879),
        _federal("memorialDay", memorial_day, Tag.WAR, since=1868),
        _federal("juneteenth", juneteenth, Tag.CAUSE, since=2021, substitution=NEAREST_WEEKDAY),
        _federal("independenceDay", independence_day, Tag.COUNTRY, since=1776, substitution=NEAREST_WEEKDAY),
        COMMON.rule("labourDay", tags=DAY_OFF_TAGS | {Tag.CAUSE}, since=1887),
        _federal("columbusDay", columbus_day, Tag.PERSON, since=1937),
        _federal("veteransDay", veterans_day, Tag.WAR, since=1919, substitution=NEAREST_WEEKDAY),
        _federal("thanksgivingDay", thanksgiving_day, since=1863),
        CHRISTIAN.rule("christmasDay", tags=DAY_OFF_TAGS | {Tag.RELIGION}, substitution=NEAREST_WEEKDAY),
        COMMON.rule("valentinesDay", type=HolidayType.OBSERVANCE),
        COMMON.rule("mothersDay", type=HolidayType.OBSERVANCE, tags={Tag.CAUSE}),
        COMMON.rule("fathersDay", type=HolidayType.OBSERVANCE, tags={Tag.CAUSE}),
    ),
)
