"""
Canada (Federal) Holidays

Federal statutory holidays (Canada Labour Code, s. 166):
- New Year's Day (January 1)
- Good Friday (Friday before Easter Sunday)
- Victoria Day (Monday before May 25)
- Canada Day (July 1)
- Labour Day (1st Monday in September)
- National Day for Truth and Reconciliation (September 30) - Since 2021
- Thanksgiving Day (2nd Monday in October)
- Remembrance Day (November 11)
- Christmas Day (December 25)
- Boxing Day (December 26)

Observed holidays: When a fixed-date holiday falls on a weekend, the next
working day is the observed day off.

Provinces extend this set; see canada_ontario.py.
"""
from __future__ import annotations

from datetime import date

from ..catalog import CHRISTIAN, COMMON, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import MONDAY, NEXT_WORKING_DAY, fixed_date, nth_weekday, weekday_on_or_before
from .base import ProviderDefinition

BOXING_DAY_NAMES = {
    "en_US": "Boxing Day",
    "en_CA": "Boxing Day",
    "en_GB": "Boxing Day",
    "fr_CA": "Lendemain de Noël",
}


def victoria_day(year: int) -> date:
    return weekday_on_or_before(fixed_date(year, 5, 24), MONDAY)


def canada_day(year: int) -> date:
    return fixed_date(year, 7, 1)


def truth_and_reconciliation_day(year: int) -> date:
    return fixed_date(year, 9, 30)


def thanksgiving_day(year: int) -> date:
    return nth_weekday(year, 10, MONDAY, 2)


def remembrance_day(year: int) -> date:
    return fixed_date(year, 11, 11)


_RELIGIOUS = DAY_OFF_TAGS | {Tag.RELIGION}

CANADA = ProviderDefinition(
    id="CA",
    name="Canada",
    timezone="America/Toronto",
    rules=(
        COMMON.rule("newYearsDay", tags=DAY_OFF_TAGS, substitution=NEXT_WORKING_DAY),
        CHRISTIAN.rule("goodFriday", tags=_RELIGIOUS),
        RuleSpec("victoriaDay", victoria_day, tags=DAY_OFF_TAGS | {Tag.PERSON}, since=1845),
        RuleSpec(
            "canadaDay",
            canada_day,
            tags=DAY_OFF_TAGS | {Tag.COUNTRY},
            since=1879,
            substitution=NEXT_WORKING_DAY,
        ),
        COMMON.rule("labourDay", tags=DAY_OFF_TAGS | {Tag.CAUSE}, since=1894),
        RuleSpec(
            "truthAndReconciliationDay",
            truth_and_reconciliation_day,
            tags=DAY_OFF_TAGS | {Tag.CAUSE},
            since=2021,
            substitution=NEXT_WORKING_DAY,
        ),
        RuleSpec("thanksgivingDay", thanksgiving_day, tags=DAY_OFF_TAGS, since=1957),
        RuleSpec(
            "remembranceDay",
            remembrance_day,
            tags=DAY_OFF_TAGS | {Tag.WAR},
            since=1931,
            substitution=NEXT_WORKING_DAY,
        ),
        CHRISTIAN.rule("christmasDay", tags=_RELIGIOUS, substitution=NEXT_WORKING_DAY),
        CHRISTIAN.rule(
            "secondChristmasDay",
            tags=_RELIGIOUS,
            names=BOXING_DAY_NAMES,
            substitution=NEXT_WORKING_DAY,
        ),
        CHRISTIAN.rule("easter", type=HolidayType.OBSERVANCE, tags={Tag.RELIGION}),
        COMMON.rule("mothersDay", type=HolidayType.OBSERVANCE, tags={Tag.CAUSE}),
        COMMON.rule("fathersDay", type=HolidayType.OBSERVANCE, tags={Tag.CAUSE}),
    ),
)
