"""
United Arab Emirates Holidays

Islamic holidays use the tabular Hijri calendar; announced dates depend on
moon sighting and may differ by a day. When a Hijri date occurs twice in
a Gregorian year only the first occurrence is listed.

The weekend is Saturday and Sunday (since 2022).
"""
from __future__ import annotations

from datetime import date

from ..catalog import COMMON, ISLAMIC, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import fixed_date
from .base import ProviderDefinition


def commemoration_day(year: int) -> date:
    """Martyrs' Day."""
    return fixed_date(year, 11, 30)


def national_day(year: int) -> date:
    return fixed_date(year, 12, 2)


def national_day_second_day(year: int) -> date:
    return fixed_date(year, 12, 3)


_RELIGIOUS = DAY_OFF_TAGS | {Tag.RELIGION}

UNITED_ARAB_EMIRATES = ProviderDefinition(
    id="AE",
    name="United Arab Emirates",
    timezone="Asia/Dubai",
    rules=(
        COMMON.rule("newYearsDay", tags=DAY_OFF_TAGS),
        *ISLAMIC.rules(
            "islamicNewYear",
            "prophetsBirthday",
            "eidAlFitr",
            "eidAlFitrSecondDay",
            "eidAlFitrThirdDay",
            "arafatDay",
            "eidAlAdha",
            "eidAlAdhaSecondDay",
            "eidAlAdhaThirdDay",
            tags=_RELIGIOUS,
        ),
        *ISLAMIC.rules("israAndMiraj", "ramadanBegins", type=HolidayType.OBSERVANCE, tags={Tag.RELIGION}),
        RuleSpec("commemorationDay", commemoration_day, tags=DAY_OFF_TAGS | {Tag.WAR}, since=2015),
        RuleSpec("nationalDay", national_day, tags=DAY_OFF_TAGS | {Tag.COUNTRY}, since=1972),
        RuleSpec("nationalDaySecondDay", national_day_second_day, tags=DAY_OFF_TAGS | {Tag.COUNTRY}, since=1972),
    ),
)
