"""
Denmark Holidays

Public holidays (helligdage) and the days the Opening Hours Act
(Lukkeloven) treats as closing days.

Great Prayer Day (Store Bededag), the fourth Friday after Easter, was a
public holiday from 1686 and abolished from 2024.
"""
from __future__ import annotations

from datetime import date

from ..catalog import CHRISTIAN, COMMON, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import ASCENSION_DAY, GREAT_PRAYER_DAY, easter_offset, fixed_date
from .base import ProviderDefinition


def great_prayer_day(year: int) -> date:
    return easter_offset(year, GREAT_PRAYER_DAY)


def day_after_ascension_day(year: int) -> date:
    return easter_offset(year, ASCENSION_DAY + 1)


def constitution_day(year: int) -> date:
    return fixed_date(year, 6, 5)


_RELIGIOUS = DAY_OFF_TAGS | {Tag.RELIGION}

DENMARK = ProviderDefinition(
    id="DK",
    name="Denmark",
    timezone="Europe/Copenhagen",
    rules=(
        COMMON.rule("newYearsDay", tags=DAY_OFF_TAGS),
        *CHRISTIAN.rules(
            "maundyThursday",
            "goodFriday",
            "easter",
            "easterMonday",
            "ascensionDay",
            "pentecost",
            "pentecostMonday",
            "christmasDay",
            "secondChristmasDay",
            tags=_RELIGIOUS,
        ),
        RuleSpec(
            "greatPrayerDay",
            great_prayer_day,
            tags=_RELIGIOUS,
            names={"da_DK": "Store Bededag"},
            since=1686,
            until=2023,
        ),
        # Closing days under the Opening Hours Act
        CHRISTIAN.rule(
            "christmasEve",
            type=HolidayType.OBSERVANCE,
            tags={Tag.DAY_OFF_SOME, Tag.SHOP_CLOSED, Tag.BANK_CLOSED, Tag.EVE, Tag.RELIGION},
        ),
        COMMON.rule(
            "newYearsEve",
            type=HolidayType.OBSERVANCE,
            tags={Tag.DAY_OFF_SOME, Tag.SHOP_CLOSED_PARTIAL, Tag.BANK_CLOSED, Tag.EVE},
        ),
        RuleSpec(
            "constitutionDay",
            constitution_day,
            type=HolidayType.OBSERVANCE,
            tags={Tag.DAY_OFF_SOME, Tag.SHOP_CLOSED, Tag.BANK_CLOSED, Tag.COUNTRY},
            since=1849,
        ),
        # Whole or half day off by collective agreement in many industries
        COMMON.rule(
            "internationalWorkersDay",
            type=HolidayType.OBSERVANCE,
            tags={Tag.DAY_OFF_SOME, Tag.DAY_OFF_PARTIAL, Tag.CAUSE},
        ),
        RuleSpec(
            "dayAfterAscensionDay",
            day_after_ascension_day,
            type=HolidayType.BANK,
            tags={Tag.BANK_CLOSED, Tag.DAY_AFTER},
        ),
    ),
)
