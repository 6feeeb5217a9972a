"""
Norway Holidays

Constitution Day (17 May) is celebrated from 1836, the first year the
Storting marked it officially.
"""
from __future__ import annotations

from datetime import date

from ..catalog import CHRISTIAN, COMMON, RuleSpec
from ..models import DAY_OFF_TAGS, Tag
from ..rules import fixed_date
from .base import ProviderDefinition


def constitution_day(year: int) -> date:
    return fixed_date(year, 5, 17)


NORWAY = ProviderDefinition(
    id="NO",
    name="Norway",
    timezone="Europe/Oslo",
    rules=(
        COMMON.rule("newYearsDay", tags=DAY_OFF_TAGS),
        COMMON.rule("internationalWorkersDay", tags=DAY_OFF_TAGS | {Tag.CAUSE}),
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
            tags=DAY_OFF_TAGS | {Tag.RELIGION},
        ),
        RuleSpec(
            "constitutionDay",
            constitution_day,
            tags=DAY_OFF_TAGS | {Tag.COUNTRY},
            names={"nb_NO": "Nasjonaldagen"},
            since=1836,
        ),
    ),
)
