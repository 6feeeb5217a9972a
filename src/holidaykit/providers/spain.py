"""
Spain Holidays

National holidays (fiestas nacionales). Regions extend this set; see
spain_navarre.py.
"""
from __future__ import annotations

from datetime import date

from ..catalog import CHRISTIAN, COMMON, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import fixed_date
from .base import ProviderDefinition


def national_day(year: int) -> date:
    """Fiesta Nacional de España."""
    return fixed_date(year, 10, 12)


def constitution_day(year: int) -> date:
    return fixed_date(year, 12, 6)


_RELIGIOUS = DAY_OFF_TAGS | {Tag.RELIGION}

SPAIN = ProviderDefinition(
    id="ES",
    name="Spain",
    timezone="Europe/Madrid",
    rules=(
        COMMON.rule("newYearsDay", tags=DAY_OFF_TAGS),
        CHRISTIAN.rule("epiphany", tags=_RELIGIOUS),
        CHRISTIAN.rule("goodFriday", tags=_RELIGIOUS),
        COMMON.rule("internationalWorkersDay", tags=DAY_OFF_TAGS | {Tag.CAUSE}),
        CHRISTIAN.rule("assumptionOfMary", tags=_RELIGIOUS),
        RuleSpec("nationalDay", national_day, tags=DAY_OFF_TAGS | {Tag.COUNTRY}, since=1981),
        CHRISTIAN.rule("allSaintsDay", tags=_RELIGIOUS),
        RuleSpec("constitutionDay", constitution_day, tags=DAY_OFF_TAGS | {Tag.COUNTRY}, since=1978),
        CHRISTIAN.rule("immaculateConception", tags=_RELIGIOUS),
        CHRISTIAN.rule("christmasDay", tags=_RELIGIOUS),
        CHRISTIAN.rule("easter", type=HolidayType.OBSERVANCE, tags={Tag.RELIGION}),
        COMMON.rule("valentinesDay", type=HolidayType.OBSERVANCE),
        COMMON.rule("summerTime", type=HolidayType.SEASON),
        COMMON.rule("winterTime", type=HolidayType.SEASON),
    ),
)
