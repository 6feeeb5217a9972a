"""
Israel Holidays

Jewish holidays follow the arithmetic Hebrew calendar. Dates are those of
the day itself; the eve (erev) starting at sunset is not modelled.

The weekend is Friday and Saturday.

Independence Day (5 Iyar) moves to avoid the Sabbath:
- Friday or Saturday -> the preceding Thursday
- Monday -> Tuesday (since 2004, so Memorial Day does not follow the Sabbath)
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..catalog import JEWISH, RuleSpec
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import FRIDAY, MONDAY, SATURDAY, hebrew_date_in_year
from ..rules.hebrew_calendar import IYYAR
from .base import ProviderDefinition


def independence_day(year: int) -> Optional[date]:
    day = hebrew_date_in_year(year, IYYAR, 5)
    if day is None:
        return None
    weekday = day.weekday()
    if weekday == FRIDAY:
        return day - timedelta(days=1)
    if weekday == SATURDAY:
        return day - timedelta(days=2)
    if weekday == MONDAY and year >= 2004:
        return day + timedelta(days=1)
    return day


_RELIGIOUS = DAY_OFF_TAGS | {Tag.RELIGION}

ISRAEL = ProviderDefinition(
    id="IL",
    name="Israel",
    timezone="Asia/Jerusalem",
    weekend_days=frozenset({FRIDAY, SATURDAY}),
    rules=(
        *JEWISH.rules(
            "passover",
            "passoverSeventhDay",
            "shavuot",
            "roshHashanah",
            "roshHashanahSecondDay",
            "yomKippur",
            "sukkot",
            "simchatTorah",
            tags=_RELIGIOUS,
        ),
        RuleSpec("independenceDay", independence_day, tags=DAY_OFF_TAGS | {Tag.COUNTRY}, since=1949),
        *JEWISH.rules("purim", "hanukkah", type=HolidayType.OBSERVANCE, tags={Tag.RELIGION}),
        JEWISH.rule(
            "tishaBAv",
            type=HolidayType.OBSERVANCE,
            tags={Tag.RELIGION, Tag.SHOP_CLOSED_SOME},
        ),
    ),
)
