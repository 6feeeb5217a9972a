"""
Ontario (Canada) Holidays

Ontario statutory holidays (Employment Standards Act, 2000) differ from the
federal set:
- Family Day (3rd Monday in February) - Ontario specific since 2008
- Civic Holiday (1st Monday in August) - Not statutory but widely observed
- Remembrance Day and the National Day for Truth and Reconciliation are
  federal only
"""
from __future__ import annotations

from datetime import date

from ..catalog import RuleSpec, Suppression
from ..models import DAY_OFF_TAGS, HolidayType, Tag
from ..rules import MONDAY, nth_weekday
from .canada import CANADA


def family_day(year: int) -> date:
    return nth_weekday(year, 2, MONDAY, 3)


def civic_holiday(year: int) -> date:
    return nth_weekday(year, 8, MONDAY, 1)


ONTARIO = CANADA.extend(
    id="CA-ON",
    name="Ontario",
    rules=(
        RuleSpec("familyDay", family_day, tags=DAY_OFF_TAGS | {Tag.REGION}, since=2008),
        RuleSpec(
            "civicHoliday",
            civic_holiday,
            type=HolidayType.OBSERVANCE,
            tags={Tag.DAY_OFF_SOME, Tag.REGION},
        ),
        Suppression("remembranceDay"),
        Suppression("truthAndReconciliationDay"),
    ),
)
