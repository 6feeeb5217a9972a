"""
HolidayKit Holiday Catalog

Reusable rule groups that providers pick holidays from:

- COMMON: secular holidays (New Year's Day, International Workers' Day, ...)
- CHRISTIAN: Easter cycle and fixed feasts
- JEWISH: Hebrew-calendar holidays
- ISLAMIC: Hijri-calendar holidays

Usage:
    from holidaykit.catalog import CHRISTIAN
    from holidaykit.models import Tag

    rule = CHRISTIAN.rule("easterMonday", tags={Tag.RELIGION})
    rule.compute(2024)   # date(2024, 4, 1)
"""
from __future__ import annotations

from .base import DateRule, RuleEntry, RuleGroup, RuleSpec, Suppression
from .christian import CHRISTIAN
from .common import COMMON
from .islamic import ISLAMIC
from .jewish import JEWISH

__all__ = [
    "DateRule",
    "RuleEntry",
    "RuleGroup",
    "RuleSpec",
    "Suppression",
    "COMMON",
    "CHRISTIAN",
    "JEWISH",
    "ISLAMIC",
]
