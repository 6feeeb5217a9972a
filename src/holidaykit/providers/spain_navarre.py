"""
Navarre (Spain) Holidays

Navarre keeps every national holiday and adds regional Christian days.
"""
from __future__ import annotations

from ..catalog import CHRISTIAN
from ..models import HolidayType, Tag
from .spain import SPAIN

NAVARRE = SPAIN.extend(
    id="ES-NA",
    name="Navarre",
    rules=CHRISTIAN.rules(
        "stJosephsDay",
        "maundyThursday",
        "easterMonday",
        type=HolidayType.OBSERVANCE,
        tags={Tag.RELIGION, Tag.REGION},
    ),
)
