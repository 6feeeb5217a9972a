"""
HolidayKit Models

Holiday entity, its enumerations, the keyed collection and construction results.
"""
from __future__ import annotations

from .collection import HolidayCollection, HolidayPredicate
from .enums import DAY_OFF_TAGS, HolidayType, Tag
from .holiday import Holiday
from .results import BuildResult, capture

__all__ = [
    "HolidayType",
    "Tag",
    "DAY_OFF_TAGS",
    "Holiday",
    "HolidayCollection",
    "HolidayPredicate",
    "BuildResult",
    "capture",
]
