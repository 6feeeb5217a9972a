"""
HolidayKit Enumerations

Holiday types and semantic tags.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Holiday Types
# =============================================================================

class HolidayType(str, Enum):
    """Formal classification of a holiday. Exactly one per holiday."""
    OFFICIAL = "official"          # National/federal public holiday
    OBSERVANCE = "observance"      # Celebrated, but not a day off by law
    SEASON = "season"              # Seasonal marker (e.g. start of summer time)
    BANK = "bank"                  # Bank holiday
    OTHER = "other"


# =============================================================================
# Tags
# =============================================================================

class Tag(str, Enum):
    """
    Non-exclusive semantic labels describing what a holiday is about
    and what it does to daily life. One canonical tag per meaning.
    """
    # Subject
    COUNTRY = "country"            # Constitution Day, National Day
    RELIGION = "religion"          # Easter, Christmas Eve
    PERSON = "person"              # Martin Luther King Jr. Day
    CAUSE = "cause"                # Labour Day, Mother's Day
    WAR = "war"                    # Armistice Day
    EVE = "eve"                    # Evening before an important holiday
    DAY_AFTER = "day_after"        # Day after an important holiday

    # Effects
    BANK_CLOSED = "bank_closed"
    SHOP_CLOSED = "shop_closed"                  # Most shops closed
    SHOP_CLOSED_SOME = "shop_closed_some"        # A significant number closed
    SHOP_CLOSED_PARTIAL = "shop_closed_partial"  # Closed part of the day
    DAY_OFF = "day_off"                          # Most employees off
    DAY_OFF_SOME = "day_off_some"
    DAY_OFF_PARTIAL = "day_off_partial"

    # Official scope
    REGION = "region"              # Only some regions
    STATE_MANY = "state_many"      # At least half of the federal states
    STATE_FEW = "state_few"        # Less than half of the federal states


# Tags shared by most public holidays that close offices, shops and banks
DAY_OFF_TAGS: frozenset[Tag] = frozenset({Tag.DAY_OFF, Tag.SHOP_CLOSED, Tag.BANK_CLOSED})
