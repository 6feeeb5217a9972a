"""
HolidayKit Substitution Policy

Computes the observed date of a holiday that falls on an excluded weekday.

Jurisdictions differ in where the day goes:
- next working day (UK bank holidays)
- next Monday (some Canadian provinces)
- nearest weekday: Saturday -> Friday, Sunday -> Monday (US federal)
- previous working day
- nowhere (no substitution)

A day that is not excluded is always returned unchanged, so applying a
policy to its own output is a no-op.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import AbstractSet

from ..exceptions import InvalidArgumentError
from .dates import MONDAY, SATURDAY, SUNDAY

WEEKEND: frozenset[int] = frozenset({SATURDAY, SUNDAY})


class ShiftRule(str, Enum):
    """Where an excluded holiday is moved to."""
    NONE = "none"
    NEXT_WORKING_DAY = "next_working_day"
    NEXT_MONDAY = "next_monday"
    NEAREST_WEEKDAY = "nearest_weekday"
    PREVIOUS_WORKING_DAY = "previous_working_day"


@dataclass(frozen=True)
class SubstitutionPolicy:
    """
    Observed-date rule for one holiday.

    Attributes:
        shift: Where to move an excluded day
        excluded_weekdays: Weekdays that trigger a move (0=Monday, 6=Sunday)
    """
    shift: ShiftRule = ShiftRule.NEXT_WORKING_DAY
    excluded_weekdays: frozenset[int] = field(default_factory=lambda: WEEKEND)

    def __post_init__(self) -> None:
        excluded = frozenset(self.excluded_weekdays)
        if not excluded <= set(range(7)):
            raise InvalidArgumentError(f"Excluded weekdays must be within 0..6, got {sorted(excluded)}")
        if len(excluded) == 7:
            raise InvalidArgumentError("At least one weekday must remain a working day")
        object.__setattr__(self, "shift", ShiftRule(self.shift))
        object.__setattr__(self, "excluded_weekdays", excluded)

    def is_excluded(self, day: date) -> bool:
        return day.weekday() in self.excluded_weekdays

    def observe(self, day: date, taken: AbstractSet[date] = frozenset()) -> date:
        """
        Return the observed date for ``day``.

        Args:
            day: The computed holiday date
            taken: Dates already occupied by other holidays; a moved holiday
                skips them and keeps going in the same direction

        Returns:
            ``day`` itself when it is not excluded (or shift is NONE),
            otherwise the shifted date
        """
        if self.shift is ShiftRule.NONE or not self.is_excluded(day):
            return day

        if self.shift is ShiftRule.NEXT_WORKING_DAY:
            return self._walk(day, 1, taken)
        if self.shift is ShiftRule.PREVIOUS_WORKING_DAY:
            return self._walk(day, -1, taken)
        if self.shift is ShiftRule.NEXT_MONDAY:
            monday = day + timedelta(days=(MONDAY - day.weekday()) % 7 or 7)
            if monday.weekday() in self.excluded_weekdays or monday in taken:
                return self._walk(monday, 1, taken)
            return monday

        # NEAREST_WEEKDAY: whichever side of the excluded block is closer; ties go forward
        back = self._distance(day, -1)
        forward = self._distance(day, 1)
        direction = -1 if back < forward else 1
        return self._walk(day, direction, taken)

    def _distance(self, day: date, direction: int) -> int:
        steps = 0
        current = day
        while self.is_excluded(current):
            current += timedelta(days=direction)
            steps += 1
        return steps

    def _walk(self, day: date, direction: int, taken: AbstractSet[date]) -> date:
        current = day + timedelta(days=direction)
        while self.is_excluded(current) or current in taken:
            current += timedelta(days=direction)
        return current


NO_SUBSTITUTION = SubstitutionPolicy(shift=ShiftRule.NONE)
NEXT_WORKING_DAY = SubstitutionPolicy(shift=ShiftRule.NEXT_WORKING_DAY)
NEXT_MONDAY = SubstitutionPolicy(shift=ShiftRule.NEXT_MONDAY)
NEAREST_WEEKDAY = SubstitutionPolicy(shift=ShiftRule.NEAREST_WEEKDAY)
