"""
HolidayKit Working-Day Calendar

Working-day arithmetic on top of a holiday provider. A provider covers a
single year; ProviderCalendar builds one provider per year on demand and
caches the resulting holiday dates, so ranges and offsets may cross year
boundaries. Substitutes a provider observes in a neighbouring year
(``Provider.outside_year``) count for the year they fall in.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Optional, Union

from .config import DEFAULT_LOCALE
from .models import Holiday, HolidayType
from .providers import DAY_OFF_TYPES, Provider, ProviderDefinition, get_definition
from .translations import Translations

logger = logging.getLogger(__name__)


@dataclass
class ProviderCalendar:
    """
    Working-day calendar for one jurisdiction.

    A working day is a day that is not a weekend day of the jurisdiction and
    not a holiday of one of ``holiday_types`` (official and bank holidays
    by default).

    Usage:
        calendar = ProviderCalendar("US")
        calendar.add_working_days(date(2024, 7, 3), 1)   # date(2024, 7, 5)
    """

    identifier: Union[str, ProviderDefinition]
    holiday_types: Iterable[Union[HolidayType, str]] = DAY_OFF_TYPES
    locale: str = DEFAULT_LOCALE
    translations: Optional[Translations] = None

    # Cache for computed providers
    _providers: dict[int, Provider] = field(default_factory=dict, repr=False)
    _holiday_cache: dict[int, frozenset[date]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.identifier, ProviderDefinition):
            self.definition = self.identifier
        else:
            self.definition = get_definition(self.identifier)
        self.holiday_types = frozenset(HolidayType(t) for t in self.holiday_types)

    @property
    def weekend_days(self) -> frozenset[int]:
        return self.definition.weekend_days

    # -------------------------------------------------------------------------
    # Per-year data
    # -------------------------------------------------------------------------

    def provider(self, year: int) -> Provider:
        """Provider for ``year``, built once and cached."""
        if year not in self._providers:
            self._providers[year] = Provider(
                self.definition, year, self.locale, translations=self.translations
            )
        return self._providers[year]

    def _spilled_into(self, year: int) -> list[Holiday]:
        """Substitutes of the neighbouring years observed in ``year``."""
        return [
            h
            for neighbour in (year - 1, year + 1)
            for h in self.provider(neighbour).outside_year
            if h.date.year == year
        ]

    def _get_holidays_for_year(self, year: int) -> frozenset[date]:
        """Get holiday dates for a year, using cache."""
        if year not in self._holiday_cache:
            holidays = [*self.provider(year).holidays, *self._spilled_into(year)]
            self._holiday_cache[year] = frozenset(
                h.date for h in holidays if h.type in self.holiday_types
            )
            logger.debug(
                "Cached %d %s holiday dates for %d",
                len(self._holiday_cache[year]),
                self.definition.id,
                year,
            )
        return self._holiday_cache[year]

    # -------------------------------------------------------------------------
    # Day checks
    # -------------------------------------------------------------------------

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday of the configured types."""
        return d in self._get_holidays_for_year(d.year)

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_working_day(self, d: date) -> bool:
        """
        Check if a date is a working day.

        A working day is not a weekend day and not a holiday.
        """
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def holidays_in_range(self, start: date, end: date) -> list[Holiday]:
        """
        Get all holidays of the configured types within a date range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive)

        Returns:
            Holidays in chronological order
        """
        if start > end:
            return []
        found: list[Holiday] = []
        for year in range(start.year, end.year + 1):
            found.extend(
                h for h in [*self.provider(year).holidays, *self._spilled_into(year)]
                if start <= h.date <= end and h.type in self.holiday_types
            )
        return sorted(found, key=lambda h: h.date)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add_working_days(self, start: date, days: int) -> date:
        """
        Add working days to a date.

        Args:
            start: Starting date
            days: Number of working days to add (can be negative)

        Returns:
            The resulting date after adding working days
        """
        if days == 0:
            return start

        direction = 1 if days > 0 else -1
        remaining = abs(days)
        current = start

        while remaining > 0:
            current += timedelta(days=direction)
            if self.is_working_day(current):
                remaining -= 1

        return current

    def subtract_working_days(self, start: date, days: int) -> date:
        return self.add_working_days(start, -days)

    def working_days_between(self, start: date, end: date) -> int:
        """
        Count working days between two dates.

        Args:
            start: Start date (exclusive)
            end: End date (inclusive)

        Returns:
            Number of working days between the dates; 0 when end <= start
        """
        if start >= end:
            return 0

        count = 0
        current = start + timedelta(days=1)

        while current <= end:
            if self.is_working_day(current):
                count += 1
            current += timedelta(days=1)

        return count

    def next_working_day(self, d: date) -> date:
        """The first working day on or after ``d``."""
        current = d
        while not self.is_working_day(current):
            current += timedelta(days=1)
        return current

    def previous_working_day(self, d: date) -> date:
        """The last working day on or before ``d``."""
        current = d
        while not self.is_working_day(current):
            current -= timedelta(days=1)
        return current
