"""
HolidayKit Provider Base

A ProviderDefinition is the data-driven rule set of one jurisdiction: an
ordered list of rule entries plus an optional parent definition it extends.
A Provider runs a definition for one year and locale and holds the
resulting HolidayCollection.

Initialization order:
1. Parent definitions, root first
2. The definition's own entries, in declared order. An entry may be
   unconditional, year-gated, an override (same short name as an earlier
   holiday; last write wins) or a suppression
3. Substitution pass: holidays whose rule carries a SubstitutionPolicy and
   that fall on an excluded weekday get a ``substituteHoliday:<name>`` entry.
   A substitute observed in the previous or next year goes to
   ``outside_year`` instead of ``holidays``
4. The collections are locked
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date
from typing import Iterator, Mapping, Optional, Sequence, Union

from ..catalog import RuleEntry, RuleSpec, Suppression
from ..config import DEFAULT_LOCALE
from ..exceptions import HolidayKitError, InvalidArgumentError
from ..models import Holiday, HolidayCollection, HolidayType
from ..rules import WEEKEND
from ..translations import Translations, default_translations

logger = logging.getLogger(__name__)

SUBSTITUTE_PREFIX = "substituteHoliday"

# Holiday types that make a day a non-working day
DAY_OFF_TYPES: frozenset[HolidayType] = frozenset({HolidayType.OFFICIAL, HolidayType.BANK})


# =============================================================================
# Provider Definition
# =============================================================================

@dataclass(frozen=True)
class ProviderDefinition:
    """
    Rule set of one jurisdiction.

    Attributes:
        id: ISO 3166 code (subdivisions as "ES-NA")
        name: English name
        timezone: IANA timezone identifier
        rules: Ordered rule entries
        parent: Definition this one extends (single inheritance)
        weekend_days: Non-working weekdays (0=Monday, 6=Sunday)
    """
    id: str
    name: str
    timezone: str
    rules: tuple[RuleEntry, ...] = ()
    parent: Optional[ProviderDefinition] = None
    weekend_days: frozenset[int] = field(default_factory=lambda: WEEKEND)

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise InvalidArgumentError("Provider id can not be blank.")
        for entry in self.rules:
            if not isinstance(entry, (RuleSpec, Suppression)):
                raise InvalidArgumentError(
                    f"Provider {self.id}: unsupported rule entry {entry!r}",
                    provider_id=self.id,
                )
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "weekend_days", frozenset(self.weekend_days))

    def lineage(self) -> tuple[ProviderDefinition, ...]:
        """This definition and its ancestors, root first."""
        chain: list[ProviderDefinition] = []
        current: Optional[ProviderDefinition] = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return tuple(reversed(chain))

    def extend(
        self,
        id: str,
        name: str,
        rules: Sequence[RuleEntry],
        *,
        timezone: Optional[str] = None,
        weekend_days: Optional[frozenset[int]] = None,
    ) -> ProviderDefinition:
        """Create a child definition (region) on top of this one."""
        return ProviderDefinition(
            id=id,
            name=name,
            timezone=timezone or self.timezone,
            rules=tuple(rules),
            parent=self,
            weekend_days=self.weekend_days if weekend_days is None else weekend_days,
        )


# =============================================================================
# Provider
# =============================================================================

class Provider:
    """
    Holidays of one jurisdiction for one year.

    Usage:
        provider = Provider(NORWAY, 2024, locale="nb_NO")
        provider.get("constitutionDay").name      # 'Nasjonaldagen'
        [h.iso_date for h in provider.holidays.official()]
    """

    def __init__(
        self,
        definition: ProviderDefinition,
        year: int,
        locale: str = DEFAULT_LOCALE,
        *,
        translations: Optional[Translations] = None,
        names: Optional[Mapping[str, Mapping[str, str]]] = None,
    ) -> None:
        if isinstance(year, bool) or not isinstance(year, int):
            raise InvalidArgumentError(
                f"Year must be an integer, got {year!r}", provider_id=definition.id
            )

        self.definition = definition
        self.year = year
        self.translations = translations if translations is not None else default_translations()
        self.locale = self.translations.locales.require(locale)

        self._name_overrides: dict[str, dict[str, str]] = {}
        for short_name, per_locale in (names or {}).items():
            for override_locale in per_locale:
                self.translations.locales.require(override_locale)
            self._name_overrides[short_name] = dict(per_locale)

        self.holidays = HolidayCollection()
        # Substitutes observed in a neighbouring year (e.g. US New Year's Day on Dec 31)
        self.outside_year = HolidayCollection()
        self._rules: dict[str, RuleSpec] = {}
        self._initialize()

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def timezone(self) -> str:
        return self.definition.timezone

    @property
    def weekend_days(self) -> frozenset[int]:
        return self.definition.weekend_days

    def __repr__(self) -> str:
        return f"<Provider {self.id} {self.year} {self.locale}: {len(self.holidays)} holidays>"

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def _initialize(self) -> None:
        if not MINYEAR <= self.year <= MAXYEAR:
            # Not representable as a date: accepted, simply no holidays
            logger.debug("Year %s outside date range; provider %s is empty", self.year, self.id)
            self.holidays.lock()
            self.outside_year.lock()
            return

        try:
            for definition in self.definition.lineage():
                for entry in definition.rules:
                    if isinstance(entry, Suppression):
                        self._suppress(entry)
                    else:
                        self._apply(entry)
            self._add_substitutes()
        except HolidayKitError as e:
            if e.provider_id is None:
                e.provider_id = self.id
            raise

        self.holidays.lock()
        self.outside_year.lock()
        logger.debug(
            "Initialized %s for %d with %d holidays",
            self.id,
            self.year,
            len(self.holidays),
            extra={"provider_id": self.id, "year": self.year, "holiday_count": len(self.holidays)},
        )

    def _apply(self, spec: RuleSpec) -> None:
        if not spec.applies(self.year):
            return
        day = spec.compute(self.year)
        if day is None:
            return
        self.holidays.add(self._make_holiday(spec, day))
        self._rules[spec.short_name] = spec

    def _suppress(self, suppression: Suppression) -> None:
        if suppression.applies(self.year):
            self.holidays.remove(suppression.short_name)
            self._rules.pop(suppression.short_name, None)

    def _names_for(self, short_name: str, local_names: Mapping[str, str]) -> dict[str, str]:
        # Global table < rule-local names < per-instance overrides
        return {
            **self.translations.for_holiday(short_name),
            **local_names,
            **self._name_overrides.get(short_name, {}),
        }

    def _make_holiday(self, spec: RuleSpec, day: date) -> Holiday:
        return Holiday(
            short_name=spec.short_name,
            date=day,
            type=spec.type,
            tags=spec.tags,
            translations=self._names_for(spec.short_name, spec.names),
            display_locale=self.locale,
            timezone=self.timezone,
            locales=self.translations.locales,
        )

    def _add_substitutes(self) -> None:
        taken = {h.date for h in self.holidays if h.type in DAY_OFF_TYPES}
        for holiday in list(self.holidays):
            spec = self._rules.get(holiday.short_name)
            if spec is None or spec.substitution is None:
                continue
            try:
                observed = spec.substitution.observe(holiday.date, taken)
            except OverflowError:
                continue
            if observed == holiday.date:
                continue
            if observed.year != self.year:
                logger.debug(
                    "Substitute for %s falls on %s outside %d; kept in outside_year",
                    holiday.short_name, observed, self.year,
                )
                self.outside_year.add(self._make_substitute(holiday, observed))
                continue
            taken.add(observed)
            self.holidays.add(self._make_substitute(holiday, observed))

    def _make_substitute(self, holiday: Holiday, observed: date) -> Holiday:
        short_name = f"{SUBSTITUTE_PREFIX}:{holiday.short_name}"
        templates = self.translations.for_holiday(SUBSTITUTE_PREFIX)
        fallback = self.translations.locales.default_locale
        names: dict[str, str] = {}
        for locale, template in templates.items():
            if locale in holiday.translations:
                names[locale] = template.format(name=holiday.translations[locale])
        if fallback not in names:
            template = templates.get(fallback, "{name} (substitute day)")
            names[fallback] = template.format(name=holiday.translations.get(fallback, holiday.short_name))

        return Holiday(
            short_name=short_name,
            date=observed,
            type=holiday.type,
            tags=holiday.tags,
            translations=self._names_for(short_name, names),
            display_locale=self.locale,
            timezone=self.timezone,
            locales=self.translations.locales,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, short_name: str) -> Optional[Holiday]:
        return self.holidays.get(short_name)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self.holidays)

    def __len__(self) -> int:
        return len(self.holidays)

    def __contains__(self, short_name: object) -> bool:
        return short_name in self.holidays

    def holiday_dates(self) -> list[date]:
        return self.holidays.dates()

    def _check_year(self, day: date) -> None:
        if day.year != self.year:
            raise InvalidArgumentError(
                f"{day.isoformat()} is outside provider year {self.year}",
                provider_id=self.id,
            )

    def is_holiday(self, day: date, types: Optional[Union[frozenset[HolidayType], set]] = None) -> bool:
        """
        Check whether any holiday (optionally restricted to ``types``) falls on ``day``.

        Raises:
            InvalidArgumentError: If ``day`` is not in the provider's year
        """
        self._check_year(day)
        return any(
            h.date == day and (types is None or h.type in types)
            for h in self.holidays
        )

    def is_weekend_day(self, day: date) -> bool:
        return day.weekday() in self.weekend_days

    def is_working_day(self, day: date) -> bool:
        """Not a weekend day and not an official or bank holiday."""
        if self.is_holiday(day, DAY_OFF_TYPES):
            return False
        return not self.is_weekend_day(day)
