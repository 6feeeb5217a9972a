"""
HolidayKit Rule Entries

Building blocks of a provider definition:

- RuleSpec: "emit holiday X computed by f(year), with this type/tags,
  for years in [since, until], observed per this substitution policy"
- Suppression: "drop inherited holiday X for years in [since, until]"
- RuleGroup: a named catalog of date functions (Common, Christian, ...)
  that providers pick rules from
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, Mapping, Optional, Union

from ..exceptions import InvalidArgumentError
from ..models import HolidayType, Tag
from ..rules import SubstitutionPolicy

DateRule = Callable[[int], Optional[date]]


def _in_range(year: int, since: Optional[int], until: Optional[int]) -> bool:
    if since is not None and year < since:
        return False
    if until is not None and year > until:
        return False
    return True


@dataclass(frozen=True)
class RuleSpec:
    """
    One holiday rule inside a provider definition.

    Attributes:
        short_name: Identifier of the emitted holiday
        compute: year -> date, or None when there is no occurrence that year
        type: Holiday type of the emitted holiday
        tags: Tags of the emitted holiday
        names: Rule-local translations; win over the global table
        since: First year the holiday exists (inclusive)
        until: Last year the holiday exists (inclusive)
        substitution: Observed-date policy; a moved day is emitted as a
            separate ``substituteHoliday:<short_name>`` holiday
    """
    short_name: str
    compute: DateRule
    type: HolidayType = HolidayType.OFFICIAL
    tags: frozenset[Tag] = frozenset()
    names: Mapping[str, str] = field(default_factory=dict, compare=False, hash=False)
    since: Optional[int] = None
    until: Optional[int] = None
    substitution: Optional[SubstitutionPolicy] = None

    def __post_init__(self) -> None:
        if not self.short_name or not self.short_name.strip():
            raise InvalidArgumentError("Rule short name can not be blank.")
        if self.since is not None and self.until is not None and self.since > self.until:
            raise InvalidArgumentError(
                f"Rule {self.short_name}: since ({self.since}) is after until ({self.until})"
            )
        object.__setattr__(self, "type", HolidayType(self.type))
        object.__setattr__(self, "tags", frozenset(Tag(t) for t in self.tags))
        object.__setattr__(self, "names", dict(self.names))

    def applies(self, year: int) -> bool:
        return _in_range(year, self.since, self.until)

    def evolve(self, **changes) -> RuleSpec:
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class Suppression:
    """Removes an inherited holiday for the gated years."""
    short_name: str
    since: Optional[int] = None
    until: Optional[int] = None

    def applies(self, year: int) -> bool:
        return _in_range(year, self.since, self.until)


RuleEntry = Union[RuleSpec, Suppression]


@dataclass(frozen=True)
class RuleGroup:
    """
    A reusable catalog of holiday date functions.

    Groups contribute named functions only; they do not take part in the
    provider override chain.

    Usage:
        CHRISTIAN.rule("easterMonday", tags={Tag.RELIGION})
    """
    name: str
    functions: Mapping[str, DateRule] = field(compare=False, hash=False)

    def __contains__(self, short_name: object) -> bool:
        return short_name in self.functions

    def function(self, short_name: str) -> DateRule:
        try:
            return self.functions[short_name]
        except KeyError:
            raise InvalidArgumentError(
                f"{self.name} holidays have no rule named '{short_name}'",
                details={"group": self.name, "short_name": short_name},
            )

    def rule(
        self,
        short_name: str,
        *,
        type: Union[HolidayType, str] = HolidayType.OFFICIAL,
        tags: Iterable[Union[Tag, str]] = (),
        names: Optional[Mapping[str, str]] = None,
        since: Optional[int] = None,
        until: Optional[int] = None,
        substitution: Optional[SubstitutionPolicy] = None,
    ) -> RuleSpec:
        """Build a RuleSpec from one of this group's functions."""
        return RuleSpec(
            short_name=short_name,
            compute=self.function(short_name),
            type=type,
            tags=frozenset(tags),
            names=dict(names or {}),
            since=since,
            until=until,
            substitution=substitution,
        )

    def rules(self, *short_names: str, **options) -> list[RuleSpec]:
        """Several rules sharing the same options."""
        return [self.rule(short_name, **options) for short_name in short_names]
