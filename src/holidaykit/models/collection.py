"""
HolidayKit Holiday Collection

Ordered container of Holidays for one provider and year.

- Keyed by short name: adding a holiday whose short name is already present
  replaces the earlier entry (override semantics)
- Iteration is chronological; equal dates keep insertion order
- Filtering returns a new locked collection and never touches the source
- A provider locks its collection once initialization completes
"""
from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from ..exceptions import CollectionLockedError
from .enums import HolidayType, Tag
from .holiday import Holiday

HolidayPredicate = Callable[[Holiday], bool]


class HolidayCollection:
    """
    Holidays keyed by short name, iterated by date.

    Usage:
        collection = HolidayCollection()
        collection.add(holiday)
        official = collection.official()
        bank_days = official.with_tags(Tag.BANK_CLOSED)
    """

    def __init__(self, holidays: Iterable[Holiday] = (), *, locked: bool = False) -> None:
        # short_name -> (sequence, holiday); sequence breaks date ties
        self._entries: dict[str, tuple[int, Holiday]] = {}
        self._sequence = 0
        self._locked = False
        for holiday in holidays:
            self.add(holiday)
        self._locked = locked

    # -------------------------------------------------------------------------
    # Mutation (only while unlocked)
    # -------------------------------------------------------------------------

    def _check_unlocked(self) -> None:
        if self._locked:
            raise CollectionLockedError("Holiday collection is read-only")

    def add(self, holiday: Holiday) -> Optional[Holiday]:
        """
        Add a holiday, replacing any entry with the same short name.

        A replacement takes the position of a new insertion.

        Returns:
            The replaced holiday, or None
        """
        self._check_unlocked()
        previous = self._entries.pop(holiday.short_name, None)
        self._entries[holiday.short_name] = (self._sequence, holiday)
        self._sequence += 1
        return previous[1] if previous else None

    def remove(self, short_name: str) -> bool:
        """Remove a holiday by short name. Returns True if it was present."""
        self._check_unlocked()
        return self._entries.pop(short_name, None) is not None

    def lock(self) -> HolidayCollection:
        self._locked = True
        return self

    @property
    def locked(self) -> bool:
        return self._locked

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, short_name: str) -> Optional[Holiday]:
        entry = self._entries.get(short_name)
        return entry[1] if entry else None

    def __getitem__(self, short_name: str) -> Holiday:
        entry = self._entries.get(short_name)
        if entry is None:
            raise KeyError(short_name)
        return entry[1]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Holiday):
            return item.short_name in self._entries
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[Holiday]:
        ordered = sorted(self._entries.values(), key=lambda e: (e[1].date, e[0]))
        return iter([holiday for _, holiday in ordered])

    def __repr__(self) -> str:
        state = "locked" if self._locked else "open"
        return f"<HolidayCollection {len(self)} holidays ({state})>"

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def filter(self, predicate: HolidayPredicate) -> HolidayCollection:
        """Return a new locked collection with the holidays matching ``predicate``."""
        result = HolidayCollection()
        for seq, holiday in sorted(self._entries.values(), key=lambda e: e[0]):
            if predicate(holiday):
                result._entries[holiday.short_name] = (seq, holiday)
        result._sequence = self._sequence
        return result.lock()

    def by_type(self, *types: Union[HolidayType, str]) -> HolidayCollection:
        wanted = {HolidayType(t) for t in types}
        return self.filter(lambda h: h.type in wanted)

    def official(self) -> HolidayCollection:
        return self.by_type(HolidayType.OFFICIAL)

    def observances(self) -> HolidayCollection:
        return self.by_type(HolidayType.OBSERVANCE)

    def bank(self) -> HolidayCollection:
        return self.by_type(HolidayType.BANK)

    def seasonal(self) -> HolidayCollection:
        return self.by_type(HolidayType.SEASON)

    def with_tags(self, *tags: Union[Tag, str], match_all: bool = False) -> HolidayCollection:
        """Holidays carrying any (or, with match_all, every) of the given tags."""
        wanted = frozenset(Tag(t) for t in tags)
        if match_all:
            return self.filter(lambda h: wanted <= h.tags)
        return self.filter(lambda h: bool(wanted & h.tags))

    def between(self, start: date, end: date, inclusive: bool = True) -> HolidayCollection:
        if inclusive:
            return self.filter(lambda h: start <= h.date <= end)
        return self.filter(lambda h: start < h.date < end)

    def on(self, day: date) -> HolidayCollection:
        return self.filter(lambda h: h.date == day)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def dates(self) -> list[date]:
        return [h.date for h in self]

    def short_names(self) -> list[str]:
        return [h.short_name for h in self]

    def names(self) -> list[str]:
        return [h.name for h in self]

    def to_list(self) -> list[dict[str, Any]]:
        return [h.to_dict() for h in self]
