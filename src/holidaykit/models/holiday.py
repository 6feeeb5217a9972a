"""
HolidayKit Holiday Model

A Holiday is one concrete occurrence of a named holiday in one year:
short name, day, type, tags and localized names. Instances are frozen;
operations that change translations or locale return a new instance.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union
from zoneinfo import ZoneInfo

from ..config import DEFAULT_LOCALE
from ..exceptions import InvalidArgumentError
from ..translations import LocaleRegistry, Translations, default_translations
from .enums import HolidayType, Tag
from .results import BuildResult, capture


@dataclass(frozen=True)
class Holiday:
    """
    One holiday occurrence.

    Attributes:
        short_name: Stable identifier shared across locales (e.g. "easterMonday")
        date: The calendar day
        type: Formal classification
        tags: Semantic labels
        translations: Locale -> display name
        display_locale: Locale used by ``name``; must be registered in ``locales``
        timezone: IANA timezone of the jurisdiction
        locales: Registry the display locale is checked against (packaged
            registry when omitted); its default locale is the name fallback
    """
    short_name: str
    date: date
    type: HolidayType = HolidayType.OFFICIAL
    tags: frozenset[Tag] = frozenset()
    translations: Mapping[str, str] = field(default_factory=dict, hash=False)
    display_locale: str = DEFAULT_LOCALE
    timezone: str = "UTC"
    locales: Optional[LocaleRegistry] = field(default=None, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.short_name, str) or not self.short_name.strip():
            raise InvalidArgumentError("Holiday name can not be blank.")

        registry = self.locales if self.locales is not None else default_translations().locales
        registry.require(self.display_locale)

        day = self.date
        if isinstance(day, datetime):
            day = day.date()
        elif not isinstance(day, date):
            raise InvalidArgumentError(
                f"Holiday {self.short_name}: date must be a datetime.date, got {type(day).__name__}",
            )

        try:
            holiday_type = HolidayType(self.type)
            tags = frozenset(Tag(t) for t in self.tags)
        except ValueError as e:
            raise InvalidArgumentError(f"Holiday {self.short_name}: {e}")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "date", day)
        object.__setattr__(self, "type", holiday_type)
        object.__setattr__(self, "tags", tags)
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))
        object.__setattr__(self, "locales", registry)

    # -------------------------------------------------------------------------
    # Construction with locale validation
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        short_name: str,
        names: Optional[Mapping[str, str]],
        day: Union[date, datetime],
        *,
        locales: LocaleRegistry,
        locale: str = DEFAULT_LOCALE,
        holiday_type: Union[HolidayType, str] = HolidayType.OFFICIAL,
        tags: Iterable[Union[Tag, str]] = (),
        timezone: str = "UTC",
    ) -> Holiday:
        """
        Create a holiday, validating the display locale against ``locales``.

        Raises:
            InvalidArgumentError: If the short name is blank or the date/type/tags are malformed
            UnknownLocaleError: If ``locale`` is not registered
        """
        return cls(
            short_name=short_name,
            date=day,
            type=holiday_type,
            tags=frozenset(tags),
            translations=dict(names or {}),
            display_locale=locale,
            timezone=timezone,
            locales=locales,
        )

    @classmethod
    def try_create(cls, *args: Any, **kwargs: Any) -> BuildResult[Holiday]:
        """Like create(), but returns the error as a BuildResult instead of raising."""
        return capture(cls.create, *args, **kwargs)

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """
        Display name: the display-locale translation, else the default-locale
        translation, else the short name.
        """
        if self.display_locale in self.translations:
            return self.translations[self.display_locale]
        if self.locales.default_locale in self.translations:
            return self.translations[self.locales.default_locale]
        return self.short_name

    def merge_global_translations(
        self, global_translations: Union[Translations, Mapping[str, str]]
    ) -> Holiday:
        """
        Merge a global table into this holiday's translations.

        Instance translations win for the same locale.
        """
        if isinstance(global_translations, Translations):
            global_names = global_translations.for_holiday(self.short_name)
        else:
            global_names = dict(global_translations)
        return dataclasses.replace(self, translations={**global_names, **self.translations})

    def with_locale(self, locale: str, locales: Optional[LocaleRegistry] = None) -> Holiday:
        """Same holiday displayed in ``locale``, checked against ``locales`` or the current registry."""
        return dataclasses.replace(
            self, display_locale=locale, locales=locales if locales is not None else self.locales
        )

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def datetime(self) -> datetime:
        """Midnight at the start of the day, in the holiday's timezone."""
        return datetime.combine(self.date, time.min, tzinfo=ZoneInfo(self.timezone))

    def has_tag(self, tag: Union[Tag, str]) -> bool:
        return Tag(tag) in self.tags

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "short_name": self.short_name,
            "name": self.name,
            "date": self.iso_date,
            "type": self.type.value,
            "tags": sorted(t.value for t in self.tags),
            "timezone": self.timezone,
        }

    def __str__(self) -> str:
        return self.iso_date


__all__ = ["Holiday"]
