"""
HolidayKit - Public Holiday Calculation Engine

HolidayKit computes the public holidays, observances and seasonal markers
of a jurisdiction for a given year, with localized names.

Key Features:
- Data-driven provider definitions with regional inheritance (ES -> ES-NA)
- Year-gated rules, overrides and suppressions
- Computus, Hebrew and tabular Hijri calendar rules
- Substitute days for holidays falling on a weekend
- Locale fallback: display locale, then en_US, then the short name
- Working-day arithmetic across year boundaries

Quick Start:
    from datetime import date
    from holidaykit import create, ProviderCalendar

    provider = create("DK", 2024, locale="da_DK")
    for holiday in provider.holidays.official():
        print(holiday.iso_date, holiday.name)

    calendar = ProviderCalendar("US")
    calendar.add_working_days(date(2024, 7, 3), 1)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    DAY_OFF_TAGS,
    BuildResult,
    Holiday,
    HolidayCollection,
    HolidayType,
    Tag,
)

# =============================================================================
# Providers
# =============================================================================
from .providers import (
    Provider,
    ProviderDefinition,
    available_providers,
    create,
    get_definition,
    try_create,
)
from .calendar import ProviderCalendar

# =============================================================================
# Translations
# =============================================================================
from .translations import (
    LocaleRegistry,
    Translations,
    default_translations,
    load_translations,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CollectionLockedError,
    HolidayKitError,
    InvalidArgumentError,
    InvalidDateError,
    ProviderNotFoundError,
    TranslationLoadError,
    TranslationValidationError,
    UnknownLocaleError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Models
    "DAY_OFF_TAGS",
    "BuildResult",
    "Holiday",
    "HolidayCollection",
    "HolidayType",
    "Tag",
    # Providers
    "Provider",
    "ProviderDefinition",
    "ProviderCalendar",
    "available_providers",
    "create",
    "get_definition",
    "try_create",
    # Translations
    "LocaleRegistry",
    "Translations",
    "default_translations",
    "load_translations",
    # Exceptions
    "HolidayKitError",
    "InvalidArgumentError",
    "UnknownLocaleError",
    "InvalidDateError",
    "ProviderNotFoundError",
    "CollectionLockedError",
    "TranslationLoadError",
    "TranslationValidationError",
]
