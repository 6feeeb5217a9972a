"""
HolidayKit Providers

Holiday providers for supported jurisdictions.

Usage:
    from holidaykit.providers import create, try_create

    provider = create("NO", 2024, locale="nb_NO")
    for holiday in provider.holidays.official():
        print(holiday.iso_date, holiday.name)

    result = try_create("XX", 2024)
    if not result:
        print(result.error.code)      # HK_PROVIDER_NOT_FOUND
"""
from __future__ import annotations

from typing import Mapping, Optional

from ..config import DEFAULT_LOCALE
from ..exceptions import ProviderNotFoundError
from ..models import BuildResult, capture
from ..translations import Translations
from .base import DAY_OFF_TYPES, SUBSTITUTE_PREFIX, Provider, ProviderDefinition
from .canada import CANADA
from .canada_ontario import ONTARIO
from .denmark import DENMARK
from .israel import ISRAEL
from .norway import NORWAY
from .spain import SPAIN
from .spain_navarre import NAVARRE
from .united_arab_emirates import UNITED_ARAB_EMIRATES
from .united_kingdom import UNITED_KINGDOM
from .us_federal import UNITED_STATES

PROVIDERS: dict[str, ProviderDefinition] = {
    definition.id: definition
    for definition in (
        CANADA,
        ONTARIO,
        DENMARK,
        SPAIN,
        NAVARRE,
        UNITED_KINGDOM,
        ISRAEL,
        NORWAY,
        UNITED_ARAB_EMIRATES,
        UNITED_STATES,
    )
}


def _normalize(identifier: str) -> str:
    return identifier.strip().upper().replace("_", "-")


def get_definition(identifier: str) -> ProviderDefinition:
    """
    Look up a provider definition by ISO code or English name.

    Matching is case-insensitive; "es_na" and "ES-NA" are the same.

    Raises:
        ProviderNotFoundError: If no provider matches
    """
    if not isinstance(identifier, str) or not identifier.strip():
        raise ProviderNotFoundError(
            f"Unable to find holiday provider '{identifier}'",
            details={"identifier": identifier, "available": sorted(PROVIDERS)},
        )

    key = _normalize(identifier)
    if key in PROVIDERS:
        return PROVIDERS[key]
    for definition in PROVIDERS.values():
        if definition.name.upper() == identifier.strip().upper():
            return definition

    raise ProviderNotFoundError(
        f"Unable to find holiday provider '{identifier}'",
        details={"identifier": identifier, "available": sorted(PROVIDERS)},
    )


def create(
    identifier: str,
    year: int,
    locale: str = DEFAULT_LOCALE,
    *,
    translations: Optional[Translations] = None,
    names: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> Provider:
    """
    Create a provider for a jurisdiction and year.

    Raises:
        ProviderNotFoundError: Unknown identifier
        UnknownLocaleError: Locale not in the registry
        InvalidArgumentError: Year is not an integer
    """
    definition = get_definition(identifier)
    return Provider(definition, year, locale, translations=translations, names=names)


def try_create(
    identifier: str,
    year: int,
    locale: str = DEFAULT_LOCALE,
    *,
    translations: Optional[Translations] = None,
    names: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> BuildResult[Provider]:
    """Like create(), but returns a BuildResult instead of raising."""
    return capture(create, identifier, year, locale, translations=translations, names=names)


def available_providers() -> dict[str, str]:
    """Provider id -> English name, sorted by id."""
    return {key: PROVIDERS[key].name for key in sorted(PROVIDERS)}


__all__ = [
    "Provider",
    "ProviderDefinition",
    "DAY_OFF_TYPES",
    "SUBSTITUTE_PREFIX",
    "PROVIDERS",
    "get_definition",
    "create",
    "try_create",
    "available_providers",
    # Definitions
    "CANADA",
    "ONTARIO",
    "DENMARK",
    "SPAIN",
    "NAVARRE",
    "UNITED_KINGDOM",
    "ISRAEL",
    "NORWAY",
    "UNITED_ARAB_EMIRATES",
    "UNITED_STATES",
]
