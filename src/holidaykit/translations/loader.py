"""
HolidayKit Translation Loader

Loads the locale registry and the global holiday-name tables from YAML,
validates them, and hands them out as read-only values.

The packaged data is read once per process (default_translations) and
passed explicitly to providers; nothing here is mutated after loading.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from .. import config
from ..exceptions import TranslationLoadError, TranslationValidationError, UnknownLocaleError
from .schema import LocalesFileSchema, TranslationFileSchema, check_schema_version

logger = logging.getLogger(__name__)

LOCALES_FILE = "locales.yaml"
TRANSLATIONS_SUBDIR = "translations"


# =============================================================================
# Locale Registry
# =============================================================================

@dataclass(frozen=True)
class LocaleRegistry:
    """The set of recognized locales plus the fallback locale."""
    locales: frozenset[str]
    default_locale: str = config.DEFAULT_LOCALE

    def __contains__(self, locale: object) -> bool:
        return locale in self.locales

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.locales))

    def __len__(self) -> int:
        return len(self.locales)

    def require(self, locale: str) -> str:
        """Return the locale, or raise UnknownLocaleError when it is not registered."""
        if locale not in self.locales:
            raise UnknownLocaleError(
                f'Locale "{locale}" is not a valid locale.',
                details={"locale": locale},
            )
        return locale


# =============================================================================
# Translations
# =============================================================================

@dataclass(frozen=True)
class Translations:
    """
    Global holiday-name table keyed by short name, then locale.

    Lookups that miss return empty results; they are never errors.
    """
    locales: LocaleRegistry
    table: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __contains__(self, short_name: object) -> bool:
        return short_name in self.table

    def for_holiday(self, short_name: str) -> dict[str, str]:
        """All known names of one holiday (a fresh dict the caller may keep)."""
        return dict(self.table.get(short_name, {}))

    def lookup(self, short_name: str, locale: str) -> Optional[str]:
        return self.table.get(short_name, {}).get(locale)

    def short_names(self) -> list[str]:
        return sorted(self.table)

    def with_overrides(self, names: Mapping[str, Mapping[str, str]]) -> Translations:
        """
        Return a copy where ``names`` wins over the existing entries.

        Override locales must be registered.
        """
        merged: dict[str, dict[str, str]] = {k: dict(v) for k, v in self.table.items()}
        for short_name, per_locale in names.items():
            for locale in per_locale:
                self.locales.require(locale)
            merged.setdefault(short_name, {}).update(per_locale)
        return Translations(locales=self.locales, table=_freeze(merged))


def _freeze(table: dict[str, dict[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({k: MappingProxyType(dict(v)) for k, v in table.items()})


# =============================================================================
# File Loading
# =============================================================================

def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise TranslationLoadError(f"Cannot read {path}: {e}", details={"path": str(path)})
    except yaml.YAMLError as e:
        raise TranslationLoadError(f"Invalid YAML in {path.name}: {e}", details={"path": str(path)})

    if not isinstance(data, dict):
        raise TranslationValidationError(
            f"{path.name} must contain a mapping at top level",
            details={"path": str(path)},
        )
    if not check_schema_version(data):
        raise TranslationValidationError(
            f"{path.name}: unsupported schema_version {data.get('schema_version')!r}",
            details={"path": str(path)},
        )
    return data


def load_locales(directory: Union[str, Path, None] = None) -> LocaleRegistry:
    """
    Load the locale registry from ``<directory>/locales.yaml``.

    Raises:
        TranslationLoadError: If the file is missing or not YAML
        TranslationValidationError: If the content fails validation
    """
    base = Path(directory) if directory is not None else config.data_dir()
    path = base / LOCALES_FILE
    data = _read_yaml(path)
    try:
        schema = LocalesFileSchema.model_validate(data)
    except ValidationError as e:
        raise TranslationValidationError(
            f"Locale file validation failed: {e.error_count()} error(s)",
            details={"path": str(path), "errors": e.errors(include_url=False)},
        )

    if schema.default_locale not in schema.locales:
        raise TranslationValidationError(
            f"Default locale {schema.default_locale} is not in the locale list",
            details={"path": str(path)},
        )
    return LocaleRegistry(locales=frozenset(schema.locales), default_locale=schema.default_locale)


def load_translations(directory: Union[str, Path, None] = None) -> Translations:
    """
    Load the locale registry and every ``translations/*.yaml`` file.

    Files are read in name order; a short name appearing in several files
    is merged, later files winning per locale.

    Raises:
        TranslationLoadError: If a file can not be read
        TranslationValidationError: If a file fails validation or names an
            unregistered locale
    """
    base = Path(directory) if directory is not None else config.data_dir()
    locales = load_locales(base)

    table: dict[str, dict[str, str]] = {}
    files = sorted((base / TRANSLATIONS_SUBDIR).glob("*.yaml"))
    for path in files:
        data = _read_yaml(path)
        try:
            schema = TranslationFileSchema.model_validate(data)
        except ValidationError as e:
            raise TranslationValidationError(
                f"Translation file {path.name} failed validation: {e.error_count()} error(s)",
                details={"path": str(path), "errors": e.errors(include_url=False)},
            )

        for short_name, names in schema.translations.items():
            unknown = sorted(set(names) - locales.locales)
            if unknown:
                raise TranslationValidationError(
                    f"{path.name}: {short_name} uses unregistered locales {unknown}",
                    details={"path": str(path), "short_name": short_name},
                )
            table.setdefault(short_name, {}).update(names)

    logger.debug("Loaded %d holiday names from %d files in %s", len(table), len(files), base)
    return Translations(locales=locales, table=_freeze(table))


@lru_cache(maxsize=1)
def default_translations() -> Translations:
    """Packaged translations, loaded on first use and shared read-only afterwards."""
    return load_translations()
