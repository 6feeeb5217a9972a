"""
HolidayKit Translation Schemas

Pydantic models for validating the locale and translation YAML files.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"

LOCALE_PATTERN = re.compile(r"^[a-z]{2,3}_[A-Z]{2}$")


# =============================================================================
# Locale File
# =============================================================================

class LocalesFileSchema(BaseModel):
    """Schema for data/locales.yaml."""
    schema_version: str = SCHEMA_VERSION
    default_locale: str = "en_US"
    locales: list[str] = Field(..., min_length=1)

    @field_validator("locales")
    @classmethod
    def locales_well_formed(cls, v: list[str]) -> list[str]:
        bad = [loc for loc in v if not LOCALE_PATTERN.match(loc)]
        if bad:
            raise ValueError(f"Malformed locale identifiers: {bad}")
        if len(set(v)) != len(v):
            raise ValueError("Duplicate locale identifiers")
        return v

    @field_validator("default_locale")
    @classmethod
    def default_well_formed(cls, v: str) -> str:
        if not LOCALE_PATTERN.match(v):
            raise ValueError(f"Malformed default locale: {v}")
        return v


# =============================================================================
# Translation File
# =============================================================================

class TranslationFileSchema(BaseModel):
    """
    Schema for data/translations/*.yaml.

    ``translations`` maps a holiday short name to ``{locale: display name}``.
    """
    schema_version: str = SCHEMA_VERSION
    description: str = ""
    translations: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("translations")
    @classmethod
    def names_not_blank(cls, v: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        for short_name, names in v.items():
            if not short_name.strip():
                raise ValueError("Holiday short name can not be blank")
            for locale, name in names.items():
                if not LOCALE_PATTERN.match(locale):
                    raise ValueError(f"{short_name}: malformed locale '{locale}'")
                if not name.strip():
                    raise ValueError(f"{short_name}: blank name for locale '{locale}'")
        return v


# =============================================================================
# Helpers
# =============================================================================

def check_schema_version(data: dict[str, Any]) -> bool:
    """Check that a raw document declares a compatible (same major) schema version."""
    declared = str(data.get("schema_version", SCHEMA_VERSION))
    return declared.split(".")[0] == SCHEMA_VERSION.split(".")[0]
