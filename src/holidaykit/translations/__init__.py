"""
HolidayKit Translations

Locale registry and global holiday-name tables, loaded from YAML files
under ``holidaykit/data``.

Usage:
    from holidaykit.translations import default_translations

    translations = default_translations()
    translations.lookup("christmasDay", "da_DK")   # 'Juledag'
    "nb_NO" in translations.locales                # True
"""
from __future__ import annotations

from .loader import (
    LocaleRegistry,
    Translations,
    default_translations,
    load_locales,
    load_translations,
)
from .schema import SCHEMA_VERSION, LocalesFileSchema, TranslationFileSchema

__all__ = [
    "LocaleRegistry",
    "Translations",
    "default_translations",
    "load_locales",
    "load_translations",
    "SCHEMA_VERSION",
    "LocalesFileSchema",
    "TranslationFileSchema",
]
