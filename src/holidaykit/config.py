"""
HolidayKit Configuration

Settings read once from the environment at import time.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Locale whose translation is used when the display locale has none.
# Part of the name-resolution contract, so not configurable.
DEFAULT_LOCALE = "en_US"

# Packaged YAML data (locales + translations)
DATA_DIR = Path(__file__).parent / "data"

HK_DISPLAY_LOCALE = os.getenv("HK_DISPLAY_LOCALE", DEFAULT_LOCALE)
HK_TRANSLATIONS_DIR: Optional[str] = os.getenv("HK_TRANSLATIONS_DIR")
HK_LOG_LEVEL = os.getenv("HK_LOG_LEVEL", "WARNING")
HK_LOG_JSON = os.getenv("HK_LOG_JSON", "false").lower() == "true"


def data_dir() -> Path:
    """Directory holding locales.yaml and translations/, honouring HK_TRANSLATIONS_DIR."""
    if HK_TRANSLATIONS_DIR:
        return Path(HK_TRANSLATIONS_DIR)
    return DATA_DIR
