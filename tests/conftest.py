"""
Pytest configuration and fixtures for HolidayKit tests.

Provides path setup plus helper factories for translation data directories.
"""
import sys
from pathlib import Path

import pytest
import yaml

# Allow ``from holidaykit import ...`` without installing (src is the package root)
_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT / "src"))

from holidaykit.translations import LocaleRegistry, default_translations  # noqa: E402


# =============================================================================
# Factory Helpers
# =============================================================================

def write_yaml(path: Path, data) -> Path:
    """Dump ``data`` as YAML to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path


def make_data_dir(
    base: Path,
    locales=("en_US", "da_DK", "nb_NO"),
    translations=None,
    default_locale: str = "en_US",
) -> Path:
    """
    Create a data directory with locales.yaml and translation files.

    ``translations`` maps file stem -> {short_name: {locale: name}}.
    """
    write_yaml(base / "locales.yaml", {
        "schema_version": "1.0.0",
        "default_locale": default_locale,
        "locales": list(locales),
    })
    for stem, table in (translations or {}).items():
        write_yaml(base / "translations" / f"{stem}.yaml", {
            "schema_version": "1.0.0",
            "translations": table,
        })
    (base / "translations").mkdir(exist_ok=True)
    return base


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def translations():
    """Packaged translations."""
    return default_translations()


@pytest.fixture
def locales():
    """A small locale registry independent of the packaged data."""
    return LocaleRegistry(locales=frozenset({"en_US", "da_DK", "nb_NO"}))


@pytest.fixture
def data_dir(tmp_path):
    """Factory for temporary translation data directories."""
    def _make(**kwargs) -> Path:
        return make_data_dir(tmp_path / "data", **kwargs)
    return _make
