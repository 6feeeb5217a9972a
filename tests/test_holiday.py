"""
HolidayKit Holiday Model Tests

Tests for Holiday construction, name resolution and translation merging,
plus the BuildResult wrapper and the exception hierarchy.
"""
from __future__ import annotations

from datetime import date, datetime

import pytest

from holidaykit.exceptions import (
    HolidayKitError,
    InvalidArgumentError,
    ProviderNotFoundError,
    UnknownLocaleError,
)
from holidaykit.models import BuildResult, Holiday, HolidayType, Tag, capture
from holidaykit.translations import LocaleRegistry


def make_holiday(**overrides) -> Holiday:
    """Create a Holiday with sensible defaults."""
    kwargs = dict(
        short_name="christmasDay",
        date=date(2024, 12, 25),
        translations={"en_US": "Christmas", "da_DK": "Juledag"},
    )
    kwargs.update(overrides)
    return Holiday(**kwargs)


# =============================================================================
# Construction
# =============================================================================

class TestHolidayConstruction:
    """Tests for Holiday validation and normalization."""

    def test_defaults(self):
        holiday = make_holiday()
        assert holiday.type is HolidayType.OFFICIAL
        assert holiday.tags == frozenset()
        assert holiday.display_locale == "en_US"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidArgumentError) as exc:
            make_holiday(short_name=name)
        assert str(exc.value) == "[HK_INVALID_ARGUMENT] Holiday name can not be blank."

    def test_datetime_coerced_to_date(self):
        holiday = make_holiday(date=datetime(2024, 12, 25, 15, 30))
        assert holiday.date == date(2024, 12, 25)

    def test_non_date_rejected(self):
        with pytest.raises(InvalidArgumentError):
            make_holiday(date="2024-12-25")

    def test_string_type_and_tags(self):
        holiday = make_holiday(type="observance", tags={"religion", Tag.BANK_CLOSED})
        assert holiday.type is HolidayType.OBSERVANCE
        assert holiday.tags == {Tag.RELIGION, Tag.BANK_CLOSED}
        assert holiday.has_tag("religion")

    def test_unknown_tag_rejected(self):
        with pytest.raises(InvalidArgumentError):
            make_holiday(tags={"not_a_tag"})

    def test_translations_copied(self):
        names = {"en_US": "Christmas"}
        holiday = make_holiday(translations=names)
        names["en_US"] = "Changed"
        assert holiday.name == "Christmas"

    def test_frozen(self):
        holiday = make_holiday()
        with pytest.raises(AttributeError):
            holiday.short_name = "other"

    def test_translations_read_only(self):
        holiday = make_holiday()
        with pytest.raises(TypeError):
            holiday.translations["en_US"] = "Changed"
        assert holiday.name == "Christmas"

    def test_unknown_display_locale_rejected(self):
        with pytest.raises(UnknownLocaleError):
            make_holiday(display_locale="xx_XX")

    def test_display_locale_checked_against_given_registry(self, locales):
        with pytest.raises(UnknownLocaleError):
            make_holiday(display_locale="sv_SE", locales=locales)
        registry = LocaleRegistry(locales=frozenset({"en_US", "fo_FO"}))
        assert make_holiday(display_locale="fo_FO", locales=registry).name == "Christmas"


class TestHolidayCreate:
    """Tests for Holiday.create / try_create with a locale registry."""

    def test_create(self, locales):
        holiday = Holiday.create(
            "christmasDay",
            {"da_DK": "Juledag"},
            date(2024, 12, 25),
            locales=locales,
            locale="da_DK",
            tags={Tag.RELIGION},
        )
        assert holiday.name == "Juledag"

    def test_unknown_locale(self, locales):
        with pytest.raises(UnknownLocaleError) as exc:
            Holiday.create("christmasDay", {}, date(2024, 12, 25), locales=locales, locale="xx_XX")
        assert 'Locale "xx_XX" is not a valid locale.' in str(exc.value)

    def test_try_create_failure(self, locales):
        result = Holiday.try_create("christmasDay", {}, date(2024, 12, 25), locales=locales, locale="xx_XX")
        assert not result
        assert result.error.code == "HK_UNKNOWN_LOCALE"
        with pytest.raises(UnknownLocaleError):
            result.unwrap()

    def test_try_create_blank_name(self, locales):
        result = Holiday.try_create("", {}, date(2024, 12, 25), locales=locales)
        assert result.error.code == "HK_INVALID_ARGUMENT"

    def test_try_create_success(self, locales):
        result = Holiday.try_create("christmasDay", {}, date(2024, 12, 25), locales=locales)
        assert result.ok
        assert result.unwrap().short_name == "christmasDay"


# =============================================================================
# Names
# =============================================================================

class TestNameResolution:
    """Display locale, then the registry default locale, then the short name."""

    def test_display_locale(self):
        assert make_holiday(display_locale="da_DK").name == "Juledag"

    def test_fallback_to_default_locale(self):
        assert make_holiday(display_locale="nb_NO").name == "Christmas"

    def test_fallback_to_short_name(self):
        holiday = make_holiday(translations={"da_DK": "Juledag"}, display_locale="nb_NO")
        assert holiday.name == "christmasDay"

    def test_with_locale(self, locales):
        holiday = make_holiday().with_locale("da_DK", locales)
        assert holiday.name == "Juledag"
        with pytest.raises(UnknownLocaleError):
            holiday.with_locale("xx_XX", locales)

    def test_with_locale_uses_own_registry(self, locales):
        holiday = make_holiday(locales=locales)
        with pytest.raises(UnknownLocaleError):
            holiday.with_locale("zz_ZZ")
        # sv_SE is packaged but not in this registry
        with pytest.raises(UnknownLocaleError):
            holiday.with_locale("sv_SE")

    def test_fallback_to_registry_default_locale(self):
        registry = LocaleRegistry(
            locales=frozenset({"en_US", "da_DK", "nb_NO"}), default_locale="da_DK"
        )
        holiday = make_holiday(display_locale="nb_NO", locales=registry)
        assert holiday.name == "Juledag"


class TestMergeGlobalTranslations:
    """Instance translations win over global ones."""

    def test_left_biased(self):
        holiday = make_holiday(translations={"en_US": "Xmas"})
        merged = holiday.merge_global_translations({"en_US": "Christmas", "da_DK": "Juledag"})
        assert merged.translations == {"en_US": "Xmas", "da_DK": "Juledag"}
        # Original untouched
        assert holiday.translations == {"en_US": "Xmas"}

    def test_from_translations_table(self, translations):
        holiday = make_holiday(translations={})
        merged = holiday.merge_global_translations(translations)
        assert merged.translations["da_DK"] == "Juledag"


# =============================================================================
# Views
# =============================================================================

class TestHolidayViews:
    """Tests for derived values and serialization."""

    def test_str_is_iso_date(self):
        assert str(make_holiday()) == "2024-12-25"

    def test_datetime_in_timezone(self):
        holiday = make_holiday(timezone="Europe/Copenhagen")
        start = holiday.datetime
        assert start.tzinfo.key == "Europe/Copenhagen"
        assert (start.hour, start.minute) == (0, 0)

    def test_to_dict(self):
        holiday = make_holiday(tags={Tag.RELIGION, Tag.BANK_CLOSED})
        assert holiday.to_dict() == {
            "short_name": "christmasDay",
            "name": "Christmas",
            "date": "2024-12-25",
            "type": "official",
            "tags": ["bank_closed", "religion"],
            "timezone": "UTC",
        }


# =============================================================================
# Results and errors
# =============================================================================

class TestBuildResult:
    """Tests for the explicit success/error wrapper."""

    def test_needs_exactly_one(self):
        with pytest.raises(ValueError):
            BuildResult()
        with pytest.raises(ValueError):
            BuildResult(value=1, error=InvalidArgumentError("x"))

    def test_unwrap_or(self):
        assert BuildResult.failure(InvalidArgumentError("x")).unwrap_or(5) == 5
        assert BuildResult.success(3).unwrap_or(5) == 3

    def test_capture_only_domain_errors(self):
        def boom():
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            capture(boom)


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_codes(self):
        assert InvalidArgumentError("x").code == "HK_INVALID_ARGUMENT"
        assert ProviderNotFoundError("x").code == "HK_PROVIDER_NOT_FOUND"

    def test_str_with_provider(self):
        error = InvalidArgumentError("bad year", provider_id="NO")
        assert str(error) == "[HK_INVALID_ARGUMENT] bad year (provider: NO)"

    def test_to_dict(self):
        error = UnknownLocaleError("nope", details={"locale": "xx_XX"})
        assert error.to_dict() == {
            "code": "HK_UNKNOWN_LOCALE",
            "message": "nope",
            "details": {"locale": "xx_XX"},
        }

    def test_hierarchy(self):
        assert issubclass(UnknownLocaleError, HolidayKitError)
        assert issubclass(HolidayKitError, Exception)
