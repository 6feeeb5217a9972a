"""
HolidayKit Provider Tests

Tests for provider composition (inheritance, overrides, gates,
suppressions, substitutes), the registry and each built-in jurisdiction.
"""
from __future__ import annotations

from datetime import date

import pytest

from holidaykit.catalog import RuleSpec, Suppression
from holidaykit.exceptions import (
    CollectionLockedError,
    InvalidArgumentError,
    InvalidDateError,
    ProviderNotFoundError,
    UnknownLocaleError,
)
from holidaykit.models import Holiday, HolidayType, Tag
from holidaykit.providers import (
    NAVARRE,
    NORWAY,
    PROVIDERS,
    SPAIN,
    Provider,
    ProviderDefinition,
    available_providers,
    create,
    get_definition,
    try_create,
)
from holidaykit.rules import FRIDAY, NEXT_WORKING_DAY, SATURDAY, fixed_date


def jan(day):
    return lambda year: date(year, 1, day)


# =============================================================================
# Composition
# =============================================================================

class TestComposition:
    """Initialization order, overrides, gates and suppressions."""

    def test_parent_rules_first_then_override(self):
        parent = ProviderDefinition("ZZ", "Parent", "UTC", rules=(RuleSpec("x", jan(1)),))
        child = parent.extend("ZZ-C", "Child", [RuleSpec("x", jan(2))])
        provider = Provider(child, 2024)
        assert provider.get("x").date == date(2024, 1, 2)
        assert len(provider) == 1

    def test_lineage(self):
        assert [d.id for d in NAVARRE.lineage()] == ["ES", "ES-NA"]
        assert NAVARRE.timezone == SPAIN.timezone

    def test_year_gated_override(self):
        definition = ProviderDefinition("ZZ", "Test", "UTC", rules=(
            RuleSpec("x", jan(1)),
            RuleSpec("x", jan(5), since=2000),
        ))
        assert Provider(definition, 1999).get("x").date == date(1999, 1, 1)
        assert Provider(definition, 2000).get("x").date == date(2000, 1, 5)

    def test_suppression(self):
        parent = ProviderDefinition("ZZ", "Parent", "UTC", rules=(RuleSpec("x", jan(1)),))
        child = parent.extend("ZZ-C", "Child", [Suppression("x", since=2020)])
        assert "x" in Provider(child, 2019)
        assert "x" not in Provider(child, 2020)

    def test_rule_returning_none_emits_nothing(self):
        definition = ProviderDefinition("ZZ", "Test", "UTC", rules=(RuleSpec("x", lambda y: None),))
        assert len(Provider(definition, 2024)) == 0

    def test_failing_rule_aborts(self):
        definition = ProviderDefinition("ZZ", "Test", "UTC", rules=(
            RuleSpec("bad", lambda y: fixed_date(y, 2, 30)),
        ))
        with pytest.raises(InvalidDateError) as exc:
            Provider(definition, 2024)
        assert exc.value.provider_id == "ZZ"

    def test_unsupported_entry(self):
        with pytest.raises(InvalidArgumentError):
            ProviderDefinition("ZZ", "Test", "UTC", rules=("newYearsDay",))

    def test_collection_locked_after_init(self):
        provider = create("NO", 2024)
        assert provider.holidays.locked
        assert provider.outside_year.locked
        with pytest.raises(CollectionLockedError):
            provider.holidays.add(Holiday("x", date(2024, 1, 2)))

    def test_holiday_names_read_only(self):
        holiday = create("NO", 2024).get("christmasDay")
        with pytest.raises(TypeError):
            holiday.translations["en_US"] = "Changed"
        assert create("NO", 2024).get("christmasDay").name == "Christmas"

    def test_holidays_share_provider_registry(self):
        provider = create("NO", 2024, "nb_NO")
        assert all(h.locales is provider.translations.locales for h in provider)

    def test_weekend_inherited(self):
        definition = ProviderDefinition("ZZ", "Test", "UTC", weekend_days={FRIDAY, SATURDAY})
        assert definition.extend("ZZ-C", "Child", []).weekend_days == {FRIDAY, SATURDAY}


class TestSubstitutes:
    """Substitute days for holidays on excluded weekdays."""

    def make(self, year):
        definition = ProviderDefinition("ZZ", "Test", "UTC", rules=(
            RuleSpec("christmasDay", lambda y: date(y, 12, 25), substitution=NEXT_WORKING_DAY),
            RuleSpec("secondChristmasDay", lambda y: date(y, 12, 26), substitution=NEXT_WORKING_DAY),
            RuleSpec("newYearsEve", lambda y: date(y, 12, 31), substitution=NEXT_WORKING_DAY),
        ))
        return Provider(definition, year)

    def test_collisions_resolved(self):
        provider = self.make(2021)   # Dec 25 Saturday, Dec 26 Sunday
        assert provider.get("substituteHoliday:christmasDay").date == date(2021, 12, 27)
        assert provider.get("substituteHoliday:secondChristmasDay").date == date(2021, 12, 28)

    def test_original_kept(self):
        provider = self.make(2021)
        assert provider.get("christmasDay").date == date(2021, 12, 25)

    def test_substitute_outside_year_kept_apart(self):
        provider = self.make(2022)   # Dec 31 2022 is a Saturday
        assert "substituteHoliday:newYearsEve" not in provider
        assert provider.outside_year.get("substituteHoliday:newYearsEve").date == date(2023, 1, 2)

    def test_substitute_name(self):
        provider = self.make(2021)
        holiday = provider.get("substituteHoliday:christmasDay")
        assert holiday.name == "Christmas (observed)"
        assert holiday.type is HolidayType.OFFICIAL


class TestProviderArguments:
    """Locale, year and name-override handling."""

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            create("NO", 2024, "xx_XX")

    def test_year_must_be_int(self):
        with pytest.raises(InvalidArgumentError):
            create("NO", "2024")

    @pytest.mark.parametrize("year", [-5, 0, 10000])
    def test_unrepresentable_years_are_empty(self, year):
        provider = create("NO", year)
        assert len(provider) == 0

    @pytest.mark.parametrize("provider_id", sorted(PROVIDERS))
    @pytest.mark.parametrize("year", [1, 9999])
    def test_extreme_years_accepted(self, provider_id, year):
        provider = create(provider_id, year)
        assert all(h.date.year == year for h in provider)

    def test_name_override(self):
        provider = create("NO", 2024, names={"constitutionDay": {"en_US": "Syttende mai"}})
        assert provider.get("constitutionDay").name == "Syttende mai"

    def test_name_override_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            create("NO", 2024, names={"constitutionDay": {"xx_XX": "?"}})

    def test_is_holiday_outside_year(self):
        provider = create("NO", 2024)
        with pytest.raises(InvalidArgumentError):
            provider.is_holiday(date(2023, 12, 25))

    def test_repr(self):
        assert repr(create("NO", 2024)) == "<Provider NO 2024 en_US: 12 holidays>"


class TestRegistry:
    """Provider lookup."""

    @pytest.mark.parametrize("identifier", ["NO", "no", "Norway", "NORWAY", " no "])
    def test_lookup(self, identifier):
        assert get_definition(identifier) is NORWAY

    def test_subdivision_spelling(self):
        assert get_definition("es_na") is NAVARRE
        assert get_definition("Navarre") is NAVARRE

    @pytest.mark.parametrize("identifier", ["XX", "", "Atlantis"])
    def test_unknown(self, identifier):
        with pytest.raises(ProviderNotFoundError):
            get_definition(identifier)

    def test_try_create_failure(self):
        result = try_create("XX", 2024)
        assert not result.ok
        assert result.error.code == "HK_PROVIDER_NOT_FOUND"

    def test_try_create_success(self):
        result = try_create("DK", 2024)
        assert result
        assert result.value.id == "DK"

    def test_available(self):
        providers = available_providers()
        assert list(providers) == sorted(providers)
        assert providers["CA-ON"] == "Ontario"
        assert len(providers) == 10


# =============================================================================
# Jurisdictions
# =============================================================================

class TestNorway:
    """Norway: Constitution Day from 1836."""

    def test_constitution_day_gate(self):
        assert "constitutionDay" not in create("NO", 1835)
        assert create("NO", 1836).get("constitutionDay").date == date(1836, 5, 17)

    @pytest.mark.parametrize("year", [1, 1000, 1800, 1835, 1836, 1900, 2024, 9999])
    def test_constitution_day_all_years(self, year):
        assert ("constitutionDay" in create("NO", year)) == (year >= 1836)

    def test_official_count(self):
        assert len(create("NO", 1835).holidays.official()) == 11
        assert len(create("NO", 2024).holidays.official()) == 12

    def test_rule_local_name_wins(self):
        provider = create("NO", 2024, "nb_NO")
        assert provider.get("constitutionDay").name == "Nasjonaldagen"
        assert create("NO", 2024).get("constitutionDay").name == "Constitution Day"

    def test_timezone(self):
        holiday = create("NO", 2024).get("constitutionDay")
        assert holiday.timezone == "Europe/Oslo"


class TestDenmark:
    """Denmark: Great Prayer Day 1686-2023 and closing days."""

    def test_great_prayer_day(self):
        assert "greatPrayerDay" not in create("DK", 1685)
        provider = create("DK", 2023, "da_DK")
        holiday = provider.get("greatPrayerDay")
        assert holiday.date == date(2023, 5, 5)
        assert holiday.name == "Store Bededag"
        assert "greatPrayerDay" not in create("DK", 2024)

    def test_counts_2024(self):
        provider = create("DK", 2024)
        assert len(provider.holidays.official()) == 10
        assert len(provider.holidays.observances()) == 4
        assert len(provider.holidays.bank()) == 1

    def test_christmas_eve_is_observance(self):
        holiday = create("DK", 2024, "da_DK").get("christmasEve")
        assert holiday.type is HolidayType.OBSERVANCE
        assert holiday.has_tag(Tag.SHOP_CLOSED)
        assert holiday.name == "Juleaften"

    def test_day_after_ascension(self):
        assert create("DK", 2024).get("dayAfterAscensionDay").date == date(2024, 5, 10)


class TestSpain:
    """Spain and the Navarre region."""

    def test_official_2024(self):
        official = create("ES", 2024).holidays.official()
        assert len(official) == 10
        assert official.get("nationalDay").date == date(2024, 10, 12)

    def test_gates_before_1978(self):
        provider = create("ES", 1977)
        assert "constitutionDay" not in provider
        assert "nationalDay" not in provider

    def test_seasons(self):
        assert create("ES", 2024).holidays.seasonal().short_names() == ["summerTime", "winterTime"]

    def test_navarre_extends_spain(self):
        spain = create("ES", 2024)
        navarre = create("ES-NA", 2024)
        assert set(spain.holidays.short_names()) < set(navarre.holidays.short_names())
        assert len(navarre.holidays.official()) == 10

    def test_navarre_additions_are_observances(self):
        navarre = create("ES-NA", 2024)
        for short_name, expected in [
            ("stJosephsDay", date(2024, 3, 19)),
            ("maundyThursday", date(2024, 3, 28)),
            ("easterMonday", date(2024, 4, 1)),
        ]:
            holiday = navarre.get(short_name)
            assert holiday.date == expected
            assert holiday.type is HolidayType.OBSERVANCE


class TestUnitedStates:
    """US federal holidays and observed days."""

    def test_official_2024(self):
        official = create("US", 2024).holidays.official()
        assert len(official) == 11
        assert official.get("thanksgivingDay").date == date(2024, 11, 28)
        assert official.get("memorialDay").date == date(2024, 5, 27)

    def test_observed_days_2021(self):
        provider = create("US", 2021)
        assert provider.get("substituteHoliday:independenceDay").date == date(2021, 7, 5)
        assert provider.get("substituteHoliday:christmasDay").date == date(2021, 12, 24)
        assert provider.get("substituteHoliday:juneteenth").date == date(2021, 6, 18)
        assert provider.get("substituteHoliday:independenceDay").name == "Independence Day (observed)"
        assert not provider.is_working_day(date(2021, 7, 5))

    def test_observed_new_year_in_previous_year_kept_apart(self):
        provider = create("US", 2022)
        assert "substituteHoliday:newYearsDay" not in provider
        observed = provider.outside_year.get("substituteHoliday:newYearsDay")
        assert observed.date == date(2021, 12, 31)
        assert observed.name == "New Year's Day (observed)"

    def test_juneteenth_gate(self):
        assert "juneteenth" not in create("US", 2020)
        assert "juneteenth" in create("US", 2021)

    def test_memorial_day_before_uniform_monday_act(self):
        assert create("US", 1970).get("memorialDay").date == date(1970, 5, 30)

    def test_observance_is_a_working_day(self):
        provider = create("US", 2024)
        assert provider.get("valentinesDay").type is HolidayType.OBSERVANCE
        assert provider.is_holiday(date(2024, 2, 14))
        assert provider.is_working_day(date(2024, 2, 14))
        assert not provider.is_working_day(date(2024, 7, 4))


class TestCanada:
    """Canada and Ontario."""

    def test_canada_official_2024(self):
        assert len(create("CA", 2024).holidays.official()) == 10

    def test_canada_day_substitute(self):
        provider = create("CA", 2023)   # July 1 2023 is a Saturday
        assert provider.get("substituteHoliday:canadaDay").date == date(2023, 7, 3)

    def test_ontario_suppresses_federal_only_days(self):
        ontario = create("CA-ON", 2024)
        assert "remembranceDay" not in ontario
        assert "truthAndReconciliationDay" not in ontario
        assert ontario.get("familyDay").date == date(2024, 2, 19)
        assert len(ontario.holidays.official()) == 9

    def test_family_day_gate(self):
        assert "familyDay" not in create("CA-ON", 2007)

    def test_victoria_day(self):
        assert create("CA", 2024).get("victoriaDay").date == date(2024, 5, 20)
        assert create("CA", 2021).get("victoriaDay").date == date(2021, 5, 24)

    def test_boxing_day_name(self):
        assert create("CA", 2024).get("secondChristmasDay").name == "Boxing Day"
        assert create("CA", 2024, "fr_CA").get("secondChristmasDay").name == "Lendemain de Noël"


class TestUnitedKingdom:
    """UK bank holidays."""

    def test_christmas_collision_2021(self):
        provider = create("GB", 2021, "en_GB")
        assert provider.get("substituteHoliday:christmasDay").date == date(2021, 12, 27)
        boxing = provider.get("substituteHoliday:secondChristmasDay")
        assert boxing.date == date(2021, 12, 28)
        assert boxing.name == "Boxing Day (substitute day)"

    def test_christmas_on_sunday_2022(self):
        provider = create("GB", 2022)
        assert provider.get("substituteHoliday:christmasDay").date == date(2022, 12, 27)
        assert "substituteHoliday:secondChristmasDay" not in provider
        assert provider.get("substituteHoliday:newYearsDay").date == date(2022, 1, 3)

    def test_moved_bank_holidays(self):
        assert create("GB", 2020).get("earlyMayBankHoliday").date == date(2020, 5, 8)
        assert create("GB", 2022).get("springBankHoliday").date == date(2022, 6, 2)

    def test_bank_type(self):
        assert create("GB", 2024).get("summerBankHoliday").type is HolidayType.BANK


class TestIsrael:
    """Israel: Hebrew calendar and Friday/Saturday weekend."""

    def test_dates_2024(self):
        provider = create("IL", 2024)
        assert provider.get("passover").date == date(2024, 4, 23)
        assert provider.get("shavuot").date == date(2024, 6, 12)
        assert provider.get("roshHashanah").date == date(2024, 10, 3)
        assert provider.get("yomKippur").date == date(2024, 10, 12)

    def test_independence_day_moved_off_monday(self):
        assert create("IL", 2024).get("independenceDay").date == date(2024, 5, 14)

    def test_weekend(self):
        provider = create("IL", 2024)
        assert not provider.is_working_day(date(2024, 10, 4))   # Friday
        assert provider.is_working_day(date(2024, 10, 6))       # Sunday

    def test_hebrew_name(self):
        assert create("IL", 2024, "he_IL").get("yomKippur").name == "יום כיפור"


class TestUnitedArabEmirates:
    """UAE: tabular Hijri holidays."""

    def test_eids_2024(self):
        provider = create("AE", 2024)
        assert provider.get("eidAlFitr").date == date(2024, 4, 10)
        assert provider.get("eidAlAdha").date == date(2024, 6, 17)
        assert provider.get("arafatDay").date == date(2024, 6, 16)

    def test_commemoration_day_gate(self):
        assert "commemorationDay" not in create("AE", 2014)
        assert "commemorationDay" in create("AE", 2015)

    def test_arabic_name(self):
        assert create("AE", 2024, "ar_AE").get("eidAlFitr").name == "عيد الفطر"
