"""
HolidayKit Holiday Catalog Tests

Tests for rule entries and the shared rule groups.
"""
from __future__ import annotations

from datetime import date

import pytest

from holidaykit.catalog import CHRISTIAN, COMMON, ISLAMIC, JEWISH, RuleSpec, Suppression
from holidaykit.exceptions import InvalidArgumentError
from holidaykit.models import HolidayType, Tag
from holidaykit.rules import NEXT_WORKING_DAY


class TestRuleSpec:
    """Tests for RuleSpec validation and year gates."""

    def test_gates_inclusive(self):
        rule = RuleSpec("x", lambda y: date(y, 1, 1), since=1836, until=2023)
        assert not rule.applies(1835)
        assert rule.applies(1836)
        assert rule.applies(2023)
        assert not rule.applies(2024)

    def test_open_gates(self):
        assert RuleSpec("x", lambda y: date(y, 1, 1)).applies(1)

    def test_since_after_until(self):
        with pytest.raises(InvalidArgumentError):
            RuleSpec("x", lambda y: date(y, 1, 1), since=2000, until=1999)

    def test_blank_name(self):
        with pytest.raises(InvalidArgumentError):
            RuleSpec(" ", lambda y: date(y, 1, 1))

    def test_coercion(self):
        rule = RuleSpec("x", lambda y: date(y, 1, 1), type="bank", tags=["eve"])
        assert rule.type is HolidayType.BANK
        assert rule.tags == {Tag.EVE}

    def test_evolve(self):
        rule = CHRISTIAN.rule("christmasDay")
        moved = rule.evolve(substitution=NEXT_WORKING_DAY)
        assert moved.substitution is NEXT_WORKING_DAY
        assert rule.substitution is None

    def test_suppression_gates(self):
        suppression = Suppression("x", since=2008)
        assert not suppression.applies(2007)
        assert suppression.applies(2008)


class TestRuleGroups:
    """Tests for the shared rule groups."""

    def test_rule_from_group(self):
        rule = CHRISTIAN.rule("easterMonday", tags={Tag.RELIGION}, since=1900)
        assert rule.short_name == "easterMonday"
        assert rule.compute(2024) == date(2024, 4, 1)
        assert rule.since == 1900

    def test_rules_share_options(self):
        rules = COMMON.rules("newYearsDay", "newYearsEve", type=HolidayType.OBSERVANCE)
        assert [r.type for r in rules] == [HolidayType.OBSERVANCE] * 2

    def test_unknown_rule(self):
        with pytest.raises(InvalidArgumentError) as exc:
            CHRISTIAN.rule("diwali")
        assert exc.value.details["group"] == "Christian"

    def test_contains(self):
        assert "easter" in CHRISTIAN
        assert "easter" not in COMMON

    @pytest.mark.parametrize("group,short_name,expected", [
        (COMMON, "mothersDay", date(2024, 5, 12)),
        (COMMON, "summerTime", date(2024, 3, 31)),
        (COMMON, "winterTime", date(2024, 10, 27)),
        (CHRISTIAN, "corpusChristi", date(2024, 5, 30)),
        (CHRISTIAN, "stJohnsDay", date(2024, 6, 24)),
        (JEWISH, "roshHashanah", date(2024, 10, 3)),
        (JEWISH, "purim", date(2024, 3, 24)),
        (ISLAMIC, "eidAlFitr", date(2024, 4, 10)),
        (ISLAMIC, "arafatDay", date(2024, 6, 16)),
    ])
    def test_dates_2024(self, group, short_name, expected):
        assert group.function(short_name)(2024) == expected

    def test_tisha_bav_never_on_sabbath(self):
        tisha_bav = JEWISH.function("tishaBAv")
        for year in range(2000, 2050):
            day = tisha_bav(year)
            assert day is not None
            assert day.weekday() != 5
