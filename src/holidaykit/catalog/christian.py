"""
Christian Holidays

Western (Gregorian) Christian holidays. Moveable feasts are offsets from
Easter Sunday as computed by rules.easter().
"""
from __future__ import annotations

from datetime import date

from ..rules import (
    ASCENSION_DAY,
    ASH_WEDNESDAY,
    CORPUS_CHRISTI,
    EASTER_MONDAY,
    GOOD_FRIDAY,
    MAUNDY_THURSDAY,
    PALM_SUNDAY,
    PENTECOST,
    PENTECOST_MONDAY,
    easter,
    easter_offset,
    fixed_date,
)
from .base import RuleGroup


# =============================================================================
# Moveable feasts
# =============================================================================

def easter_sunday(year: int) -> date:
    return easter(year)


def ash_wednesday(year: int) -> date:
    return easter_offset(year, ASH_WEDNESDAY)


def palm_sunday(year: int) -> date:
    return easter_offset(year, PALM_SUNDAY)


def maundy_thursday(year: int) -> date:
    return easter_offset(year, MAUNDY_THURSDAY)


def good_friday(year: int) -> date:
    return easter_offset(year, GOOD_FRIDAY)


def easter_monday(year: int) -> date:
    return easter_offset(year, EASTER_MONDAY)


def ascension_day(year: int) -> date:
    return easter_offset(year, ASCENSION_DAY)


def pentecost(year: int) -> date:
    return easter_offset(year, PENTECOST)


def pentecost_monday(year: int) -> date:
    return easter_offset(year, PENTECOST_MONDAY)


def corpus_christi(year: int) -> date:
    return easter_offset(year, CORPUS_CHRISTI)


# =============================================================================
# Fixed feasts
# =============================================================================

def epiphany_eve(year: int) -> date:
    return fixed_date(year, 1, 5)


def epiphany(year: int) -> date:
    return fixed_date(year, 1, 6)


def st_josephs_day(year: int) -> date:
    return fixed_date(year, 3, 19)


def st_johns_day(year: int) -> date:
    return fixed_date(year, 6, 24)


def st_james_day(year: int) -> date:
    return fixed_date(year, 7, 25)


def assumption_of_mary(year: int) -> date:
    return fixed_date(year, 8, 15)


def all_saints_day(year: int) -> date:
    return fixed_date(year, 11, 1)


def immaculate_conception(year: int) -> date:
    return fixed_date(year, 12, 8)


def christmas_eve(year: int) -> date:
    return fixed_date(year, 12, 24)


def christmas_day(year: int) -> date:
    return fixed_date(year, 12, 25)


def second_christmas_day(year: int) -> date:
    return fixed_date(year, 12, 26)


CHRISTIAN = RuleGroup(
    name="Christian",
    functions={
        "easter": easter_sunday,
        "ashWednesday": ash_wednesday,
        "palmSunday": palm_sunday,
        "maundyThursday": maundy_thursday,
        "goodFriday": good_friday,
        "easterMonday": easter_monday,
        "ascensionDay": ascension_day,
        "pentecost": pentecost,
        "pentecostMonday": pentecost_monday,
        "corpusChristi": corpus_christi,
        "epiphanyEve": epiphany_eve,
        "epiphany": epiphany,
        "stJosephsDay": st_josephs_day,
        "stJohnsDay": st_johns_day,
        "stJamesDay": st_james_day,
        "assumptionOfMary": assumption_of_mary,
        "allSaintsDay": all_saints_day,
        "immaculateConception": immaculate_conception,
        "christmasEve": christmas_eve,
        "christmasDay": christmas_day,
        "secondChristmasDay": second_christmas_day,
    },
)
