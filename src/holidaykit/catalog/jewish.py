"""
Jewish Holidays

Dates come from the arithmetic Hebrew calendar. Each function returns
the occurrence inside the requested Gregorian year, or None.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..rules import SATURDAY, hebrew_date_in_year
from ..rules.hebrew_calendar import ADAR, AV, KISLEV, NISAN, SIVAN, TISHREI
from .base import RuleGroup


def rosh_hashanah(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, TISHREI, 1)


def rosh_hashanah_second_day(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, TISHREI, 2)


def yom_kippur(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, TISHREI, 10)


def sukkot(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, TISHREI, 15)


def simchat_torah(year: int) -> Optional[date]:
    """Shemini Atzeret/Simchat Torah as kept in Israel (22 Tishrei)."""
    return hebrew_date_in_year(year, TISHREI, 22)


def hanukkah(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, KISLEV, 25)


def purim(year: int) -> Optional[date]:
    """14 Adar; Adar II in leap years."""
    return hebrew_date_in_year(year, ADAR, 14, adar_ii_in_leap_years=True)


def passover(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, NISAN, 15)


def passover_seventh_day(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, NISAN, 21)


def shavuot(year: int) -> Optional[date]:
    return hebrew_date_in_year(year, SIVAN, 6)


def tisha_bav(year: int) -> Optional[date]:
    """9 Av, postponed to Sunday when it falls on the Sabbath."""
    day = hebrew_date_in_year(year, AV, 9)
    if day is not None and day.weekday() == SATURDAY:
        return day + timedelta(days=1)
    return day


JEWISH = RuleGroup(
    name="Jewish",
    functions={
        "roshHashanah": rosh_hashanah,
        "roshHashanahSecondDay": rosh_hashanah_second_day,
        "yomKippur": yom_kippur,
        "sukkot": sukkot,
        "simchatTorah": simchat_torah,
        "hanukkah": hanukkah,
        "purim": purim,
        "passover": passover,
        "passoverSeventhDay": passover_seventh_day,
        "shavuot": shavuot,
        "tishaBAv": tisha_bav,
    },
)
