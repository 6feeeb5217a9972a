"""
Islamic Holidays

Dates come from the tabular Hijri calendar. When a Hijri date occurs
twice in one Gregorian year only the earlier occurrence is returned;
None means no occurrence that year.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from ..rules import islamic_date_in_year
from ..rules.islamic_calendar import (
    DHU_AL_HIJJAH,
    MUHARRAM,
    RABI_AL_AWWAL,
    RAJAB,
    RAMADAN,
    SHAWWAL,
)
from .base import RuleGroup


def islamic_new_year(year: int) -> Optional[date]:
    return islamic_date_in_year(year, MUHARRAM, 1)


def ashura(year: int) -> Optional[date]:
    return islamic_date_in_year(year, MUHARRAM, 10)


def prophets_birthday(year: int) -> Optional[date]:
    return islamic_date_in_year(year, RABI_AL_AWWAL, 12)


def isra_and_miraj(year: int) -> Optional[date]:
    return islamic_date_in_year(year, RAJAB, 27)


def ramadan_begins(year: int) -> Optional[date]:
    return islamic_date_in_year(year, RAMADAN, 1)


def eid_al_fitr(year: int) -> Optional[date]:
    return islamic_date_in_year(year, SHAWWAL, 1)


def eid_al_fitr_second_day(year: int) -> Optional[date]:
    return islamic_date_in_year(year, SHAWWAL, 2)


def eid_al_fitr_third_day(year: int) -> Optional[date]:
    return islamic_date_in_year(year, SHAWWAL, 3)


def arafat_day(year: int) -> Optional[date]:
    return islamic_date_in_year(year, DHU_AL_HIJJAH, 9)


def eid_al_adha(year: int) -> Optional[date]:
    return islamic_date_in_year(year, DHU_AL_HIJJAH, 10)


def eid_al_adha_second_day(year: int) -> Optional[date]:
    return islamic_date_in_year(year, DHU_AL_HIJJAH, 11)


def eid_al_adha_third_day(year: int) -> Optional[date]:
    return islamic_date_in_year(year, DHU_AL_HIJJAH, 12)


ISLAMIC = RuleGroup(
    name="Islamic",
    functions={
        "islamicNewYear": islamic_new_year,
        "ashura": ashura,
        "prophetsBirthday": prophets_birthday,
        "israAndMiraj": isra_and_miraj,
        "ramadanBegins": ramadan_begins,
        "eidAlFitr": eid_al_fitr,
        "eidAlFitrSecondDay": eid_al_fitr_second_day,
        "eidAlFitrThirdDay": eid_al_fitr_third_day,
        "arafatDay": arafat_day,
        "eidAlAdha": eid_al_adha,
        "eidAlAdhaSecondDay": eid_al_adha_second_day,
        "eidAlAdhaThirdDay": eid_al_adha_third_day,
    },
)
