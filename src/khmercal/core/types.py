from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from .time import animal_year, be_year, era_year, jolak_sakaraj, moha_sakaraj, weekday_index


class YearType(IntEnum):
    """Raw year classification. Values follow the almanac coding 0/1/2/3."""
    REGULAR = 0
    LEAP_MONTH = 1
    LEAP_DAY = 2
    LEAP_MONTH_AND_DAY = 3


# After deferral a year is never LEAP_MONTH_AND_DAY.
EFFECTIVE_YEAR_TYPES: Tuple[YearType, ...] = (YearType.REGULAR, YearType.LEAP_MONTH, YearType.LEAP_DAY)


class LunarMonth(IntEnum):
    """
    The 12 ordinary month slots (0..11, starting at Migasir) plus the
    intercalary pair that replaces Asadh in a leap-month year.
    The parity of an ordinary slot fixes its length: even 29, odd 30.
    """
    MIGASIR = 0
    BOSS = 1
    MEAKH = 2
    PHALKUN = 3
    CHETR = 4
    PISAKH = 5
    JESTH = 6
    ASADH = 7
    SRAPHOAN = 8
    PHEATRABOT = 9
    ASSOCH = 10
    KADEK = 11
    PATHAMASADH = 12
    TUTIYASADH = 13

    @property
    def is_intercalary(self) -> bool:
        return self in (LunarMonth.PATHAMASADH, LunarMonth.TUTIYASADH)


class MoonPhase(IntEnum):
    WAXING = 0  # koet
    WANING = 1  # roach


@dataclass(frozen=True)
class YearConstants:
    be_year: int
    aharkun: int
    aharkun_mod: int
    kromthupul: int
    avoman: int      # 0..691
    bodithey: int    # 0..29
    is_solar_leap: bool


@dataclass(frozen=True)
class YearInfo:
    constants: YearConstants
    bodithey_leap: bool
    avoman_leap: bool
    raw_type: YearType
    year_type: YearType
    days_in_year: int

    @property
    def be_year(self) -> int:
        return self.constants.be_year


@dataclass(frozen=True)
class ReferenceEpoch:
    """A solar date known to fall on a given lunar month/day."""
    solar_date: date
    month: LunarMonth
    day: int = 0


@dataclass(frozen=True)
class LunarDate:
    day: int             # 0..29; 0..14 waxing, 15..29 waning
    month: LunarMonth
    solar_date: date

    @property
    def phase(self) -> MoonPhase:
        return MoonPhase.WANING if self.day > 14 else MoonPhase.WAXING

    @property
    def moon_day(self) -> int:
        """Day count within the current half month, 1..15."""
        return self.day % 15 + 1

    @property
    def be_year(self) -> int:
        return be_year(self.solar_date)

    @property
    def weekday(self) -> int:
        return weekday_index(self.solar_date)

    @property
    def animal_year(self) -> int:
        return animal_year(self.be_year)

    @property
    def era_year(self) -> int:
        return era_year(self.be_year)

    @property
    def jolak_sakaraj(self) -> int:
        return jolak_sakaraj(self.be_year)

    @property
    def moha_sakaraj(self) -> int:
        return moha_sakaraj(self.solar_date.year)


@dataclass(frozen=True)
class DayInfo:
    solar_date: date
    lunar: LunarDate
    year_type: YearType
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
