"""
khmercal.engines.year_constants
-------------------------------
The per-year almanac quantities of the Bodithey/Avoman reckoning
(Roath Kim Soeun, "Pratitin Soryakkatik-Chankatik 1900-1999").

Every quantity is a pure function of the Buddhist Era year and is derived
from the Aharkun, which is computed once per year and cached.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.types import YearConstants

# One solar year is 292207/800 days in this reckoning.
SOLAR_YEAR_NUM = 292207
SOLAR_YEAR_DEN = 800
# Kromthupul at or below this marks a solar leap year.
KROMTHUPUL_LEAP_LIMIT = 207


def _aharkun_parts(be_year: int) -> tuple[int, int]:
    t = be_year * SOLAR_YEAR_NUM + 499
    return t // SOLAR_YEAR_DEN + 4, t % SOLAR_YEAR_DEN


@lru_cache(maxsize=4096)
def year_constants(be_year: int) -> YearConstants:
    ahk, ahk_mod = _aharkun_parts(be_year)
    krom = SOLAR_YEAR_DEN - ahk_mod
    avm_total = 11 * ahk + 25
    return YearConstants(
        be_year=be_year,
        aharkun=ahk,
        aharkun_mod=ahk_mod,
        kromthupul=krom,
        avoman=avm_total % 692,
        bodithey=(avm_total // 692 + ahk + 29) % 30,
        is_solar_leap=krom <= KROMTHUPUL_LEAP_LIMIT,
    )


def aharkun(be_year: int) -> int:
    """Aharkun: the day count feeding both the Avoman and the Bodithey."""
    return year_constants(be_year).aharkun

def aharkun_mod(be_year: int) -> int:
    return year_constants(be_year).aharkun_mod

def kromthupul(be_year: int) -> int:
    """Kromthupul, 1..800."""
    return year_constants(be_year).kromthupul

def is_solar_leap(be_year: int) -> bool:
    return year_constants(be_year).is_solar_leap

def avoman(be_year: int) -> int:
    """Avoman, 0..691. Small values signal a leap-day year."""
    return year_constants(be_year).avoman

def bodithey(be_year: int) -> int:
    """Bodithey, 0..29. Values near the wrap (>=25 or <=5) signal a leap-month year."""
    return year_constants(be_year).bodithey
