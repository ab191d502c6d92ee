"""
khmercal.engines.lengths
------------------------
Month and year lengths in days, derived from the effective year type.
"""

from __future__ import annotations

from ..core.time import is_gregorian_leap
from ..core.types import LunarMonth, YearType
from .classifier import year_type

_YEAR_DAYS = {
    YearType.REGULAR: 354,
    YearType.LEAP_DAY: 355,
    YearType.LEAP_MONTH: 384,
}


def days_in_year(be_year: int) -> int:
    return _YEAR_DAYS[year_type(be_year)]


def days_in_month(month: LunarMonth, be_year: int) -> int:
    """
    Ordinary months alternate 29/30 starting with Migasir=29, Boss=30, ...
    Jesth takes a 30th day in a leap-day year; the intercalary months have 30.
    """
    if month == LunarMonth.JESTH and year_type(be_year) == YearType.LEAP_DAY:
        return 30
    if month in (LunarMonth.PATHAMASADH, LunarMonth.TUTIYASADH):
        return 30
    return 29 if month % 2 == 0 else 30


def days_in_gregorian_year(year: int) -> int:
    return 366 if is_gregorian_leap(year) else 365
