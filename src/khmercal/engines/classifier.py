"""
khmercal.engines.classifier
---------------------------
Year-type rules: which Buddhist Era years insert a month (Adhikameas,
384 days), which insert a day into Jesth (Chantreathimeas, 355 days),
and how a year that qualifies for both is resolved.
"""

from __future__ import annotations

import logging

from ..core.types import YearType
from .year_constants import avoman, bodithey, is_solar_leap

logger = logging.getLogger(__name__)

AVOMAN_LIMIT_SOLAR_LEAP = 126
AVOMAN_LIMIT_REGULAR = 137


def bodithey_leap(be_year: int) -> bool:
    """
    Leap-month flag from the Bodithey.

    Two consecutive-year pairs are corrected with a look at the next year:
    25 followed by 5 is leap only on the 5 side; 24 followed by 6 is leap on
    the 24 side.
    """
    b = bodithey(be_year)
    if b == 25 and bodithey(be_year + 1) == 5:
        return False
    if b == 24 and bodithey(be_year + 1) == 6:
        return True
    return b >= 25 or b <= 5


def avoman_leap(be_year: int) -> bool:
    """Leap-day flag from the Avoman; the limit depends on the solar leap status."""
    a = avoman(be_year)
    if is_solar_leap(be_year):
        return a <= AVOMAN_LIMIT_SOLAR_LEAP
    if a > AVOMAN_LIMIT_REGULAR:
        return False
    # 137 followed by 0 must be a regular year
    return avoman(be_year + 1) != 0


def raw_year_type(be_year: int) -> YearType:
    month, day = bodithey_leap(be_year), avoman_leap(be_year)
    if month and day:
        return YearType.LEAP_MONTH_AND_DAY
    if month:
        return YearType.LEAP_MONTH
    if day:
        return YearType.LEAP_DAY
    return YearType.REGULAR


def year_type(be_year: int) -> YearType:
    """
    Effective year type. A month and a day are never inserted in the same
    year: the day is deferred to the following year.
    """
    raw = raw_year_type(be_year)
    if raw == YearType.LEAP_MONTH_AND_DAY:
        return YearType.LEAP_MONTH
    if raw != YearType.REGULAR:
        return raw
    if raw_year_type(be_year - 1) == YearType.LEAP_MONTH_AND_DAY:
        logger.debug("BE %d: leap day deferred from BE %d", be_year, be_year - 1)
        return YearType.LEAP_DAY
    return YearType.REGULAR


def is_leap_month(be_year: int) -> bool:
    return year_type(be_year) == YearType.LEAP_MONTH

def is_leap_day(be_year: int) -> bool:
    return year_type(be_year) == YearType.LEAP_DAY


__all__ = [
    "bodithey_leap",
    "avoman_leap",
    "raw_year_type",
    "year_type",
    "is_leap_month",
    "is_leap_day",
    "is_solar_leap",
]
