"""
Gregorian date helpers and Khmer year numbering.

``datetime.date`` is the date provider; whole-day arithmetic goes through
Julian Day Numbers so that day differences are plain integers.
"""
from __future__ import annotations
from datetime import date

# Solar month (1-based) from which the Buddhist Era count has advanced.
KHMER_NEW_YEAR_MONTH = 4


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_ymd(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn as plain integers; not limited to years 1..9999."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def from_jdn(jdn: int) -> date:
    return date(*jdn_to_ymd(jdn))

def days_between(later: date, earlier: date) -> int:
    """Signed number of whole days from ``earlier`` to ``later``."""
    return to_jdn(later) - to_jdn(earlier)

def add_days(d: date, n: int) -> date:
    return from_jdn(to_jdn(d) + n)

def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def weekday_index(d: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7

# ------------------------------------------------------------
# Year numbering
# ------------------------------------------------------------

def be_year_of(year: int, month: int) -> int:
    """Buddhist Era year of a Gregorian (year, month) (+543 before April, +544 from April on)."""
    if month < KHMER_NEW_YEAR_MONTH:
        return year + 543
    return year + 544

def be_year(d: date) -> int:
    return be_year_of(d.year, d.month)

def be_year_of_jdn(jdn: int) -> int:
    year, month, _ = jdn_to_ymd(jdn)
    return be_year_of(year, month)

def jolak_sakaraj(be: int) -> int:
    return be - 1182

def moha_sakaraj(ad_year: int) -> int:
    return ad_year - 77

def animal_year(be: int) -> int:
    """Index 0..11 into the animal cycle (0 = rat)."""
    return (be + 4) % 12

def era_year(be: int) -> int:
    """Index 0..9 into the ten-year 'sak' cycle."""
    return jolak_sakaraj(be) % 10
