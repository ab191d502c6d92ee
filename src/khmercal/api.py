from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, Optional, Sequence

from .attributes.registry import compute_attributes
from .core.errors import UnsupportedOperationError
from .core.time import be_year as _be_year
from .core.types import DayInfo, LunarDate, LunarMonth, YearInfo, YearType
from .engines import classifier as _classifier
from .engines import lengths as _lengths
from .engines import year_constants as _constants
from .engines.calendar import KhmerCalendar
from .formatting import format_lunar_date
from .locales import KM, LocaleTable

_calendar = KhmerCalendar()


def calendar_info() -> Dict[str, Any]:
    return _calendar.info()

# ============================================================
# Solar -> lunar
# ============================================================

def lunar_date(d: date) -> LunarDate:
    return _calendar.lunar_date(d)

def to_lunar_date(d: date, fmt: Optional[Any] = None, *, locale: LocaleTable = KM) -> str:
    """Lunar date of ``d`` rendered with ``fmt`` (default sentence when None)."""
    return format_lunar_date(_calendar.lunar_date(d), fmt, locale=locale)

def kh_day(d: date) -> int:
    """Day offset 0..29 within the lunar month."""
    return _calendar.lunar_date(d).day

def kh_month(d: date) -> LunarMonth:
    return _calendar.lunar_date(d).month

def kh_year(d: date) -> int:
    """Buddhist Era year of ``d``."""
    return _be_year(d)

def day_info(
    d: date,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _calendar.day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: date) -> Dict[str, Any]:
    return _calendar.explain(d)

def read_lunar_date(*args: Any, **kwargs: Any) -> date:
    """Parsing a lunar date back to a solar date is not supported."""
    raise UnsupportedOperationError("read_lunar_date is not implemented")

# ============================================================
# Year classification
# ============================================================

def year_info(be_year: int) -> YearInfo:
    return _calendar.year_info(be_year)

def year_type(be_year: int) -> YearType:
    return _classifier.year_type(be_year)

def raw_year_type(be_year: int) -> YearType:
    return _classifier.raw_year_type(be_year)

def is_leap_month(be_year: int) -> bool:
    return _classifier.is_leap_month(be_year)

def is_leap_day(be_year: int) -> bool:
    return _classifier.is_leap_day(be_year)

def is_solar_leap(be_year: int) -> bool:
    return _constants.is_solar_leap(be_year)

def days_in_year(be_year: int) -> int:
    return _lengths.days_in_year(be_year)

def days_in_month(month: LunarMonth, be_year: int) -> int:
    return _lengths.days_in_month(month, be_year)
