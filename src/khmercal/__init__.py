"""khmercal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard day attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    calendar_info,
    lunar_date,
    to_lunar_date,
    kh_day,
    kh_month,
    kh_year,
    day_info,
    explain,
    read_lunar_date,
    year_info,
    year_type,
    raw_year_type,
    is_leap_month,
    is_leap_day,
    is_solar_leap,
    days_in_year,
    days_in_month,
)
from .core.errors import (
    KhmerCalError,
    InvalidFormatError,
    InternalConsistencyError,
    UnsupportedOperationError,
)
from .core.types import LunarDate, LunarMonth, MoonPhase, YearType
from .locales import KM, LocaleTable

__all__ = [
    "calendar_info",
    "lunar_date",
    "to_lunar_date",
    "kh_day",
    "kh_month",
    "kh_year",
    "day_info",
    "explain",
    "read_lunar_date",
    "year_info",
    "year_type",
    "raw_year_type",
    "is_leap_month",
    "is_leap_day",
    "is_solar_leap",
    "days_in_year",
    "days_in_month",
    "KhmerCalError",
    "InvalidFormatError",
    "InternalConsistencyError",
    "UnsupportedOperationError",
    "LunarDate",
    "LunarMonth",
    "MoonPhase",
    "YearType",
    "KM",
    "LocaleTable",
]
