"""
khmercal.engines.calendar
-------------------------
The Orchestrator. Binds the year classifier, the length tables and the
epoch search behind one object holding the reference epoch.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from khmercal.core.errors import UnsupportedOperationError
from khmercal.core.types import DayInfo, LunarDate, ReferenceEpoch, YearInfo
from khmercal.engines.classifier import avoman_leap, bodithey_leap, raw_year_type, year_type
from khmercal.engines.lengths import days_in_year
from khmercal.engines.search import EPOCH_1900, find_lunar_date, trace_lunar_date
from khmercal.engines.year_constants import year_constants


class KhmerCalendar:
    """
    Solar to Khmer lunar conversion relative to a fixed reference epoch.
    Holds no mutable state; one instance can be shared freely.
    """
    def __init__(self, epoch: ReferenceEpoch = EPOCH_1900):
        self.epoch = epoch

    def info(self) -> Dict[str, Any]:
        return {
            "epoch": {
                "solar_date": self.epoch.solar_date.isoformat(),
                "month": self.epoch.month.name,
                "day": self.epoch.day,
            },
        }

    # ---------------------------------------------------------
    # Years
    # ---------------------------------------------------------

    def year_info(self, be_year: int) -> YearInfo:
        return YearInfo(
            constants=year_constants(be_year),
            bodithey_leap=bodithey_leap(be_year),
            avoman_leap=avoman_leap(be_year),
            raw_type=raw_year_type(be_year),
            year_type=year_type(be_year),
            days_in_year=days_in_year(be_year),
        )

    # ---------------------------------------------------------
    # Days
    # ---------------------------------------------------------

    def lunar_date(self, d: date) -> LunarDate:
        return find_lunar_date(d, epoch=self.epoch)

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        if debug:
            trace = trace_lunar_date(d, epoch=self.epoch)
            lunar = trace.result
            dbg = trace.as_dict()
        else:
            lunar = self.lunar_date(d)
            dbg = None
        return DayInfo(
            solar_date=d,
            lunar=lunar,
            year_type=year_type(lunar.be_year),
            debug=dbg,
        )

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__

    def to_gregorian(self, *args: Any, **kwargs: Any) -> List[date]:
        raise UnsupportedOperationError("Lunar to solar conversion is not implemented")
