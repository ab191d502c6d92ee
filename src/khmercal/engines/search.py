"""
khmercal.engines.search
-----------------------
Epoch-walking search from a solar date to its lunar month and day.

Starting at a reference date whose lunar position is known, the cursor is
moved one Khmer year at a time until the target lies inside the current
year, then one lunar month at a time, and the remainder is the day offset.

The cursor is a Julian Day Number throughout. A backward walk may overshoot
below 1 January of year 1, which ``datetime.date`` cannot represent, so no
date object is built until the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Tuple

from ..core.errors import InternalConsistencyError
from ..core.time import be_year_of, be_year_of_jdn, jdn_to_ymd, to_jdn
from ..core.types import LunarDate, LunarMonth, ReferenceEpoch
from .lengths import days_in_month, days_in_year
from .months import next_month_in_year

logger = logging.getLogger(__name__)

# 1 January 1900 is the first day (1 koet) of Boss.
EPOCH_1900 = ReferenceEpoch(solar_date=date(1900, 1, 1), month=LunarMonth.BOSS, day=0)


@dataclass
class SearchTrace:
    """Step log of one search, for ``explain``-style debugging. Cursors are JDNs."""
    target: date
    epoch: ReferenceEpoch
    start_jdn: int = 0
    year_steps: List[Tuple[int, int]] = field(default_factory=list)    # (cursor after step, days moved)
    month_steps: List[Tuple[int, LunarMonth, int]] = field(default_factory=list)  # (month start, month, length)
    result: LunarDate | None = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "epoch": self.epoch,
            "start_jdn": self.start_jdn,
            "year_steps": list(self.year_steps),
            "month_steps": [(j, m.name, n) for j, m, n in self.month_steps],
            "result": self.result,
        }


def _next_year_length(cursor: int) -> int:
    # length of the Khmer year holding the same day one solar year later
    year, month, _ = jdn_to_ymd(cursor)
    return days_in_year(be_year_of(year + 1, month))


def _year_phase(target: int, cursor: int, trace: SearchTrace) -> int:
    if target > cursor:
        while True:
            n = _next_year_length(cursor)
            if target - cursor <= n:
                break
            cursor += n
            trace.year_steps.append((cursor, n))
    elif target < cursor:
        while cursor > target:
            n = days_in_year(be_year_of_jdn(cursor))
            cursor -= n
            trace.year_steps.append((cursor, -n))
    return cursor


def _month_phase(target: int, cursor: int, month: LunarMonth, trace: SearchTrace) -> Tuple[int, LunarMonth]:
    while True:
        n = days_in_month(month, be_year_of_jdn(cursor))
        # >= so that the first day of a month is day 0 of that month
        if target - cursor < n:
            return cursor, month
        trace.month_steps.append((cursor, month, n))
        cursor += n
        month = next_month_in_year(month, be_year_of_jdn(cursor))


def trace_lunar_date(target: date, *, epoch: ReferenceEpoch = EPOCH_1900) -> SearchTrace:
    target_jdn = to_jdn(target)

    # walk from the first day of the epoch month
    start = to_jdn(epoch.solar_date) - epoch.day
    trace = SearchTrace(target=target, epoch=epoch, start_jdn=start)

    cursor = _year_phase(target_jdn, start, trace)
    logger.debug("year phase: JDN %d -> %d in %d steps", start, cursor, len(trace.year_steps))

    cursor, month = _month_phase(target_jdn, cursor, epoch.month, trace)
    logger.debug("month phase: %s starts at JDN %d after %d steps", month.name, cursor, len(trace.month_steps))

    day = target_jdn - cursor
    if not (0 <= day <= 29):
        raise InternalConsistencyError(
            f"Search for {target} ended at {month.name} day {day} from JDN {cursor}"
        )

    trace.result = LunarDate(day=day, month=month, solar_date=target)
    return trace


def find_lunar_date(target: date, *, epoch: ReferenceEpoch = EPOCH_1900) -> LunarDate:
    """Lunar month and day offset (0..29) of a solar date."""
    result = trace_lunar_date(target, epoch=epoch).result
    if result is None:
        raise InternalConsistencyError(f"Search for {target} produced no result")
    return result
