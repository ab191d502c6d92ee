"""
khmercal.engines.months
-----------------------
Cyclic order of the lunar month slots.

The only branch point is Jesth: in a leap-month year it is followed by the
intercalary pair Pathamasadh/Tutiyasadh instead of Asadh. Both Asadh and
Tutiyasadh lead on to Sraphoan.
"""

from __future__ import annotations

from typing import Dict, List

from ..core.errors import InternalConsistencyError
from ..core.types import LunarMonth
from .classifier import is_leap_month

M = LunarMonth

# Successor of each slot outside the branch point.
_NEXT: Dict[LunarMonth, LunarMonth] = {
    M.MIGASIR: M.BOSS,
    M.BOSS: M.MEAKH,
    M.MEAKH: M.PHALKUN,
    M.PHALKUN: M.CHETR,
    M.CHETR: M.PISAKH,
    M.PISAKH: M.JESTH,
    M.ASADH: M.SRAPHOAN,
    M.SRAPHOAN: M.PHEATRABOT,
    M.PHEATRABOT: M.ASSOCH,
    M.ASSOCH: M.KADEK,
    M.KADEK: M.MIGASIR,
    M.PATHAMASADH: M.TUTIYASADH,
    M.TUTIYASADH: M.SRAPHOAN,
}

# Slot that begins each Khmer year as counted from the reference epoch.
YEAR_START = M.BOSS


def next_month(month: LunarMonth, leap_month_year: bool) -> LunarMonth:
    """Successor of ``month``; ``leap_month_year`` only matters after Jesth."""
    if month == M.JESTH:
        return M.PATHAMASADH if leap_month_year else M.ASADH
    try:
        return _NEXT[LunarMonth(month)]
    except (KeyError, ValueError) as e:
        raise InternalConsistencyError(f"No successor for lunar month {month!r}") from e


def next_month_in_year(month: LunarMonth, be_year: int) -> LunarMonth:
    return next_month(month, is_leap_month(be_year))


def months_in_year(be_year: int) -> List[LunarMonth]:
    """Month slots of one epoch-aligned Khmer year (Boss .. Migasir) for ``be_year``."""
    leap = is_leap_month(be_year)
    out = [YEAR_START]
    m = next_month(YEAR_START, leap)
    while m != YEAR_START:
        out.append(m)
        m = next_month(m, leap)
    return out
