# tests/test_months.py

import pytest

from khmercal.core.errors import InternalConsistencyError
from khmercal.core.types import LunarMonth
from khmercal.engines.months import months_in_year, next_month

M = LunarMonth


def test_ordinary_cycle_returns_to_start():
    m = M.BOSS
    seen = []
    for _ in range(12):
        seen.append(m)
        m = next_month(m, False)
    assert m == M.BOSS
    assert sorted(seen) == list(range(12))

def test_leap_month_cycle_has_thirteen_months():
    m = M.BOSS
    seen = []
    for _ in range(13):
        seen.append(m)
        m = next_month(m, True)
    assert m == M.BOSS
    assert M.ASADH not in seen
    assert seen.index(M.PATHAMASADH) + 1 == seen.index(M.TUTIYASADH)

def test_jesth_branch():
    assert next_month(M.JESTH, False) == M.ASADH
    assert next_month(M.JESTH, True) == M.PATHAMASADH
    assert next_month(M.PATHAMASADH, False) == M.TUTIYASADH
    assert next_month(M.TUTIYASADH, False) == M.SRAPHOAN
    assert next_month(M.ASADH, True) == M.SRAPHOAN

def test_year_layout():
    assert months_in_year(2473)[0] == M.BOSS
    assert months_in_year(2473)[-1] == M.MIGASIR
    assert len(months_in_year(2473)) == 12
    assert len(months_in_year(2472)) == 13

@pytest.mark.parametrize("bad", [14, -1, 99])
def test_unknown_month_is_internal_error(bad):
    with pytest.raises(InternalConsistencyError):
        next_month(bad, False)

def test_intercalary_flag():
    assert M.PATHAMASADH.is_intercalary
    assert M.TUTIYASADH.is_intercalary
    assert not M.ASADH.is_intercalary
