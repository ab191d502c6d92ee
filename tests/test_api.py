# tests/test_api.py

import pytest
from datetime import date

import khmercal
from khmercal import LunarMonth, YearType


def test_lunar_date_entry_point():
    r = khmercal.lunar_date(date(1900, 1, 31))
    assert (r.day, r.month) == (0, LunarMonth.MEAKH)

def test_field_accessors():
    d = date(1900, 1, 20)
    assert khmercal.kh_day(d) == 19
    assert khmercal.kh_month(d) == LunarMonth.BOSS
    assert khmercal.kh_year(d) == 2443

@pytest.mark.parametrize(
    "d, be",
    [
        (date(2024, 3, 31), 2567),
        (date(2024, 4, 1), 2568),
        (date(2024, 12, 31), 2568),
        (date(1900, 1, 1), 2443),
    ],
)
def test_buddhist_era_boundary(d, be):
    assert khmercal.kh_year(d) == be
    assert khmercal.lunar_date(d).be_year == be

def test_to_lunar_date_default_and_custom():
    d = date(1900, 1, 1)
    assert khmercal.to_lunar_date(d).startswith("ថ្ងៃច័ន្ទ ១កើត ខែបុស្ស")
    assert khmercal.to_lunar_date(d, "m") == "បុស្ស"

def test_to_lunar_date_rejects_bad_format():
    with pytest.raises(khmercal.InvalidFormatError):
        khmercal.to_lunar_date(date(1900, 1, 1), 42)

def test_read_lunar_date_is_unsupported():
    with pytest.raises(khmercal.UnsupportedOperationError):
        khmercal.read_lunar_date("១កើត ខែបុស្ស", "dN ខែm")
    with pytest.raises(NotImplementedError):
        khmercal.read_lunar_date()

def test_year_classification_entry_points():
    assert khmercal.year_type(2471) == YearType.LEAP_DAY
    assert khmercal.is_leap_day(2471)
    assert not khmercal.is_leap_month(2471)
    assert khmercal.is_solar_leap(2471)
    assert khmercal.raw_year_type(2481) == YearType.LEAP_MONTH_AND_DAY
    assert khmercal.year_type(2481) == YearType.LEAP_MONTH
    assert khmercal.days_in_year(2472) == 384
    assert khmercal.days_in_month(LunarMonth.JESTH, 2471) == 30

def test_year_info():
    yi = khmercal.year_info(2482)
    assert yi.be_year == 2482
    assert yi.raw_type == YearType.REGULAR
    assert yi.year_type == YearType.LEAP_DAY
    assert yi.days_in_year == 355
    assert yi.bodithey_leap is False
    assert yi.avoman_leap is False
    assert yi.constants.avoman == 641

def test_day_info_attributes():
    info = khmercal.day_info(date(1900, 1, 1), attributes=("weekday", "zodiac", "eras", "moon"))
    assert info.attributes == {
        "weekday": 1,
        "animal_year": 11,
        "era_year": 1,
        "be_year": 2443,
        "jolak_sakaraj": 1261,
        "moha_sakaraj": 1823,
        "moon_day": 1,
        "phase": "waxing",
    }
    assert info.debug is None

def test_day_info_unknown_attribute():
    with pytest.raises(KeyError, match="Unknown attribute"):
        khmercal.day_info(date(1900, 1, 1), attributes=("nakshatra",))

def test_explain_has_search_steps():
    out = khmercal.explain(date(1901, 3, 1))
    assert out["lunar"] == khmercal.lunar_date(date(1901, 3, 1))
    assert out["debug"]["result"] == out["lunar"]
    assert len(out["debug"]["year_steps"]) == 1
    assert out["debug"]["month_steps"][0][1] == "BOSS"

def test_calendar_info():
    assert khmercal.calendar_info()["epoch"] == {"solar_date": "1900-01-01", "month": "BOSS", "day": 0}

def test_registered_attribute_names():
    from khmercal.attributes.registry import list_attributes
    assert list_attributes() == ["eras", "moon", "weekday", "zodiac"]
