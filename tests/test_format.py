# tests/test_format.py

import pytest
from datetime import date

from khmercal.core.errors import InvalidFormatError
from khmercal.core.types import LunarDate, LunarMonth
from khmercal.formatting import Field, FieldKind, Literal, format_lunar_date, parse_format
from khmercal.locales import KM, LocaleTable

# 1 January 1900: Monday, 1 koet Boss, year of the pig, ekasak, BE 2443
EPOCH_DAY = LunarDate(day=0, month=LunarMonth.BOSS, solar_date=date(1900, 1, 1))
WANING = LunarDate(day=19, month=LunarMonth.BOSS, solar_date=date(1900, 1, 20))


def test_default_sentence():
    assert format_lunar_date(EPOCH_DAY) == "ថ្ងៃច័ន្ទ ១កើត ខែបុស្ស ឆ្នាំកុរ ឯកស័ក ពុទ្ធសករាជ ២៤៤៣"

@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("W", "ច័ន្ទ"),
        ("w", "ច"),
        ("d", "១"),
        ("D", "០១"),
        ("N", "កើត"),
        ("n", "ក"),
        ("m", "បុស្ស"),
        ("a", "កុរ"),
        ("e", "ឯកស័ក"),
        ("b", "២៤៤៣"),
        ("c", "១៩០០"),
        ("j", "១២៦១"),
        ("o", "᧡"),
    ],
)
def test_single_tokens(fmt, expected):
    assert format_lunar_date(EPOCH_DAY, fmt) == expected

def test_ad_year_is_zero_padded():
    early = LunarDate(day=0, month=LunarMonth.BOSS, solar_date=date(800, 5, 1))
    assert format_lunar_date(early, "c") == "០៨០០"

def test_waning_day_tokens():
    assert format_lunar_date(WANING, "dN") == "៥រោច"
    assert format_lunar_date(WANING, "Dn") == "០៥រ"
    assert format_lunar_date(WANING, "o") == "᧵"
    # 20 January 1900 is a Saturday
    assert format_lunar_date(WANING, "W") == "សៅរ៍"

def test_literals_pass_through():
    assert format_lunar_date(EPOCH_DAY, "ខែm ព.ស.b") == "ខែបុស្ស ព.ស.២៤៤៣"
    assert format_lunar_date(EPOCH_DAY, "") == ""
    assert format_lunar_date(EPOCH_DAY, "x-y") == "x-y"

def test_no_escaping_every_token_char_is_replaced():
    # 'a' and 'd' inside a word are still tokens
    assert format_lunar_date(EPOCH_DAY, "day") == "១កុរy"

def test_parse_format_groups_literals():
    assert parse_format("d/m/b!") == (
        Field(FieldKind.MOON_DAY),
        Literal("/"),
        Field(FieldKind.MONTH),
        Literal("/"),
        Field(FieldKind.BE_YEAR),
        Literal("!"),
    )

@pytest.mark.parametrize("bad", [123, 1.5, ["d"], {"fmt": "d"}, b"d"])
def test_invalid_format_type(bad):
    with pytest.raises(InvalidFormatError, match="not a valid date format"):
        format_lunar_date(EPOCH_DAY, bad)

def test_invalid_format_is_a_type_error():
    with pytest.raises(TypeError):
        format_lunar_date(EPOCH_DAY, 0)

def test_postformat_without_digit_script():
    latin = LocaleTable(
        name="latin",
        lunar_months=tuple(m.name.title() for m in LunarMonth),
        weekdays=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        weekdays_short=tuple("SMTWTFS"),
        moon_status=("koet", "roach"),
        moon_status_short=("K", "R"),
        moon_days=tuple(str(i) for i in range(30)),
        animal_years=tuple(f"A{i}" for i in range(12)),
        era_years=tuple(f"E{i}" for i in range(10)),
    )
    assert format_lunar_date(EPOCH_DAY, "W D N m b", locale=latin) == "Mon 01 koet Boss 2443"

def test_locale_table_checks_sizes():
    with pytest.raises(ValueError):
        LocaleTable(
            name="bad",
            lunar_months=KM.lunar_months[:12],
            weekdays=KM.weekdays,
            weekdays_short=KM.weekdays_short,
            moon_status=KM.moon_status,
            moon_status_short=KM.moon_status_short,
            moon_days=KM.moon_days,
            animal_years=KM.animal_years,
            era_years=KM.era_years,
        )

def test_khmer_moon_day_symbols():
    assert len(KM.moon_days) == 30
    assert KM.moon_days[14] == "᧯"
    assert KM.moon_days[15] == "᧱"
