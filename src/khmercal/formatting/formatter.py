from __future__ import annotations

from typing import Any, Optional

from ..core.errors import InvalidFormatError
from ..core.types import LunarDate
from ..locales import KM, LocaleTable
from .tokens import FieldKind, Literal, Token, parse_format


def render_field(kind: FieldKind, lunar: LunarDate, locale: LocaleTable) -> str:
    if kind is FieldKind.WEEKDAY:
        return locale.weekdays[lunar.weekday]
    if kind is FieldKind.WEEKDAY_SHORT:
        return locale.weekdays_short[lunar.weekday]
    if kind is FieldKind.MOON_DAY:
        return str(lunar.moon_day)
    if kind is FieldKind.MOON_DAY_PADDED:
        return f"{lunar.moon_day:02d}"
    if kind is FieldKind.MOON_STATUS_SHORT:
        return locale.moon_status_short[lunar.phase]
    if kind is FieldKind.MOON_STATUS:
        return locale.moon_status[lunar.phase]
    if kind is FieldKind.MOON_DAY_SYMBOL:
        return locale.moon_days[lunar.day]
    if kind is FieldKind.MONTH:
        return locale.lunar_months[lunar.month]
    if kind is FieldKind.ANIMAL_YEAR:
        return locale.animal_years[lunar.animal_year]
    if kind is FieldKind.ERA_YEAR:
        return locale.era_years[lunar.era_year]
    if kind is FieldKind.BE_YEAR:
        return str(lunar.be_year)
    if kind is FieldKind.AD_YEAR:
        return f"{lunar.solar_date.year:04d}"
    if kind is FieldKind.JOLAK_SAKARAJ:
        return str(lunar.jolak_sakaraj)
    raise ValueError(f"Unhandled format field {kind!r}")


def _render_token(tok: Token, lunar: LunarDate, locale: LocaleTable) -> str:
    if isinstance(tok, Literal):
        return tok.text
    return render_field(tok.kind, lunar, locale)


def default_format(lunar: LunarDate, locale: LocaleTable = KM) -> str:
    """ថ្ងៃ<weekday> <n><phase> ខែ<month> ឆ្នាំ<animal> <era> ពុទ្ធសករាជ <BE>"""
    return (
        f"ថ្ងៃ{locale.weekdays[lunar.weekday]} "
        f"{lunar.moon_day}{locale.moon_status[lunar.phase]} "
        f"ខែ{locale.lunar_months[lunar.month]} "
        f"ឆ្នាំ{locale.animal_years[lunar.animal_year]} "
        f"{locale.era_years[lunar.era_year]} "
        f"ពុទ្ធសករាជ {lunar.be_year}"
    )


def format_lunar_date(lunar: LunarDate, fmt: Optional[Any] = None, *, locale: LocaleTable = KM) -> str:
    if fmt is None:
        return locale.postformat(default_format(lunar, locale))
    if isinstance(fmt, str):
        text = "".join(_render_token(t, lunar, locale) for t in parse_format(fmt))
        return locale.postformat(text)
    raise InvalidFormatError(f"{fmt!r} is not a valid date format")
