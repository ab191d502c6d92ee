from __future__ import annotations
from typing import Any, Dict

from ..core.types import DayInfo
from .registry import register_attribute

def weekday(info: DayInfo) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, as indexed by the locale tables.
    return {"weekday": info.lunar.weekday}

def zodiac(info: DayInfo) -> Dict[str, Any]:
    return {
        "animal_year": info.lunar.animal_year,
        "era_year": info.lunar.era_year,
    }

def eras(info: DayInfo) -> Dict[str, Any]:
    return {
        "be_year": info.lunar.be_year,
        "jolak_sakaraj": info.lunar.jolak_sakaraj,
        "moha_sakaraj": info.lunar.moha_sakaraj,
    }

def moon(info: DayInfo) -> Dict[str, Any]:
    return {
        "moon_day": info.lunar.moon_day,
        "phase": info.lunar.phase.name.lower(),
    }

register_attribute("weekday", weekday)
register_attribute("zodiac", zodiac)
register_attribute("eras", eras)
register_attribute("moon", moon)
