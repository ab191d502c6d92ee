from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LocaleTable:
    """
    Display strings for lunar dates. Every field is an index-aligned tuple:
    lunar months by ``LunarMonth`` value, weekdays with 0=Sunday, moon status
    by ``MoonPhase``, moon days by day offset 0..29, animal years 0..11 and
    era years 0..9. ``digits`` replaces ASCII 0-9 in rendered output.
    """
    name: str
    lunar_months: Tuple[str, ...]
    weekdays: Tuple[str, ...]
    weekdays_short: Tuple[str, ...]
    moon_status: Tuple[str, ...]
    moon_status_short: Tuple[str, ...]
    moon_days: Tuple[str, ...]
    animal_years: Tuple[str, ...]
    era_years: Tuple[str, ...]
    digits: str = "0123456789"

    def __post_init__(self) -> None:
        sizes = {
            "lunar_months": 14,
            "weekdays": 7,
            "weekdays_short": 7,
            "moon_status": 2,
            "moon_status_short": 2,
            "moon_days": 30,
            "animal_years": 12,
            "era_years": 10,
            "digits": 10,
        }
        for attr, n in sizes.items():
            if len(getattr(self, attr)) != n:
                raise ValueError(f"Locale '{self.name}': {attr} must have {n} entries")

    def postformat(self, text: str) -> str:
        if self.digits == "0123456789":
            return text
        return text.translate(str.maketrans("0123456789", self.digits))
