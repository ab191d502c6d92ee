"""Khmer locale."""
from __future__ import annotations

from .table import LocaleTable

# Khmer lunar date symbols: U+19E1..U+19EF for 1..15 koet, U+19F1..U+19FF for 1..15 roach.
_MOON_DAYS = tuple(chr(c) for c in range(0x19E1, 0x19F0)) + tuple(chr(c) for c in range(0x19F1, 0x1A00))

KM = LocaleTable(
    name="km",
    lunar_months=tuple(
        "មិគសិរ_បុស្ស_មាឃ_ផល្គុន_ចេត្រ_ពិសាខ_ជេស្ឋ_អាសាឍ_ស្រាពណ៍_ភទ្របទ_អស្សុជ_កក្ដិក_បឋមាសាឍ_ទុតិយាសាឍ".split("_")
    ),
    weekdays=tuple("អាទិត្យ_ច័ន្ទ_អង្គារ_ពុធ_ព្រហស្បតិ៍_សុក្រ_សៅរ៍".split("_")),
    weekdays_short=tuple("អា_ច_អ_ព_ព្រ_សុ_ស".split("_")),
    moon_status=("កើត", "រោច"),
    moon_status_short=("ក", "រ"),
    moon_days=_MOON_DAYS,
    animal_years=tuple("ជូត_ឆ្លូវ_ខាល_ថោះ_រោង_ម្សាញ់_មមី_មមែ_វក_រកា_ច_កុរ".split("_")),
    era_years=tuple(
        "សំរឹទ្ធិស័ក_ឯកស័ក_ទោស័ក_ត្រីស័ក_ចត្វាស័ក_បញ្ចស័ក_ឆស័ក_សប្តស័ក_អដ្ឋស័ក_នព្វស័ក".split("_")
    ),
    digits="០១២៣៤៥៦៧៨៩",
)
