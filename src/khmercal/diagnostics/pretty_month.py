from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import khmercal
from khmercal.locales import KM


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_label(lunar: khmercal.LunarDate) -> str:
    """Month number (1 = Migasir .. 14) and moon day, e.g. '02+05' or '02-11'."""
    sign = "+" if lunar.phase == khmercal.MoonPhase.WAXING else "-"
    return f"{lunar.month + 1:02d}{sign}{lunar.moon_day:02d}"


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.isoweekday() % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))

    months_seen: list[khmercal.LunarMonth] = []
    d = first
    while d <= last:
        lunar = khmercal.lunar_date(d)
        if lunar.month not in months_seen:
            months_seen.append(lunar.month)
        wk.append(cell(f"{d.day:2d}", lunar_label(lunar)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    be = khmercal.kh_year(first)
    ytype = khmercal.year_type(be).name
    names = ", ".join(f"{m + 1:02d}={m.name.title()} ({KM.lunar_months[m]})" for m in months_seen)
    print_grid(f"Gregorian month {gy}-{gm:02d}   BE {be} ({ytype})   {names}", weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian-month calendar with the Khmer lunar label under each day."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 4)")
    args = p.parse_args(argv)

    if not args.greg:
        today = date.today()
        gregorian_month_calendar(today.year, today.month)
        return 0

    gy, gm = args.greg
    gregorian_month_calendar(gy, gm)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
