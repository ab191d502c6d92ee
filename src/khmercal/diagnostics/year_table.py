from __future__ import annotations

import argparse
from datetime import date

import khmercal
from khmercal.core.time import add_days
from khmercal.core.types import LunarMonth


def boss_start(gregorian_year: int) -> date:
    """First day of the Boss month beginning around 1 January of ``gregorian_year``."""
    d = date(gregorian_year - 1, 11, 15)
    for _ in range(100):
        lunar = khmercal.lunar_date(d)
        if lunar.month == LunarMonth.BOSS and lunar.day == 0:
            return d
        d = add_days(d, 1)
    raise RuntimeError(f"No start of Boss found around {gregorian_year}-01-01")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Bodithey/Avoman classification of a range of Buddhist Era years."
    )
    p.add_argument("--from-year", type=int, default=2540, help="First BE year (default: 2540)")
    p.add_argument("--to-year", type=int, default=2580, help="Last BE year (default: 2580)")
    p.add_argument("--boss", action="store_true", help="Also print the start date of Boss in each year.")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["BE", "Aharkun", "Bodithey", "Avoman", "Krom", "SolarLeap", "Raw", "Effective", "Days"]
    if args.boss:
        headers.append("Boss 1")
    colw = [max(6, len(h)) for h in headers]
    colw[6] = colw[7] = len("LEAP_MONTH_AND_DAY")
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        yi = khmercal.year_info(Y)
        c = yi.constants
        row = [
            str(Y),
            str(c.aharkun),
            str(c.bodithey),
            str(c.avoman),
            str(c.kromthupul),
            "yes" if c.is_solar_leap else "",
            yi.raw_type.name,
            yi.year_type.name,
            str(yi.days_in_year),
        ]
        if args.boss:
            # Boss of the epoch-aligned year whose Jesth falls in BE Y
            row.append(boss_start(Y - 544).isoformat())
        print("  ".join(v.ljust(w) for v, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
