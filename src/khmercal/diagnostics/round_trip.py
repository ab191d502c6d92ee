"""
Consecutive-day continuity check.

For random solar dates d, the lunar date of d+1 must either be the next
day of the same month or day 0 of the successor month, and the month that
ended must have had exactly the tabulated length.
"""
from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import khmercal
from khmercal.core.time import add_days, be_year
from khmercal.engines.lengths import days_in_month
from khmercal.engines.months import next_month_in_year


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def check_step(d0: date) -> str | None:
    """Return a failure description, or None when d0 -> d0+1 is consistent."""
    a = khmercal.lunar_date(d0)
    d1 = add_days(d0, 1)
    b = khmercal.lunar_date(d1)
    if not (0 <= a.day <= 29):
        return f"day offset out of range: {a}"
    if b.month == a.month and b.day == a.day + 1:
        return None
    month_start = add_days(d0, -a.day)
    length = days_in_month(a.month, be_year(month_start))
    if b.day != 0 or a.day + 1 != length:
        return f"bad month end: {a} -> {b} (expected length {length})"
    expected = next_month_in_year(a.month, be_year(d1))
    if b.month != expected:
        return f"bad successor: {a.month.name} -> {b.month.name} (expected {expected.name})"
    return None


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        msg = check_step(d0)
        if msg is None:
            lunar = khmercal.lunar_date(d0)
            if lunar.solar_date != d0 or khmercal.lunar_date(d0) != lunar:
                msg = f"unstable result for {d0}: {lunar}"
        if msg is not None:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print(msg)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random continuity tests of the solar -> lunar search.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="1700-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2200-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All continuity tests passed.")
        return 0

    print(f"Continuity failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
