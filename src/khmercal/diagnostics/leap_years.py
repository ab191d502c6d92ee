#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import khmercal
from khmercal.core.types import YearType


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "khmercal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "khmercal[diagnostics]"') from e


# row in the barcode for each effective type
ROWS = {
    YearType.LEAP_MONTH: 2,
    YearType.LEAP_DAY: 1,
}


def build_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    xs, ys, deferred = [], [], []
    for Y in range(start_year, end_year + 1):
        t = khmercal.year_type(Y)
        if t in ROWS:
            xs.append(Y)
            ys.append(ROWS[t])
            deferred.append(
                t == YearType.LEAP_DAY and khmercal.raw_year_type(Y) == YearType.REGULAR
            )
    return np.array(xs, dtype=int), np.array(ys, dtype=int), np.array(deferred, dtype=bool)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month / leap-day barcode diagram over a range of Buddhist Era years."
    )
    p.add_argument("--start-year", type=int, default=2500)
    p.add_argument("--end-year", type=int, default=2600)
    p.add_argument("--out", default="khmer_leap_years.png")
    p.add_argument("--title", default="Khmer leap years (Bodithey/Avoman)")
    p.add_argument("--year-step", type=int, default=10, help="Label every k years (default: 10).")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    x, y, deferred = build_points(np, start_year, end_year)

    fig, ax = plt.subplots(figsize=(16, 2.8))
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 2.5)
    ax.tick_params(axis="both", which="both", length=0)

    ax.scatter(x[~deferred], y[~deferred], s=40, marker="s", c="0.15", linewidths=0.0, label="computed", zorder=5)
    ax.scatter(
        x[deferred], y[deferred],
        s=60, marker="s", facecolors="none", edgecolors="0.15", linewidths=1.2,
        label="deferred leap day", zorder=5,
    )

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(v) for v in xt])
    ax.set_xlabel("Buddhist Era year")
    ax.set_yticks([1, 2])
    ax.set_yticklabels(["leap day", "leap month"])

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
