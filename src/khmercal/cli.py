from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import khmercal
    from khmercal.attributes.registry import list_attributes

    p = argparse.ArgumentParser(prog="khmercal day", description="Gregorian -> Khmer lunar date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--format", dest="fmt", default=None, help="Format string (W w d D n N o m a e b c j)")
    p.add_argument("--debug", action="store_true")
    p.add_argument(
        "--attr", action="append", default=[],
        help=f"attribute name (repeatable): {', '.join(list_attributes())}",
    )
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    try:
        info = khmercal.day_info(d, attributes=tuple(args.attr), debug=args.debug)
        text = khmercal.to_lunar_date(d, args.fmt)
    except khmercal.KhmerCalError as e:
        raise SystemExit(f"error: {e}") from e
    except KeyError as e:
        raise SystemExit(f"error: {e.args[0]}") from e

    print(text)
    if args.attr or args.debug:
        print(info)
    return 0


def cmd_year(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal year", description="Classify a Buddhist Era year")
    p.add_argument("be_year", type=int, help="Buddhist Era year, e.g. 2568")
    args = p.parse_args(argv)

    yi = khmercal.year_info(args.be_year)
    c = yi.constants

    print(f"BE {yi.be_year}")
    print(f"  Aharkun        = {c.aharkun}  (mod 800: {c.aharkun_mod})")
    print(f"  Kromthupul     = {c.kromthupul}  solar leap: {'yes' if c.is_solar_leap else 'no'}")
    print(f"  Avoman         = {c.avoman}  leap-day flag: {'yes' if yi.avoman_leap else 'no'}")
    print(f"  Bodithey       = {c.bodithey}  leap-month flag: {'yes' if yi.bodithey_leap else 'no'}")
    print()
    print(f"  Raw type       = {yi.raw_type.name}")
    print(f"  Effective type = {yi.year_type.name}")
    print(f"  Days in year   = {yi.days_in_year}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `khmercal [-v] YYYY-MM-DD ...`
    lead = 0
    while lead < len(argv) and argv[lead] in ("-v", "--verbose"):
        lead += 1
    if lead < len(argv) and _DATE_RE.match(argv[lead]):
        if lead:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        return cmd_day(argv[lead:])

    p = argparse.ArgumentParser(prog="khmercal", description="Khmer lunar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log search steps at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> Khmer lunar date")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--format", dest="fmt", default=None)
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    # year
    p_year = sub.add_parser("year", help="Classify a Buddhist Era year")
    p_year.add_argument("be_year")

    # diagnostics
    sub.add_parser("year-table", help="Print a table of year classifications (diagnostics)")
    sub.add_parser("pretty-month", help="Print a Gregorian month with lunar labels (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        day_argv = [args.date]
        if args.fmt is not None:
            day_argv += ["--format", args.fmt]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "year":
        return cmd_year([args.be_year] + rest)

    if args.cmd == "year-table":
        return _run_module_main("khmercal.diagnostics.year_table", rest)

    if args.cmd == "pretty-month":
        return _run_module_main("khmercal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "khmercal.diagnostics.round_trip",
            "leap-years": "khmercal.diagnostics.leap_years",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
