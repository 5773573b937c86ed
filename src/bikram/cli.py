from __future__ import annotations

import argparse
import importlib
import inspect
import re
import sys
from datetime import date

from .core.errors import BikramError


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


def _format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--format", default="YYYY-MM-DD", help="Output pattern, e.g. 'D MMMM YYYY, dddd'")
    p.add_argument("--devanagari", action="store_true", help="Render digits in Devanagari")
    p.add_argument("--locale", choices=["en", "ne"], default="en", help="Month/weekday name language")
    p.add_argument("--calendar", default="default")


def cmd_to_bs(argv: list[str]) -> int:
    import bikram

    p = argparse.ArgumentParser(prog="bikram to-bs", description="Gregorian (AD) -> Bikram Sambat")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian)")
    _format_args(p)
    args = p.parse_args(argv)

    try:
        bs = bikram.gregorian_to_bs(_parse_ymd(args.date), calendar=args.calendar)
        out = bikram.format_date(
            bs,
            args.format,
            digits="devanagari" if args.devanagari else "arabic",
            month_name_locale=args.locale,
            calendar=args.calendar,
        )
    except (bikram.BikramError, ValueError) as e:
        p.error(str(e))
    print(out)
    return 0


def cmd_to_ad(argv: list[str]) -> int:
    import bikram

    p = argparse.ArgumentParser(prog="bikram to-ad", description="Bikram Sambat -> Gregorian (AD)")
    p.add_argument("date", help="YYYY-MM-DD (BS, Arabic or Devanagari digits)")
    p.add_argument("--calendar", default="default")
    args = p.parse_args(argv)

    try:
        bs = bikram.parse_bs_date(args.date, calendar=args.calendar)
        g = bikram.bs_to_gregorian(bs, calendar=args.calendar)
    except (bikram.BikramError, KeyError) as e:
        p.error(str(e))
    print(g.isoformat())
    return 0


def cmd_day(argv: list[str]) -> int:
    import bikram

    p = argparse.ArgumentParser(prog="bikram day", description="Gregorian -> BS day record")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian)")
    p.add_argument("--calendar", default="default")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = bikram.day_info(
            _parse_ymd(args.date), calendar=args.calendar, attributes=tuple(args.attr), debug=args.debug
        )
    except (bikram.BikramError, KeyError, ValueError) as e:
        p.error(str(e))
    print(info)
    return 0


def cmd_info(argv: list[str]) -> int:
    import bikram

    p = argparse.ArgumentParser(prog="bikram info", description="Describe a registered calendar")
    p.add_argument("--calendar", default="default")
    args = p.parse_args(argv)

    try:
        info = bikram.calendar_info(args.calendar)
    except KeyError as e:
        p.error(str(e))
    for k, v in info.items():
        print(f"{k:16s} {v}")
    print(f"{'attributes':16s} {', '.join(bikram.list_attributes())}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `bikram YYYY-MM-DD ...` converts a Gregorian date to BS
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_bs(argv)

    p = argparse.ArgumentParser(prog="bikram", description="Bikram Sambat calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-bs", help="Gregorian -> Bikram Sambat", add_help=False)
    sub.add_parser("to-ad", help="Bikram Sambat -> Gregorian", add_help=False)
    sub.add_parser("day", help="Gregorian -> BS day record with attributes", add_help=False)
    sub.add_parser("info", help="Describe a registered calendar", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print BS/Gregorian month grids", add_help=False)
    sub.add_parser("new-years", help="Print BS New Year table", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    try:
        return _dispatch(args, rest)
    except (BikramError, KeyError) as e:
        p.error(str(e))


def _dispatch(args: argparse.Namespace, rest: list[str]) -> int:
    if args.cmd == "to-bs":
        return cmd_to_bs(rest)

    if args.cmd == "to-ad":
        return cmd_to_ad(rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("bikram.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("bikram.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "bikram.diagnostics.round_trip",
            "year-lengths": "bikram.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
