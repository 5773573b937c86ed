from __future__ import annotations

import argparse
from datetime import date

import bikram
from bikram.core.time import gregorian_month_length
from bikram.formatting import MONTH_NAMES, to_devanagari_digits


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


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


def to_weeks(first_weekday: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first_weekday)]  # Monday=0
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def bs_month_calendar(Y: int, M: int, *, devanagari: bool = False, calendar: str = "default") -> None:
    b = bikram.month_bounds(Y, M, calendar=calendar)
    g0 = b["first_date"]

    cells = []
    for day in range(1, b["days"] + 1):
        g = bikram.add_days(g0, day - 1, calendar=calendar)
        top = to_devanagari_digits(day) if devanagari else f"{day:2d}"
        cells.append(cell(top, f"{g.month:02d}-{g.day:02d}"))

    name = MONTH_NAMES["ne" if devanagari else "en"][M - 1]
    title = f"BS {Y}-{M:02d} {name}   ({b['first_date']} .. {b['last_date']})"
    print_grid(title, to_weeks(g0.weekday(), cells))


def gregorian_month_calendar(gy: int, gm: int, *, calendar: str = "default") -> None:
    first = date(gy, gm, 1)

    cells = []
    for day in range(1, gregorian_month_length(gy, gm) + 1):
        bs = bikram.gregorian_to_bs(date(gy, gm, day), calendar=calendar)
        cells.append(cell(f"{day:2d}", f"{bs.month:02d}-{bs.day:02d}"))

    print_grid(f"Gregorian month  {gy}-{gm:02d}", to_weeks(first.weekday(), cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a BS month calendar and/or a Gregorian month calendar with paired labels."
    )
    p.add_argument("--calendar", default="default")
    p.add_argument("--bs", nargs=2, type=int, metavar=("Y", "M"),
                   help="BS month to print: Y M (e.g. 2081 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 4)")
    p.add_argument("--devanagari", action="store_true", help="Devanagari day numbers and month names")
    args = p.parse_args(argv)

    if not args.bs and not args.greg:
        # sensible default demo
        bs_month_calendar(2081, 1, devanagari=args.devanagari, calendar=args.calendar)
        gregorian_month_calendar(2024, 4, calendar=args.calendar)
        return 0

    if args.bs:
        Y, M = args.bs
        bs_month_calendar(Y, M, devanagari=args.devanagari, calendar=args.calendar)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm, calendar=args.calendar)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
