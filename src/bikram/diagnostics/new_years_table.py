from __future__ import annotations

import argparse

import bikram


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of BS New Year (Baisakh 1) and the year length."
    )
    p.add_argument("--from-year", type=int, default=2070)
    p.add_argument("--to-year", type=int, default=2090)
    p.add_argument("--calendar", default="default")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in the date column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["BS", "New Year", "Weekday", "Days"]
    colw = [5, 10, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        g = bikram.new_year_day(Y, calendar=args.calendar)
        d = g.isoformat() if args.dates == "iso" else f"{g.month:02d}-{g.day:02d}"
        wd = bikram.day_info(g, calendar=args.calendar, attributes=("weekday",)).attributes["weekday_name"]
        n = bikram.days_in_year(Y, calendar=args.calendar)
        row = [str(Y), d, wd[:3], str(n)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
