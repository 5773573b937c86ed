from __future__ import annotations

import argparse
import random
from datetime import timedelta
from typing import List

import bikram
from bikram.core.types import BsDate


def parse_calendars(s: str) -> List[str]:
    # "default,custom" -> ["default", "custom"]
    return [x.strip() for x in s.split(",") if x.strip()]


def all_bs_days(calendar: str):
    """Every BS day in the calendar's table, in order."""
    table = bikram.get_calendar(calendar).table
    for entry in table:
        for month, n in enumerate(entry.month_lengths, start=1):
            for day in range(1, n + 1):
                yield BsDate(entry.year, month, day)


def exhaustive_bs_test(calendar: str, *, max_failures: int) -> int:
    """BS -> Gregorian -> BS for every day, checking that consecutive BS days map to consecutive Gregorian days."""
    failures = 0
    prev = None
    for d0 in all_bs_days(calendar):
        g = bikram.bs_to_gregorian(d0, calendar=calendar)
        back = bikram.gregorian_to_bs(g, calendar=calendar)

        ok = back == d0
        if prev is not None and bikram.diff_in_days(g, prev, calendar=calendar) != 1:
            ok = False
        prev = g

        if not ok:
            failures += 1
            print("\nFAIL (bs)")
            print("calendar:", calendar)
            print("bs:", d0)
            print("gregorian:", g)
            print("back:", back)
            print("day_info(debug=True):", bikram.day_info(d0, calendar=calendar, debug=True))
            if failures >= max_failures:
                return failures
    return failures


def random_gregorian_test(calendar: str, N: int, seed: int, *, max_failures: int) -> int:
    """Gregorian -> BS -> Gregorian on random days inside the supported range."""
    random.seed(seed)
    eng = bikram.get_calendar(calendar)
    start = eng.first_gregorian.to_date()
    span = (eng.last_gregorian.to_date() - start).days
    failures = 0

    for _ in range(N):
        d0 = start + timedelta(days=random.randint(0, span))
        bs = bikram.gregorian_to_bs(d0, calendar=calendar)
        back = bikram.bs_to_gregorian(bs, calendar=calendar)
        if back.to_date() != d0:
            failures += 1
            print("\nFAIL (gregorian)")
            print("calendar:", calendar)
            print("d0:", d0)
            print("bs:", bs)
            print("back:", back)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: BS <-> Gregorian over the whole table.")
    p.add_argument("--calendars", type=str, default="default", help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Random Gregorian trials per calendar.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += exhaustive_bs_test(cal, max_failures=args.max_failures)
        total_fail += random_gregorian_test(cal, N=args.N, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
