"""
bikram.engines.table
--------------------
Bikram Sambat month-length table.

BS month lengths follow the sidereal solar transits and have no closed-form
rule, so they are tabulated. The table is a dense, contiguous run of years
stored as a tuple indexed by ``year - min_year``, together with the cumulative
day offset of each year start (offset 0 = Baisakh 1 of ``min_year``).

Data source
-----------
The packaged CSV ``bikram/data/bs_calendar.csv`` has the columns

    year, m01, m02, ..., m12

Extending coverage means appending rows to that file. A different file can be
selected with the ``BIKRAM_CALENDAR_TABLE`` environment variable.
"""

from __future__ import annotations

import csv
import importlib
import importlib.resources
import logging
import os
from bisect import bisect_right
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..core.errors import CalendarDataError, InvalidDateError, OutOfRangeError
from ..core.types import BsDate, CalendarEntry

log = logging.getLogger(__name__)

TABLE_ENV_VAR = "BIKRAM_CALENDAR_TABLE"
PACKAGED_TABLE = "bs_calendar.csv"
MONTH_COLUMNS = tuple(f"m{m:02d}" for m in range(1, 13))


class CalendarTable:
    """Read-only arena of ``CalendarEntry`` rows for a contiguous BS year range."""

    def __init__(self, entries: Sequence[CalendarEntry], *, source: str = "<memory>"):
        if not entries:
            raise CalendarDataError("Calendar table is empty")
        for prev, cur in zip(entries, entries[1:]):
            if cur.year != prev.year + 1:
                raise CalendarDataError(
                    f"Calendar table years must be contiguous: {prev.year} followed by {cur.year}"
                )

        self._entries: Tuple[CalendarEntry, ...] = tuple(entries)
        self.source = source
        self.min_year = self._entries[0].year
        self.max_year = self._entries[-1].year

        starts = []
        acc = 0
        for e in self._entries:
            starts.append(acc)
            acc += e.days
        self._year_starts: Tuple[int, ...] = tuple(starts)
        self.total_days = acc

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CalendarEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CalendarTable({self.min_year}..{self.max_year}, source={self.source!r})"

    @property
    def bounds(self) -> Tuple[int, int]:
        return (self.min_year, self.max_year)

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def is_supported(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year

    def entry(self, year: int) -> CalendarEntry:
        if not self.is_supported(year):
            raise OutOfRangeError(
                f"BS year {year} outside supported range {self.min_year}..{self.max_year}"
            )
        return self._entries[year - self.min_year]

    def month_length(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise OutOfRangeError(f"BS month {month} outside 1..12")
        return self.entry(year).month_lengths[month - 1]

    def days_in_year(self, year: int) -> int:
        return self.entry(year).days

    def year_start_offset(self, year: int) -> int:
        """Days from Baisakh 1 of ``min_year`` to Baisakh 1 of ``year``."""
        self.entry(year)
        return self._year_starts[year - self.min_year]

    def make_date(self, year: int, month: int, day: int) -> BsDate:
        """Validating factory for ``BsDate``."""
        d = BsDate(year, month, day)
        n = self.month_length(year, month)
        if day > n:
            raise InvalidDateError(f"BS {year}/{month} has {n} days, got day {day}")
        return d

    # ---------------------------------------------------------
    # Day offsets (0 = first day of the table)
    # ---------------------------------------------------------

    def offset_of(self, d: BsDate) -> int:
        lengths = self.entry(d.year).month_lengths
        if d.day > lengths[d.month - 1]:
            raise InvalidDateError(
                f"BS {d.year}/{d.month} has {lengths[d.month - 1]} days, got day {d.day}"
            )
        return self._year_starts[d.year - self.min_year] + sum(lengths[: d.month - 1]) + d.day - 1

    def date_at(self, offset: int) -> BsDate:
        if not (0 <= offset < self.total_days):
            raise OutOfRangeError(
                f"Day offset {offset} outside table ({self.min_year}..{self.max_year})"
            )
        i = bisect_right(self._year_starts, offset) - 1
        entry = self._entries[i]
        rem = offset - self._year_starts[i]
        for month, n in enumerate(entry.month_lengths, start=1):
            if rem < n:
                return BsDate(entry.year, month, rem + 1)
            rem -= n
        raise AssertionError("unreachable: year offsets and month lengths disagree")


# ---------------------------------------------------------
# Loading
# ---------------------------------------------------------

def table_from_rows(rows: Iterable[Tuple[int, Sequence[int]]], *, source: str = "<memory>") -> CalendarTable:
    """Build a table from ``(year, month_lengths)`` pairs, sorted by year."""
    entries = [CalendarEntry(int(y), tuple(int(n) for n in lengths)) for y, lengths in rows]
    entries.sort(key=lambda e: e.year)
    return CalendarTable(entries, source=source)


def _read_csv_rows(reader: csv.DictReader) -> list[Tuple[int, Tuple[int, ...]]]:
    missing = [c for c in ("year",) + MONTH_COLUMNS if c not in (reader.fieldnames or ())]
    if missing:
        raise CalendarDataError(f"Calendar CSV missing columns: {missing}")
    rows = []
    for r in reader:
        try:
            rows.append((int(r["year"]), tuple(int(r[c]) for c in MONTH_COLUMNS)))
        except (TypeError, ValueError) as e:
            raise CalendarDataError(f"Bad calendar CSV row {r!r}") from e
    return rows


def read_table_csv(path: Path) -> CalendarTable:
    with path.open("r", encoding="utf-8", newline="") as f:
        rows = _read_csv_rows(csv.DictReader(f))
    return table_from_rows(rows, source=str(path))


def _read_packaged() -> CalendarTable:
    pkg = importlib.import_module("bikram.data")
    res = importlib.resources.files(pkg).joinpath(PACKAGED_TABLE)
    with res.open("r", encoding="utf-8", newline="") as f:
        rows = _read_csv_rows(csv.DictReader(f))
    return table_from_rows(rows, source=f"bikram.data/{PACKAGED_TABLE}")


@lru_cache(maxsize=None)
def load_table(path: Optional[str] = None) -> CalendarTable:
    """
    Load the month-length table.

    Search order:
      1) explicit ``path`` argument
      2) BIKRAM_CALENDAR_TABLE environment variable (path to CSV)
      3) packaged data (bikram.data/bs_calendar.csv)
    """
    if path is None:
        path = os.environ.get(TABLE_ENV_VAR, "").strip() or None
        if path is not None:
            log.debug("Using calendar table from $%s", TABLE_ENV_VAR)

    if path is not None:
        p = Path(path).expanduser()
        if not p.is_file():
            raise CalendarDataError(f"Calendar table not found: {p}")
        table = read_table_csv(p)
    else:
        table = _read_packaged()

    log.debug("Loaded %r (%d years, %d days)", table, len(table), table.total_days)
    return table
