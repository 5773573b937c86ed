"""
bikram.engines.converter
------------------------
The Orchestrator. Binds a CalendarTable to an EpochAnchor and maps dates of
either calendar to a common day count.

Coordinates used here:
  - table offset: days since Baisakh 1 of the table's first year
  - ordinal: days since the anchor day (negative before it), same value for
    both labels of one absolute day
  - JDN: Julian Day Number, used as the absolute day for mixed comparisons

All arithmetic goes through ordinals, so it agrees with the table by
construction.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Tuple, Union

from ..core.errors import InvalidArgumentError, OutOfRangeError
from ..core.time import gregorian_month_length, jdn_from_ymd, to_jdn, ymd_from_jdn
from ..core.types import BsDate, CalendarId, DayInfo, EpochAnchor, GregorianDate
from .table import CalendarTable

AnyDate = Union[BsDate, GregorianDate, date]


def _as_gregorian(d: Union[GregorianDate, date]) -> GregorianDate:
    if isinstance(d, GregorianDate):
        return d
    return GregorianDate(d.year, d.month, d.day)


def _like(template: Union[GregorianDate, date], g: GregorianDate) -> Union[GregorianDate, date]:
    """Return ``g`` as the same Gregorian type as ``template``."""
    if isinstance(template, GregorianDate):
        return g
    return g.to_date()


def _shift_label(year: int, month: int, months: int) -> Tuple[int, int]:
    y, m0 = divmod(year * 12 + (month - 1) + months, 12)
    return y, m0 + 1


class Converter:
    """
    Translates Bikram Sambat labels to proleptic Gregorian labels and back,
    and performs calendar arithmetic on either.
    """
    def __init__(self, id: CalendarId, table: CalendarTable, anchor: EpochAnchor):
        self.id = id
        self.table = table
        self.anchor = anchor

        # Raises if the anchor's BS label is not in the table
        self._anchor_offset = table.offset_of(anchor.bs)
        self._anchor_jdn = to_jdn(anchor.gregorian)

        # JDN of Baisakh 1 of the first table year, and of the last table day
        self._first_jdn = self._anchor_jdn - self._anchor_offset
        self._last_jdn = self._first_jdn + table.total_days - 1

    # ---------------------------------------------------------
    # Range
    # ---------------------------------------------------------

    @property
    def first_gregorian(self) -> GregorianDate:
        return GregorianDate(*ymd_from_jdn(self._first_jdn))

    @property
    def last_gregorian(self) -> GregorianDate:
        return GregorianDate(*ymd_from_jdn(self._last_jdn))

    @property
    def first_bs(self) -> BsDate:
        return self.table.date_at(0)

    @property
    def last_bs(self) -> BsDate:
        return self.table.date_at(self.table.total_days - 1)

    # ---------------------------------------------------------
    # Ordinals
    # ---------------------------------------------------------

    def to_ordinal(self, d: AnyDate) -> int:
        """Days from the anchor day to ``d``, counted in ``d``'s own calendar."""
        if isinstance(d, BsDate):
            return self.table.offset_of(d) - self._anchor_offset
        if isinstance(d, (GregorianDate, date)):
            return to_jdn(d) - self._anchor_jdn
        raise InvalidArgumentError(f"Expected BsDate, GregorianDate or date, got {type(d).__name__}")

    def from_ordinal_bs(self, n: int) -> BsDate:
        return self.table.date_at(n + self._anchor_offset)

    def from_ordinal_gregorian(self, n: int) -> GregorianDate:
        return GregorianDate(*ymd_from_jdn(self._anchor_jdn + n))

    def jdn(self, d: AnyDate) -> int:
        """Absolute day number of ``d`` regardless of its calendar."""
        if isinstance(d, BsDate):
            return self._anchor_jdn + self.to_ordinal(d)
        if isinstance(d, (GregorianDate, date)):
            return to_jdn(d)
        raise InvalidArgumentError(f"Expected BsDate, GregorianDate or date, got {type(d).__name__}")

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def bs_to_gregorian(self, d: BsDate) -> GregorianDate:
        return self.from_ordinal_gregorian(self.to_ordinal(d))

    def gregorian_to_bs(self, d: Union[GregorianDate, date]) -> BsDate:
        j = to_jdn(d)
        if not (self._first_jdn <= j <= self._last_jdn):
            raise OutOfRangeError(
                f"Gregorian {_as_gregorian(d).isoformat()} outside supported range "
                f"{self.first_gregorian}..{self.last_gregorian}"
            )
        return self.from_ordinal_bs(j - self._anchor_jdn)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, d: AnyDate, n: int) -> AnyDate:
        if isinstance(d, BsDate):
            return self.from_ordinal_bs(self.to_ordinal(d) + n)
        g = self.from_ordinal_gregorian(self.to_ordinal(d) + n)
        return _like(d, g)

    def add_months(self, d: AnyDate, n: int) -> AnyDate:
        """
        Shift the month label by ``n``; if the target month is shorter, the
        day is clamped down to its last day.
        """
        if isinstance(d, BsDate):
            self.table.offset_of(d)  # validates d against the table
            y, m = _shift_label(d.year, d.month, n)
            if not self.table.is_supported(y):
                raise OutOfRangeError(
                    f"BS {y}/{m} outside supported range {self.table.min_year}..{self.table.max_year}"
                )
            return BsDate(y, m, min(d.day, self.table.month_length(y, m)))

        g = _as_gregorian(d)
        y, m = _shift_label(g.year, g.month, n)
        return _like(d, GregorianDate(y, m, min(g.day, gregorian_month_length(y, m))))

    def add_years(self, d: AnyDate, n: int) -> AnyDate:
        return self.add_months(d, 12 * n)

    def diff_in_days(self, a: AnyDate, b: AnyDate) -> int:
        """``a - b`` in days; mixed calendars are compared by absolute day."""
        if isinstance(a, BsDate) and isinstance(b, BsDate):
            return self.to_ordinal(a) - self.to_ordinal(b)
        return self.jdn(a) - self.jdn(b)

    def compare(self, a: AnyDate, b: AnyDate) -> int:
        delta = self.diff_in_days(a, b)
        return (delta > 0) - (delta < 0)

    # ---------------------------------------------------------
    # Month helpers
    # ---------------------------------------------------------

    def month_bounds(self, year: int, month: int) -> Tuple[GregorianDate, GregorianDate]:
        """Gregorian dates of the first and last day of BS ``year``/``month``."""
        first = self.bs_to_gregorian(BsDate(year, month, 1))
        last = self.bs_to_gregorian(BsDate(year, month, self.table.month_length(year, month)))
        return first, last

    def new_year_day(self, year: int) -> GregorianDate:
        return self.bs_to_gregorian(BsDate(year, 1, 1))

    # ---------------------------------------------------------
    # Info
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "table": self.table.source,
            "bs_range": (self.table.min_year, self.table.max_year),
            "gregorian_range": (self.first_gregorian.isoformat(), self.last_gregorian.isoformat()),
            "anchor": {"gregorian": self.anchor.gregorian.isoformat(), "bs": self.anchor.bs.isoformat()},
        }

    def day_info(self, d: AnyDate, *, debug: bool = False) -> DayInfo:
        if isinstance(d, BsDate):
            bs = self.table.make_date(d.year, d.month, d.day)
            g = self.bs_to_gregorian(bs)
        else:
            g = _as_gregorian(d)
            bs = self.gregorian_to_bs(g)

        dbg = None
        if debug:
            dbg = {
                "ordinal": self.to_ordinal(bs),
                "table_offset": self.table.offset_of(bs),
                "jdn": jdn_from_ymd(g.year, g.month, g.day),
                "month_length": self.table.month_length(bs.year, bs.month),
                "days_in_year": self.table.days_in_year(bs.year),
            }
        return DayInfo(gregorian=g, bs=bs, calendar=self.id, debug=dbg)
