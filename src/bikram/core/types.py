from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import CalendarDataError, InvalidArgumentError, InvalidDateError
from .time import gregorian_month_length, to_jdn, weekday_from_jdn

MIN_MONTH_LENGTH = 29
MAX_MONTH_LENGTH = 32


def _require_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful date component
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {value!r}")


@dataclass(frozen=True)
class CalendarId:
    family: Literal["official", "custom"]
    name: str
    version: str


@dataclass(frozen=True)
class CalendarEntry:
    """One row of the Bikram Sambat table: the 12 month lengths of a year."""
    year: int
    month_lengths: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.month_lengths) != 12:
            raise CalendarDataError(
                f"BS {self.year}: expected 12 month lengths, got {len(self.month_lengths)}"
            )
        for m, n in enumerate(self.month_lengths, start=1):
            if not (MIN_MONTH_LENGTH <= n <= MAX_MONTH_LENGTH):
                raise CalendarDataError(f"BS {self.year}/{m}: month length {n} outside [29, 32]")
        if self.days not in (365, 366):
            raise CalendarDataError(f"BS {self.year}: {self.days} days in year (expected 365 or 366)")

    @property
    def days(self) -> int:
        return sum(self.month_lengths)


@dataclass(frozen=True, order=True)
class BsDate:
    """
    A Bikram Sambat calendar label.

    Only the shape is checked here (month 1..12, day 1..32). Whether the day
    exists in that year depends on the month-length table; use
    ``CalendarTable.make_date`` or ``bikram.make_bs_date`` to get a fully
    validated value.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            _require_int(name, getattr(self, name))
        if not (1 <= self.month <= 12):
            raise InvalidDateError(f"BS month {self.month} outside 1..12")
        if not (1 <= self.day <= MAX_MONTH_LENGTH):
            raise InvalidDateError(f"BS day {self.day} outside 1..{MAX_MONTH_LENGTH}")

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True, order=True)
class GregorianDate:
    """A proleptic Gregorian date. Validated on construction."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            _require_int(name, getattr(self, name))
        if not (1 <= self.month <= 12):
            raise InvalidDateError(f"Gregorian month {self.month} outside 1..12")
        n = gregorian_month_length(self.year, self.month)
        if not (1 <= self.day <= n):
            raise InvalidDateError(
                f"Gregorian day {self.day} outside 1..{n} for {self.year}-{self.month:02d}"
            )

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def weekday(self) -> int:
        return weekday_from_jdn(to_jdn(self))

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.isoformat()


def make_gregorian_date(year: int, month: int, day: int) -> GregorianDate:
    return GregorianDate(year, month, day)


@dataclass(frozen=True)
class EpochAnchor:
    """A known pair of labels for the same absolute day."""
    gregorian: GregorianDate
    bs: BsDate


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a converter."""
    id: CalendarId
    anchor: EpochAnchor
    table_path: Optional[str] = None  # None: packaged table (or $BIKRAM_CALENDAR_TABLE)
    meta: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class DayInfo:
    gregorian: GregorianDate
    bs: BsDate
    calendar: CalendarId
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
