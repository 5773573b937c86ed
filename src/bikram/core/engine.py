from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Protocol, Tuple

from .types import BsDate, DayInfo, GregorianDate

if TYPE_CHECKING:
    from ..engines.table import CalendarTable


class CalendarEngine(Protocol):
    table: CalendarTable
    first_gregorian: GregorianDate
    last_gregorian: GregorianDate

    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: Any, *, debug: bool = False) -> DayInfo: ...
    def bs_to_gregorian(self, d: BsDate) -> GregorianDate: ...
    def gregorian_to_bs(self, d: Any) -> BsDate: ...
    def jdn(self, d: Any) -> int: ...

    def add_days(self, d: Any, n: int) -> Any: ...
    def add_months(self, d: Any, n: int) -> Any: ...
    def add_years(self, d: Any, n: int) -> Any: ...
    def diff_in_days(self, a: Any, b: Any) -> int: ...
    def compare(self, a: Any, b: Any) -> int: ...

    def month_bounds(self, year: int, month: int) -> Tuple[GregorianDate, GregorianDate]: ...
    def new_year_day(self, year: int) -> GregorianDate: ...


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
