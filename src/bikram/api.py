from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .attributes.registry import compute_attributes
from .core.engine import CalendarEngine, CalendarRegistry
from .core.errors import InvalidArgumentError
from .core.types import BsDate, CalendarSpec, DayInfo, GregorianDate, make_gregorian_date
from .engines.converter import AnyDate, Converter
from .engines.factory import make_converter as _make_converter
from .engines.table import CalendarTable
from . import formatting as _fmt

DEFAULT_CALENDAR = "default"
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _cal(name: str) -> CalendarEngine:
    return _reg().get(name)

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _cal(calendar).info()

def get_calendar(calendar: str = DEFAULT_CALENDAR) -> CalendarEngine:
    return _cal(calendar)

def make_converter(spec: CalendarSpec, *, table: Optional[CalendarTable] = None) -> Converter:
    return _make_converter(spec, table=table)

def register_calendar(name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Supported range
# ============================================================

def is_supported_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> bool:
    return _cal(calendar).table.is_supported(year)

def min_supported_year(*, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).table.min_year

def max_supported_year(*, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).table.max_year

def month_length(year: int, month: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).table.month_length(year, month)

def days_in_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).table.days_in_year(year)

# ============================================================
# Date values
# ============================================================

def make_bs_date(
    year: int,
    month: int,
    day: int,
    *,
    table: Optional[CalendarTable] = None,
    calendar: str = DEFAULT_CALENDAR,
) -> BsDate:
    """Validating factory: the day must exist in ``table`` (default: the calendar's table)."""
    if table is None:
        table = _cal(calendar).table
    return table.make_date(year, month, day)

def parse_bs_date(text: str, *, calendar: str = DEFAULT_CALENDAR) -> BsDate:
    d = _fmt.parse_bs_date(text)
    return make_bs_date(d.year, d.month, d.day, calendar=calendar)

# ============================================================
# Conversion
# ============================================================

def _greg_args(args: Tuple[Any, ...]) -> GregorianDate:
    if len(args) == 1 and isinstance(args[0], (GregorianDate, date)):
        d = args[0]
        return d if isinstance(d, GregorianDate) else GregorianDate.from_date(d)
    if len(args) == 3:
        return GregorianDate(*args)
    raise InvalidArgumentError("Expected (year, month, day) or a single date")

def _bs_args(args: Tuple[Any, ...]) -> BsDate:
    if len(args) == 1 and isinstance(args[0], BsDate):
        return args[0]
    if len(args) == 3:
        return BsDate(*args)
    raise InvalidArgumentError("Expected (year, month, day) or a single BsDate")

def bs_to_gregorian(*args: Any, calendar: str = DEFAULT_CALENDAR) -> GregorianDate:
    """``bs_to_gregorian(2081, 1, 1)`` or ``bs_to_gregorian(BsDate(...))``."""
    return _cal(calendar).bs_to_gregorian(_bs_args(args))

def gregorian_to_bs(*args: Any, calendar: str = DEFAULT_CALENDAR) -> BsDate:
    """``gregorian_to_bs(2024, 4, 13)`` or ``gregorian_to_bs(date(2024, 4, 13))``."""
    return _cal(calendar).gregorian_to_bs(_greg_args(args))

def today(*, calendar: str = DEFAULT_CALENDAR) -> BsDate:
    return _cal(calendar).gregorian_to_bs(date.today())

# ============================================================
# Arithmetic
# ============================================================

def add_days(d: AnyDate, n: int, *, calendar: str = DEFAULT_CALENDAR) -> AnyDate:
    return _cal(calendar).add_days(d, n)

def add_months(d: AnyDate, n: int, *, calendar: str = DEFAULT_CALENDAR) -> AnyDate:
    return _cal(calendar).add_months(d, n)

def add_years(d: AnyDate, n: int, *, calendar: str = DEFAULT_CALENDAR) -> AnyDate:
    return _cal(calendar).add_years(d, n)

def diff_in_days(a: AnyDate, b: AnyDate, *, calendar: str = DEFAULT_CALENDAR) -> int:
    """Signed day count ``a - b``."""
    return _cal(calendar).diff_in_days(a, b)

def compare(a: AnyDate, b: AnyDate, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).compare(a, b)

# ============================================================
# Month-level API
# ============================================================

def month_bounds(year: int, month: int, *, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    eng = _cal(calendar)
    first, last = eng.month_bounds(year, month)
    return {
        "year": year,
        "month": month,
        "days": eng.table.month_length(year, month),
        "first_date": first,
        "last_date": last,
    }

def first_day_of_month(year: int, month: int, *, calendar: str = DEFAULT_CALENDAR) -> GregorianDate:
    return _cal(calendar).month_bounds(year, month)[0]

def last_day_of_month(year: int, month: int, *, calendar: str = DEFAULT_CALENDAR) -> GregorianDate:
    return _cal(calendar).month_bounds(year, month)[1]

def new_year_day(year: int, *, calendar: str = DEFAULT_CALENDAR) -> GregorianDate:
    return _cal(calendar).new_year_day(year)

# ============================================================
# Day info & formatting
# ============================================================

def day_info(
    d: AnyDate,
    *,
    calendar: str = DEFAULT_CALENDAR,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    eng = _cal(calendar)
    info = eng.day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes, eng)
        info = replace(info, attributes=attrs)
    return info

def format_date(
    d: Union[BsDate, GregorianDate, date],
    pattern: str = "YYYY-MM-DD",
    *,
    digits: str = "arabic",
    month_name_locale: str = "en",
    calendar: str = DEFAULT_CALENDAR,
) -> str:
    """
    Render a BS date. Gregorian inputs are converted first, so
    ``format_date(date(2024, 4, 13), "D MMMM YYYY")`` gives ``"1 Baisakh 2081"``.
    """
    eng = _cal(calendar)
    if isinstance(d, BsDate):
        bs = eng.table.make_date(d.year, d.month, d.day)
    elif isinstance(d, (GregorianDate, date)):
        bs = eng.gregorian_to_bs(d)
    else:
        raise InvalidArgumentError(f"Cannot format {type(d).__name__}")

    weekday = None
    if "dddd" in pattern:
        weekday = eng.jdn(bs) % 7
    return _fmt.format_bs_date(
        bs, pattern, digits=digits, month_name_locale=month_name_locale, weekday=weekday
    )

format = format_date

to_devanagari_digits = _fmt.to_devanagari_digits
devanagari_to_int = _fmt.devanagari_to_int
