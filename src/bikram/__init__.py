"""bikram public API.

Bikram Sambat <-> Gregorian conversion, date arithmetic and Devanagari
formatting. Keep this surface small: users should mostly interact with
functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    bs_to_gregorian,
    gregorian_to_bs,
    today,
    add_days,
    add_months,
    add_years,
    diff_in_days,
    compare,
    format_date,
    parse_bs_date,
    make_bs_date,
    make_gregorian_date,
    is_supported_year,
    min_supported_year,
    max_supported_year,
    month_length,
    days_in_year,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    new_year_day,
    day_info,
    list_calendars,
    calendar_info,
    get_calendar,
    make_converter,
    register_calendar,
    to_devanagari_digits,
    devanagari_to_int,
)
from .attributes.registry import list_attributes
from .core.errors import (
    BikramError,
    InvalidDateError,
    OutOfRangeError,
    InvalidArgumentError,
    CalendarDataError,
)
from .core.types import BsDate, GregorianDate, CalendarEntry, EpochAnchor, CalendarSpec, CalendarId, DayInfo

__all__ = [
    "bs_to_gregorian",
    "gregorian_to_bs",
    "today",
    "add_days",
    "add_months",
    "add_years",
    "diff_in_days",
    "compare",
    "format_date",
    "parse_bs_date",
    "make_bs_date",
    "make_gregorian_date",
    "is_supported_year",
    "min_supported_year",
    "max_supported_year",
    "month_length",
    "days_in_year",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "new_year_day",
    "day_info",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_converter",
    "register_calendar",
    "to_devanagari_digits",
    "devanagari_to_int",
    "list_attributes",
    "BikramError",
    "InvalidDateError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "CalendarDataError",
    "BsDate",
    "GregorianDate",
    "CalendarEntry",
    "EpochAnchor",
    "CalendarSpec",
    "CalendarId",
    "DayInfo",
]
