from __future__ import annotations
from typing import Any, Dict

from ..formatting import WEEKDAY_NAMES
from .registry import register_attribute, jdn

# Nepal's fiscal year runs from Shrawan 1 to the last day of Ashadh.
FISCAL_YEAR_START_MONTH = 4

def weekday(info, calendar) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like), as datetime.date.weekday()
    wd = jdn(info) % 7
    return {"weekday": wd, "weekday_name": WEEKDAY_NAMES["en"][wd]}

def fiscal_year(info, calendar) -> Dict[str, Any]:
    y, m = info.bs.year, info.bs.month
    start = y if m >= FISCAL_YEAR_START_MONTH else y - 1
    return {
        "fiscal_year": f"{start}/{(start + 1) % 100:02d}",
        "fiscal_year_start": start,
    }

def day_of_year(info, calendar) -> Dict[str, Any]:
    table = calendar.table
    doy = table.offset_of(info.bs) - table.year_start_offset(info.bs.year) + 1
    return {"day_of_year": doy, "days_in_year": table.days_in_year(info.bs.year)}

def julian_day(info, calendar) -> Dict[str, Any]:
    return {"jdn": jdn(info)}

register_attribute("weekday", weekday)
register_attribute("fiscal_year", fiscal_year)
register_attribute("day_of_year", day_of_year)
register_attribute("jdn", julian_day)
