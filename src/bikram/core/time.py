from __future__ import annotations
from datetime import date
from typing import Any, Tuple

# Proleptic Gregorian month lengths, non-leap year
_GREG_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(y: int) -> bool:
    """Gregorian leap rule: divisible by 4, not by 100 unless by 400."""
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def gregorian_month_length(y: int, m: int) -> int:
    if m == 2 and is_leap_year(y):
        return 29
    return _GREG_MONTH_DAYS[m - 1]


def gregorian_year_length(y: int) -> int:
    return 366 if is_leap_year(y) else 365


def jdn_from_ymd(y: int, m: int, day: int) -> int:
    """Gregorian (y, m, d) to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of jdn_from_ymd (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: Any) -> int:
    """JDN of anything carrying Gregorian year/month/day (date, GregorianDate)."""
    return jdn_from_ymd(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*ymd_from_jdn(jdn))


def weekday_from_jdn(jdn: int) -> int:
    # 0=Mon..6=Sun, same as datetime.date.weekday()
    return jdn % 7
