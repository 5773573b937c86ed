"""
bikram.formatting
-----------------
Devanagari numerals and pattern-based rendering of Bikram Sambat dates.

Pattern tokens (longest match first):

    YYYY  year            MMMM  month name
    MM    month, 2 digits M     month
    DD    day, 2 digits   D     day
    dddd  weekday name

Text in square brackets is copied verbatim (``"[Date:] YYYY"``); any other
character is copied as is.
"""

from __future__ import annotations

import re
from typing import Optional

from .core.errors import InvalidArgumentError
from .core.types import BsDate

DEVANAGARI_DIGITS = "०१२३४५६७८९"
ARABIC_DIGITS = "0123456789"

_TO_DEVANAGARI = str.maketrans(ARABIC_DIGITS, DEVANAGARI_DIGITS)
_TO_ARABIC = str.maketrans(DEVANAGARI_DIGITS, ARABIC_DIGITS)

MONTH_NAMES = {
    "en": (
        "Baisakh", "Jestha", "Ashadh", "Shrawan", "Bhadra", "Ashwin",
        "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
    ),
    "ne": (
        "बैशाख", "जेठ", "असार", "साउन", "भदौ", "असोज",
        "कार्तिक", "मंसिर", "पुस", "माघ", "फागुन", "चैत",
    ),
}

# Monday=0, as datetime.date.weekday()
WEEKDAY_NAMES = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "ne": ("सोमबार", "मंगलबार", "बुधबार", "बिहिबार", "शुक्रबार", "शनिबार", "आइतबार"),
}

DIGIT_STYLES = ("arabic", "devanagari")

_TOKEN_RE = re.compile(r"\[([^\]]*)\]|YYYY|MMMM|MM|M|DD|D|dddd")
_DATE_RE = re.compile(r"^\s*([0-9०-९]{1,4})[-/.]([0-9०-९]{1,2})[-/.]([0-9०-९]{1,2})\s*$")


# ============================================================
# Numerals
# ============================================================

def to_devanagari_digits(n: int) -> str:
    """Render a non-negative integer with Devanagari digits (e.g. 2081 -> '२०८१')."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"Expected a non-negative int, got {n!r}")
    if n < 0:
        raise InvalidArgumentError(f"Negative numbers have no calendar rendering: {n}")
    return str(n).translate(_TO_DEVANAGARI)


def to_arabic_digits(text: str) -> str:
    """Replace Devanagari digits with ASCII digits; other characters are kept."""
    return text.translate(_TO_ARABIC)


def devanagari_to_int(text: str) -> int:
    """Parse a string of Devanagari (or ASCII) digits."""
    s = to_arabic_digits(text.strip())
    if not s or not all(c in ARABIC_DIGITS for c in s):
        raise InvalidArgumentError(f"Not a numeral: {text!r}")
    return int(s)


# ============================================================
# Dates
# ============================================================

def _check_option(name: str, value: str, allowed) -> None:
    if value not in allowed:
        raise InvalidArgumentError(f"{name} must be one of {sorted(allowed)}, got {value!r}")


def month_name(month: int, locale: str = "en") -> str:
    _check_option("month_name_locale", locale, MONTH_NAMES)
    if not (1 <= month <= 12):
        raise InvalidArgumentError(f"Month {month} outside 1..12")
    return MONTH_NAMES[locale][month - 1]


def format_bs_date(
    d: BsDate,
    pattern: str = "YYYY-MM-DD",
    *,
    digits: str = "arabic",
    month_name_locale: str = "en",
    weekday: Optional[int] = None,
) -> str:
    """
    Substitute date tokens in ``pattern``.

    ``weekday`` (Monday=0) is only needed when the pattern uses ``dddd``;
    ``bikram.format_date`` fills it in from the converter.
    """
    _check_option("digits", digits, DIGIT_STYLES)
    _check_option("month_name_locale", month_name_locale, MONTH_NAMES)

    def num(n: int, width: int) -> str:
        s = f"{n:0{width}d}"
        return s.translate(_TO_DEVANAGARI) if digits == "devanagari" else s

    def sub(m: "re.Match[str]") -> str:
        tok = m.group(0)
        if m.group(1) is not None:
            return m.group(1)
        if tok == "YYYY":
            return num(d.year, 4)
        if tok == "MMMM":
            return MONTH_NAMES[month_name_locale][d.month - 1]
        if tok == "MM":
            return num(d.month, 2)
        if tok == "M":
            return num(d.month, 1)
        if tok == "DD":
            return num(d.day, 2)
        if tok == "D":
            return num(d.day, 1)
        # dddd
        if weekday is None:
            raise InvalidArgumentError("Pattern uses 'dddd' but no weekday was given")
        return WEEKDAY_NAMES[month_name_locale][weekday]

    return _TOKEN_RE.sub(sub, pattern)


def parse_bs_date(text: str) -> BsDate:
    """
    Parse ``YYYY-MM-DD`` (``/`` or ``.`` also accepted, Arabic or Devanagari
    digits). Only the shape is validated here; see ``bikram.parse_bs_date``
    for a table-checked result.
    """
    m = _DATE_RE.match(text)
    if not m:
        raise InvalidArgumentError(f"Cannot parse BS date from {text!r} (expected YYYY-MM-DD)")
    y, mo, d = (devanagari_to_int(g) for g in m.groups())
    return BsDate(y, mo, d)
