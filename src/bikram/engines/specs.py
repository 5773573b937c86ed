"""
bikram.engines.specs
--------------------
Named converter specifications. Pure data; see ``factory.make_converter``.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import BsDate, CalendarId, CalendarSpec, EpochAnchor, GregorianDate

# ============================================================
# EPOCH
# ============================================================

# Baisakh 1, 2000 BS (first day of the packaged table) fell on 1943-04-14.
EPOCH_ANCHOR = EpochAnchor(
    gregorian=GregorianDate(1943, 4, 14),
    bs=BsDate(2000, 1, 1),
)

# ============================================================
# SPECIFICATIONS
# ============================================================

DEFAULT_SPEC = CalendarSpec(
    id=CalendarId("official", "default", "2090.1"),
    anchor=EPOCH_ANCHOR,
    table_path=None,
    meta={"description": "Official Nepali calendar, BS 2000..2090"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "default": DEFAULT_SPEC,
}
