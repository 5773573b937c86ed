# tests/conftest.py

import pytest

from bikram.core.types import BsDate, CalendarId, CalendarSpec, EpochAnchor, GregorianDate
from bikram.engines.factory import make_converter
from bikram.engines.table import table_from_rows

# Three synthetic years: 365, 366, 365 days
SYNTHETIC_ROWS = [
    (100, (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30)),
    (101, (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31)),
    (102, (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31)),
]

# Anchor in the middle year so dates before it have negative ordinals
SYNTHETIC_SPEC = CalendarSpec(
    id=CalendarId("custom", "synthetic", "0"),
    anchor=EpochAnchor(gregorian=GregorianDate(2001, 1, 1), bs=BsDate(101, 1, 1)),
)


@pytest.fixture
def synthetic_table():
    return table_from_rows(SYNTHETIC_ROWS, source="synthetic")


@pytest.fixture
def synthetic(synthetic_table):
    return make_converter(SYNTHETIC_SPEC, table=synthetic_table)
