# tests/test_converter.py

import random
from datetime import date, timedelta

import pytest

import bikram
from bikram.core.errors import OutOfRangeError
from bikram.core.types import BsDate, GregorianDate

KNOWN_PAIRS = [
    ((2000, 1, 1), (1943, 4, 14)),
    ((2000, 9, 17), (1944, 1, 1)),
    ((2030, 6, 10), (1973, 9, 26)),
    ((2052, 5, 27), (1995, 9, 12)),
    ((2057, 1, 1), (2000, 4, 13)),
    ((2079, 3, 15), (2022, 6, 29)),
    ((2080, 1, 1), (2023, 4, 14)),
    ((2080, 12, 30), (2024, 4, 12)),
    ((2081, 1, 1), (2024, 4, 13)),
    ((2081, 2, 1), (2024, 5, 14)),
    ((2081, 2, 31), (2024, 6, 13)),
    ((2082, 1, 1), (2025, 4, 14)),
    ((2083, 1, 1), (2026, 4, 14)),
    ((2090, 12, 30), (2034, 4, 13)),
]


@pytest.mark.parametrize("bs,ad", KNOWN_PAIRS)
def test_known_pairs(bs, ad):
    assert bikram.bs_to_gregorian(*bs) == GregorianDate(*ad)
    assert bikram.gregorian_to_bs(*ad) == BsDate(*bs)
    assert bikram.gregorian_to_bs(date(*ad)) == BsDate(*bs)


def test_every_bs_day_round_trips():
    cal = bikram.get_calendar()
    prev = None
    count = 0
    for entry in cal.table:
        for month, n in enumerate(entry.month_lengths, start=1):
            for day in range(1, n + 1):
                d = BsDate(entry.year, month, day)
                g = cal.bs_to_gregorian(d)
                assert cal.gregorian_to_bs(g) == d
                if prev is not None:
                    # consecutive BS days are consecutive Gregorian days
                    assert cal.to_ordinal(g) == cal.to_ordinal(prev) + 1
                prev = g
                count += 1
    assert count == cal.table.total_days


def test_random_gregorian_days_round_trip():
    random.seed(42)
    cal = bikram.get_calendar()
    start = cal.first_gregorian.to_date()
    span = (cal.last_gregorian.to_date() - start).days
    for _ in range(5000):
        d = start + timedelta(days=random.randint(0, span))
        assert cal.bs_to_gregorian(cal.gregorian_to_bs(d)).to_date() == d


def test_supported_range():
    cal = bikram.get_calendar()
    assert cal.first_gregorian == GregorianDate(1943, 4, 14)
    assert cal.last_gregorian == GregorianDate(2034, 4, 13)
    assert cal.first_bs == BsDate(2000, 1, 1)
    assert cal.last_bs == BsDate(2090, 12, 30)


def test_boundary_years_convert():
    lo, hi = bikram.min_supported_year(), bikram.max_supported_year()
    assert (lo, hi) == (2000, 2090)
    assert bikram.bs_to_gregorian(lo, 1, 1) == GregorianDate(1943, 4, 14)
    assert bikram.bs_to_gregorian(hi, 12, 30) == GregorianDate(2034, 4, 13)
    assert bikram.is_supported_year(lo) and bikram.is_supported_year(hi)


@pytest.mark.parametrize("bs", [(1999, 12, 30), (1999, 1, 1), (2091, 1, 1)])
def test_year_beyond_boundary_fails(bs):
    assert not bikram.is_supported_year(bs[0])
    with pytest.raises(OutOfRangeError):
        bikram.bs_to_gregorian(*bs)


@pytest.mark.parametrize("ad", [(1943, 4, 13), (1900, 1, 1), (2034, 4, 14), (2100, 1, 1)])
def test_gregorian_outside_table_fails(ad):
    with pytest.raises(OutOfRangeError):
        bikram.gregorian_to_bs(*ad)


def test_ordinals_share_anchor():
    cal = bikram.get_calendar()
    assert cal.to_ordinal(BsDate(2000, 1, 1)) == 0
    assert cal.to_ordinal(GregorianDate(1943, 4, 14)) == 0
    assert cal.to_ordinal(BsDate(2081, 1, 1)) == 29585
    assert cal.to_ordinal(date(2024, 4, 13)) == 29585
    assert cal.from_ordinal_bs(29585) == BsDate(2081, 1, 1)
    assert cal.from_ordinal_gregorian(29585) == GregorianDate(2024, 4, 13)


def test_synthetic_negative_ordinals(synthetic):
    # Anchor is BS 101-01-01 = 2001-01-01
    assert synthetic.to_ordinal(BsDate(101, 1, 1)) == 0
    assert synthetic.to_ordinal(BsDate(100, 12, 30)) == -1
    assert synthetic.to_ordinal(BsDate(100, 1, 1)) == -365
    assert synthetic.bs_to_gregorian(BsDate(100, 12, 30)) == GregorianDate(2000, 12, 31)
    assert synthetic.gregorian_to_bs(GregorianDate(2000, 1, 2)) == BsDate(100, 1, 1)
    assert synthetic.first_gregorian == GregorianDate(2000, 1, 2)

    for n in range(-365, 366 + 365):
        bs = synthetic.from_ordinal_bs(n)
        g = synthetic.from_ordinal_gregorian(n)
        assert synthetic.bs_to_gregorian(bs) == g
        assert synthetic.gregorian_to_bs(g) == bs

    with pytest.raises(OutOfRangeError):
        synthetic.gregorian_to_bs(GregorianDate(2000, 1, 1))
    with pytest.raises(OutOfRangeError):
        synthetic.bs_to_gregorian(BsDate(103, 1, 1))


def test_bad_anchor_rejected(synthetic_table):
    from bikram.core.types import CalendarId, CalendarSpec, EpochAnchor
    from bikram.engines.factory import make_converter

    spec = CalendarSpec(
        id=CalendarId("custom", "bad", "0"),
        anchor=EpochAnchor(gregorian=GregorianDate(2001, 1, 1), bs=BsDate(200, 1, 1)),
    )
    with pytest.raises(OutOfRangeError):
        make_converter(spec, table=synthetic_table)


def test_day_info_debug():
    info = bikram.day_info(date(2024, 4, 13), debug=True)
    assert info.bs == BsDate(2081, 1, 1)
    assert info.gregorian == GregorianDate(2024, 4, 13)
    assert info.calendar.name == "default"
    assert info.debug["ordinal"] == 29585
    assert info.debug["days_in_year"] == 366

    info2 = bikram.day_info(BsDate(2081, 1, 1))
    assert info2.gregorian == GregorianDate(2024, 4, 13)
    assert info2.debug is None
