# tests/test_api.py

from datetime import date

import pytest

import bikram
from bikram.core.errors import InvalidArgumentError
from bikram.core.types import BsDate, GregorianDate


@pytest.fixture
def with_synthetic(synthetic):
    bikram.register_calendar("synthetic", synthetic)
    yield "synthetic"
    # registry has no unregister; drop the entry directly
    bikram.api._reg()._calendars.pop("synthetic", None)


def test_default_registry():
    assert "default" in bikram.list_calendars()
    info = bikram.calendar_info()
    assert info["bs_range"] == (2000, 2090)
    assert info["gregorian_range"] == ("1943-04-14", "2034-04-13")
    assert info["anchor"] == {"gregorian": "1943-04-14", "bs": "2000-01-01"}


def test_unknown_calendar():
    with pytest.raises(KeyError):
        bikram.bs_to_gregorian(2081, 1, 1, calendar="nope")


def test_register_alternate_calendar(with_synthetic, synthetic):
    assert with_synthetic in bikram.list_calendars()
    assert bikram.min_supported_year(calendar=with_synthetic) == 100
    assert bikram.max_supported_year(calendar=with_synthetic) == 102
    assert bikram.bs_to_gregorian(101, 1, 1, calendar=with_synthetic) == GregorianDate(2001, 1, 1)
    with pytest.raises(KeyError):
        bikram.register_calendar(with_synthetic, synthetic)
    bikram.register_calendar(with_synthetic, synthetic, overwrite=True)


def test_conversion_argument_forms():
    assert bikram.bs_to_gregorian(BsDate(2081, 1, 1)) == GregorianDate(2024, 4, 13)
    assert bikram.gregorian_to_bs(GregorianDate(2024, 4, 13)) == BsDate(2081, 1, 1)
    assert bikram.gregorian_to_bs(date(2024, 4, 13)) == BsDate(2081, 1, 1)
    with pytest.raises(InvalidArgumentError):
        bikram.gregorian_to_bs(2024, 4)
    with pytest.raises(InvalidArgumentError):
        bikram.bs_to_gregorian("2081-01-01")


def test_month_bounds():
    b = bikram.month_bounds(2081, 2)
    assert b["days"] == 31
    assert b["first_date"] == GregorianDate(2024, 5, 14)
    assert b["last_date"] == GregorianDate(2024, 6, 13)
    assert bikram.first_day_of_month(2081, 2) == GregorianDate(2024, 5, 14)
    assert bikram.last_day_of_month(2081, 2) == GregorianDate(2024, 6, 13)


def test_new_year_day():
    assert bikram.new_year_day(2081) == GregorianDate(2024, 4, 13)
    assert bikram.new_year_day(2082) == GregorianDate(2025, 4, 14)


def test_today_is_in_range():
    t = bikram.today()
    assert isinstance(t, BsDate)
    assert bikram.is_supported_year(t.year)


def test_days_in_year():
    assert bikram.days_in_year(2081) == 366
    assert bikram.days_in_year(2082) == 365


def test_day_info_attributes():
    info = bikram.day_info(date(2024, 4, 13), attributes=("weekday", "fiscal_year", "day_of_year", "jdn"))
    a = info.attributes
    assert a["weekday"] == 5
    assert a["weekday_name"] == "Saturday"
    assert a["fiscal_year"] == "2080/81"
    assert a["day_of_year"] == 1
    assert a["days_in_year"] == 366
    assert a["jdn"] == 2460414


@pytest.mark.parametrize(
    "bs,fy",
    [((2081, 3, 32), "2080/81"), ((2081, 4, 1), "2081/82"), ((1999, 4, 1), "1999/00")],
)
def test_fiscal_year_boundaries(bs, fy):
    from bikram.attributes.standard import fiscal_year
    from bikram.core.types import DayInfo, CalendarId

    info = DayInfo(
        gregorian=GregorianDate(2000, 1, 1),
        bs=BsDate(*bs),
        calendar=CalendarId("custom", "x", "0"),
    )
    assert fiscal_year(info, None)["fiscal_year"] == fy


def test_unknown_attribute():
    with pytest.raises(KeyError):
        bikram.day_info(date(2024, 4, 13), attributes=("moon_phase",))
    assert bikram.list_attributes() == ["day_of_year", "fiscal_year", "jdn", "weekday"]


def test_registered_engine_provides_engine_protocol():
    from bikram.core.engine import CalendarEngine

    eng = bikram.get_calendar()
    members = set(CalendarEngine.__annotations__) | {
        name for name in vars(CalendarEngine) if not name.startswith("_")
    }
    assert {"table", "add_months", "diff_in_days", "month_bounds", "jdn"} <= members
    for name in members:
        assert hasattr(eng, name), name


def test_make_gregorian_date_is_shared():
    from bikram.core import types

    assert bikram.make_gregorian_date is types.make_gregorian_date
    assert bikram.make_gregorian_date(2024, 4, 13) == GregorianDate(2024, 4, 13)
