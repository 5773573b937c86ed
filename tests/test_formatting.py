# tests/test_formatting.py

from datetime import date

import pytest

import bikram
from bikram import formatting as fmt
from bikram.core.errors import InvalidArgumentError, InvalidDateError
from bikram.core.types import BsDate


@pytest.mark.parametrize(
    "n,expected",
    [(0, "०"), (7, "७"), (10, "१०"), (2081, "२०८१"), (1234567890, "१२३४५६७८९०")],
)
def test_to_devanagari_digits(n, expected):
    assert fmt.to_devanagari_digits(n) == expected
    assert bikram.devanagari_to_int(expected) == n


@pytest.mark.parametrize("bad", [-1, -2081, 1.5, "12", True, None])
def test_to_devanagari_digits_rejects(bad):
    with pytest.raises(InvalidArgumentError):
        fmt.to_devanagari_digits(bad)


def test_devanagari_to_int():
    assert fmt.devanagari_to_int(" २०८१ ") == 2081
    assert fmt.devanagari_to_int("2081") == 2081
    assert fmt.to_arabic_digits("२०८१-०१-०१") == "2081-01-01"
    for bad in ("", "१२a", "-१"):
        with pytest.raises(InvalidArgumentError):
            fmt.devanagari_to_int(bad)


def test_format_devanagari_iso():
    assert bikram.format_date(BsDate(2081, 1, 1), "YYYY-MM-DD", digits="devanagari") == "२०८१-०१-०१"
    assert bikram.format_date(BsDate(2081, 1, 1), "YYYY-MM-DD") == "2081-01-01"


def test_format_tokens():
    d = BsDate(2081, 2, 5)
    assert fmt.format_bs_date(d, "D/M/YYYY") == "5/2/2081"
    assert fmt.format_bs_date(d, "DD.MM.YYYY") == "05.02.2081"
    assert fmt.format_bs_date(d, "D MMMM YYYY") == "5 Jestha 2081"
    assert fmt.format_bs_date(d, "D MMMM YYYY", month_name_locale="ne") == "5 जेठ 2081"
    assert (
        fmt.format_bs_date(d, "D MMMM YYYY", digits="devanagari", month_name_locale="ne")
        == "५ जेठ २०८१"
    )


def test_format_literal_brackets():
    d = BsDate(2081, 1, 1)
    assert fmt.format_bs_date(d, "[Miti:] YYYY") == "Miti: 2081"
    assert fmt.format_bs_date(d, "[YYYY]=YYYY") == "YYYY=2081"


def test_format_weekday():
    # Baisakh 1, 2081 = 2024-04-13, a Saturday
    assert bikram.format_date(BsDate(2081, 1, 1), "dddd, D MMMM YYYY") == "Saturday, 1 Baisakh 2081"
    assert bikram.format_date(BsDate(2081, 1, 1), "dddd", month_name_locale="ne") == "शनिबार"
    with pytest.raises(InvalidArgumentError):
        fmt.format_bs_date(BsDate(2081, 1, 1), "dddd")


def test_format_gregorian_input_is_converted():
    assert bikram.format_date(date(2024, 4, 13), "D MMMM YYYY") == "1 Baisakh 2081"


def test_format_validates_date_and_options():
    with pytest.raises(InvalidDateError):
        bikram.format_date(BsDate(2081, 2, 32), "YYYY")
    with pytest.raises(InvalidArgumentError):
        bikram.format_date(BsDate(2081, 1, 1), "YYYY", digits="roman")
    with pytest.raises(InvalidArgumentError):
        bikram.format_date(BsDate(2081, 1, 1), "MMMM", month_name_locale="fr")
    with pytest.raises(InvalidArgumentError):
        bikram.format_date("2081-01-01", "YYYY")


def test_month_name():
    assert fmt.month_name(1) == "Baisakh"
    assert fmt.month_name(12, "ne") == "चैत"
    with pytest.raises(InvalidArgumentError):
        fmt.month_name(13)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2081-01-01", BsDate(2081, 1, 1)),
        ("२०८१-०२-३१", BsDate(2081, 2, 31)),
        ("2081/2/5", BsDate(2081, 2, 5)),
        (" 2081.12.30 ", BsDate(2081, 12, 30)),
    ],
)
def test_parse_bs_date(text, expected):
    assert bikram.parse_bs_date(text) == expected


@pytest.mark.parametrize("text", ["2081", "2081-1", "abcd-01-01", "2081-01-01-01"])
def test_parse_bs_date_malformed(text):
    with pytest.raises(InvalidArgumentError):
        bikram.parse_bs_date(text)


def test_parse_bs_date_checks_table():
    with pytest.raises(InvalidDateError):
        bikram.parse_bs_date("२०८१-०२-३२")
