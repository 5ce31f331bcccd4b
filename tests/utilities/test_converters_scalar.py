from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from txn_importer.utilities.converters_scalar import (
    clean_number_like_string,
    to_date,
    to_date_with_format,
    to_decimal,
    translate_date_format,
)

# ----------------------- to_decimal -----------------------


def test_to_decimal_accepts_decimal_int_float_and_str():
    # Arrange / Act
    d_from_dec = to_decimal(Decimal("-12.34"))
    d_from_int = to_decimal(7)
    d_from_float = to_decimal(1.1)  # should preserve textual value, not binary float
    d_from_str = to_decimal(" -1,234.56 ")

    # Assert
    assert d_from_dec == Decimal("-12.34")
    assert d_from_int == Decimal("7")
    assert d_from_float == Decimal("1.1")
    assert d_from_str == Decimal("-1234.56")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" $ 2,345.00 ", Decimal("2345.00")),
        ("1.234,56", Decimal("1234.56")),
        ("EUR 1.234,00", Decimal("1234.00")),
        ("12,50 €", Decimal("12.50")),
        ("(1,234.56)", Decimal("-1234.56")),
        ("45.10-", Decimal("-45.10")),
        ("1,234", Decimal("1234")),
        ("\u22125.00", Decimal("-5.00")),
    ],
)
def test_to_decimal_strips_formatting(raw, expected):
    assert to_decimal(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "+", "-", "n/a", "Amount"])
def test_to_decimal_raises_without_digits(raw):
    with pytest.raises(ValueError):
        to_decimal(raw)


@pytest.mark.parametrize("raw", [float("nan"), Decimal("NaN"), float("inf"), True, None])
def test_to_decimal_rejects_non_finite_and_non_numeric_types(raw):
    with pytest.raises(ValueError):
        to_decimal(raw)


def test_clean_number_like_string_detects_decimal_mark():
    assert clean_number_like_string("1.234") == "1234"
    assert clean_number_like_string("1,5") == "1.5"
    assert clean_number_like_string("1\u202f234,50 EUR") == "1234.50"


# ----------------------- to_date (permissive) -----------------------


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2018-01-01", date(2018, 1, 1)),
        ("2025-08-01T13:45:00Z", date(2025, 8, 1)),
        ("2018-01-01 10:00:00", date(2018, 1, 1)),
        ("2018-01-01 10:00", date(2018, 1, 1)),
        ("08/01/2025", date(2025, 8, 1)),
        ("2025/08/01", date(2025, 8, 1)),
        ("2025.08.01", date(2025, 8, 1)),
        ("08-01-2025", date(2025, 8, 1)),
        ("20250801", date(2025, 8, 1)),
        ("31/12/2024", date(2024, 12, 31)),
        ("12/31/24", date(2024, 12, 31)),
    ],
)
def test_to_date_supported_formats(raw, expected):
    assert to_date(raw) == expected


def test_to_date_passes_date_and_datetime_through():
    assert to_date(date(2024, 2, 29)) == date(2024, 2, 29)
    assert to_date(datetime(2024, 2, 29, 10, 30)) == date(2024, 2, 29)


@pytest.mark.parametrize("raw", ["", "n/a", "Date", "123456", "13/13/2024", "2018-01-01 noon", None, 45567])
def test_to_date_rejects_unrecognized(raw):
    with pytest.raises(ValueError):
        to_date(raw)


# ----------------------- formatted dates -----------------------


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("DD/MM/YYYY", "%d/%m/%Y"),
        ("YYYY-MM-DD", "%Y-%m-%d"),
        ("D.M.YY", "%d.%m.%y"),
        ("MMM D, YYYY", "%b %d, %Y"),
        ("%d.%m.%Y", "%d.%m.%Y"),
    ],
)
def test_translate_date_format(fmt, expected):
    assert translate_date_format(fmt) == expected


def test_to_date_with_format_is_strict():
    # Arrange
    fmt = "DD.MM.YYYY"
    # Act / Assert
    assert to_date_with_format("03.04.2021", fmt) == date(2021, 4, 3)
    with pytest.raises(ValueError):
        to_date_with_format("2021-04-03", fmt)
    with pytest.raises(ValueError):
        to_date_with_format("", fmt)
