from __future__ import annotations

from datetime import date

import pytest

from heloc.core.interest import (
    InterestValidationError,
    add_months,
    cycle_end,
    format_amount,
    parse_amount,
    parse_date,
)


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2025, 3, 1), 1, date(2025, 4, 1)),
        (date(2025, 1, 31), 1, date(2025, 2, 28)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2025, 12, 15), 1, date(2026, 1, 15)),
        (date(2025, 3, 31), 13, date(2026, 4, 30)),
    ],
)
def test_add_months_clamps_to_month_end(start, months, expected):
    assert add_months(start, months) == expected


def test_cycle_end_is_one_month_less_a_day():
    assert cycle_end(date(2025, 3, 1)) == date(2025, 3, 31)
    assert cycle_end(date(2025, 1, 31)) == date(2025, 2, 27)
    assert cycle_end(date(2025, 12, 20)) == date(2026, 1, 19)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("100,000.00", 100000.0),
        ("$1,234.5", 1234.5),
        (" 42 ", 42.0),
        (7, 7.0),
        (0.5, 0.5),
        ("0", 0.0),
    ],
)
def test_parse_amount_accepts_formatted_numbers(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "-1", "1.2.3", "inf", True])
def test_parse_amount_rejects_unusable_values(raw):
    assert parse_amount(raw) is None


def test_parse_date_handles_blank_and_iso():
    assert parse_date("") is None
    assert parse_date(None) is None
    assert parse_date("2025-03-01") == date(2025, 3, 1)
    assert parse_date(date(2025, 3, 1)) == date(2025, 3, 1)


def test_parse_date_rejects_garbage():
    with pytest.raises(InterestValidationError) as excinfo:
        parse_date("03/01/2025", "start_date")

    assert excinfo.value.code == "invalid_date"
    assert excinfo.value.field == "start_date"


def test_format_amount_uses_thousands_separator():
    assert format_amount(164.3835616) == "164.38"
    assert format_amount(100000) == "100,000.00"
    assert format_amount(0) == "0.00"
