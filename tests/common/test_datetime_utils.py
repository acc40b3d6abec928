from __future__ import annotations

from datetime import date

import pytest

from src.employee_records.employee_records.common.datetime_utils import (
    add_months,
    calculate_age,
    calculate_retirement_date,
    date_from_day_of_year,
    format_date_for_display,
    format_date_for_storage,
    format_date_input,
    format_month_day_input,
    get_current_month_year,
    get_date_range_in_days,
    get_days_in_month,
    get_month_name,
    get_month_year_string,
    is_leap_year,
    is_valid_date_range,
    parse_date,
    validate_date_format,
)


@pytest.mark.parametrize("year,expected", [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)])
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_days_in_month():
    assert get_days_in_month(2, 2024) == 29
    assert get_days_in_month(2, 2023) == 28
    assert get_days_in_month(4, 2024) == 30
    assert get_days_in_month(12, 2023) == 31


def test_parse_full_dates():
    assert parse_date("15-03-2024") == date(2024, 3, 15)
    assert parse_date("15/03/2024") == date(2024, 3, 15)
    assert parse_date("5-3-2024") == date(2024, 3, 5)


@pytest.mark.parametrize("value", ["", "31-04-2024", "29-02-2023", "00-01-2024", "15-13-2024", "2024-03-15", "15-03-24"])
def test_parse_rejects_invalid_dates(value):
    assert parse_date(value) is None


def test_parse_month_day_uses_current_year():
    assert parse_date("15-03", today=date(2026, 1, 1)) == date(2026, 3, 15)
    assert parse_date("15/03", today=date(2026, 1, 1)) == date(2026, 3, 15)
    assert parse_date("29-02", today=date(2026, 1, 1)) is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", "1"),
        ("ab12", "12-"),
        ("1503", "15-03-"),
        ("15032024", "15-03-2024"),
        ("150320245", "15-03-2024"),
        ("15-03-2024", "15-03-2024"),
    ],
)
def test_format_date_input(raw, expected):
    assert format_date_input(raw) == expected


def test_format_month_day_input():
    assert format_month_day_input("1503") == "15-03"
    assert format_month_day_input("150399") == "15-03"
    assert format_month_day_input("1") == "1"


def test_validate_full_dates():
    assert validate_date_format("29-02-2024")
    assert not validate_date_format("31-02-2024")
    assert not validate_date_format("29-02-2023")
    assert not validate_date_format("15/03/2024")
    assert not validate_date_format("")


def test_validate_month_day():
    assert validate_date_format("29-02", "month-day")
    assert validate_date_format("1-1", "month-day")
    assert not validate_date_format("31-04", "month-day")
    assert not validate_date_format("15-13", "month-day")
    assert not validate_date_format("15-03-2024", "month-day")


@pytest.mark.parametrize("value", ["01-01-2024", "29-02-2024", "31-12-1999", "30-11-2023", "28-02-2100"])
def test_valid_dates_fit_in_their_month(value):
    assert validate_date_format(value)
    day, month, year = (int(p) for p in value.split("-"))
    assert get_days_in_month(month, year) >= day


def test_age_borrows_before_birthday():
    assert calculate_age(date(1985, 5, 3), today=date(2026, 5, 2)) == 40
    assert calculate_age(date(1985, 5, 3), today=date(2026, 5, 3)) == 41


def test_retirement_is_sixty_years_later():
    assert calculate_retirement_date(date(1985, 5, 3)) == date(2045, 5, 3)
    assert calculate_retirement_date(date(1964, 2, 29)) == date(2024, 2, 29)
    assert calculate_retirement_date(date(2040, 2, 29)) == date(2100, 2, 28)
    assert calculate_retirement_date(date(9995, 4, 5)) is None
    assert calculate_retirement_date(date(9939, 12, 31)) == date(9999, 12, 31)


def test_date_range_validity():
    assert is_valid_date_range("01-01-2024", "05-01-2024")
    assert is_valid_date_range("01-01-2024", "01-01-2024")
    assert not is_valid_date_range("05-01-2024", "01-01-2024")
    assert not is_valid_date_range("bad", "01-01-2024")


def test_date_range_in_days_is_inclusive():
    assert get_date_range_in_days("01-01-2024", "05-01-2024") == 5
    assert get_date_range_in_days("05-01-2024", "01-01-2024") == 5
    assert get_date_range_in_days("01-01-2024", "01-01-2024") == 1
    assert get_date_range_in_days("28-02-2024", "01-03-2024") == 3
    assert get_date_range_in_days("31-02-2024", "01-03-2024") == 0


def test_day_of_year_construction():
    assert date_from_day_of_year(2024, 1) == date(2024, 1, 1)
    assert date_from_day_of_year(2024, 60) == date(2024, 2, 29)
    assert date_from_day_of_year(2023, 365) == date(2023, 12, 31)


def test_display_and_storage_formats():
    assert format_date_for_display(date(2024, 3, 5)) == "05-03-2024"
    assert format_date_for_storage("5/3/2024") == "05-03-2024"
    assert format_date_for_storage("not a date") == "not a date"


def test_month_helpers():
    assert get_month_name(3) == "March"
    assert get_month_name(13) == ""
    assert get_month_year_string(3, 2024) == "March 2024"
    assert get_current_month_year(today=date(2026, 10, 19)) == (10, 2026)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)
    assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
