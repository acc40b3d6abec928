"""Date helpers for the dd-MM-yyyy / dd-MM notation used across the forms.

Every function here treats malformed input as a normal outcome and returns
``None``/``False``/``0`` instead of raising.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.constants import DISPLAY_DATE_FORMAT, RETIREMENT_AGE

_FULL_DATE_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")
_MONTH_DAY_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})$")
_STRICT_FULL_RE = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")
_STRICT_MONTH_DAY_RE = re.compile(r"^(\d{1,2})-(\d{1,2})$")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def get_days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _DAYS_IN_MONTH[month - 1]


def _build_date(year: int, month: int, day: int) -> Optional[date]:
    if year < 1 or not 1 <= month <= 12:
        return None
    if not 1 <= day <= get_days_in_month(month, year):
        return None
    return date(year, month, day)


def parse_date(value: str, *, today: Optional[date] = None) -> Optional[date]:
    """Parse ``dd-MM-yyyy``/``dd/MM/yyyy`` or ``dd-MM``/``dd/MM`` (current year)."""
    if not value:
        return None

    m = _FULL_DATE_RE.match(value)
    if m:
        day, month, year = (int(g) for g in m.groups())
        return _build_date(year, month, day)

    m = _MONTH_DAY_RE.match(value)
    if m:
        day, month = (int(g) for g in m.groups())
        year = (today or today_local()).year
        return _build_date(year, month, day)

    return None


def format_date_for_display(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_date_for_storage(value: str) -> str:
    """Normalise ``dd/MM/yyyy`` to ``dd-MM-yyyy``; unparseable input is returned as-is."""
    parsed = parse_date(value.replace("/", "-"))
    return format_date_for_display(parsed) if parsed else value


def format_date_input(value: str) -> str:
    """Live-format typed digits into ``dd-MM-yyyy``."""
    cleaned = re.sub(r"[^\d-]", "", value)

    if len(cleaned) >= 2 and "-" not in cleaned:
        cleaned = cleaned[:2] + "-" + cleaned[2:]

    if len(cleaned) >= 5 and len(cleaned.split("-")) == 2:
        head, tail = cleaned.split("-")
        if len(tail) >= 2:
            cleaned = head + "-" + tail[:2] + "-" + tail[2:]

    return cleaned[:10]


def format_month_day_input(value: str) -> str:
    """Live-format typed digits into ``dd-MM`` (increment dates)."""
    cleaned = re.sub(r"[^\d-]", "", value)

    if len(cleaned) >= 2 and "-" not in cleaned:
        cleaned = cleaned[:2] + "-" + cleaned[2:]

    return cleaned[:5]


def validate_date_format(value: str, mode: str = "full") -> bool:
    if not value:
        return False

    if mode == "full":
        m = _STRICT_FULL_RE.match(value)
        if not m:
            return False
        day, month, year = (int(g) for g in m.groups())
        parsed = _build_date(year, month, day)
        return parsed is not None and (parsed.day, parsed.month, parsed.year) == (day, month, year)

    if mode == "month-day":
        m = _STRICT_MONTH_DAY_RE.match(value)
        if not m:
            return False
        day, month = (int(g) for g in m.groups())
        # 2000 is a leap year, so 29-02 is accepted as a recurring date.
        return 1 <= month <= 12 and 1 <= day <= get_days_in_month(month, 2000)

    return False


def date_from_day_of_year(year: int, day_of_year: int) -> date:
    return date(year, 1, 1) + timedelta(days=day_of_year - 1)


def add_years(value: date, years: int) -> date:
    """Shift by whole years; 29 Feb lands on 28 Feb in non-leap targets."""
    target = value.year + years
    return value.replace(year=target, day=min(value.day, get_days_in_month(value.month, target)))


def add_months(value: date, months: int) -> date:
    index = value.month - 1 + months
    year, month = value.year + index // 12, index % 12 + 1
    return value.replace(year=year, month=month, day=min(value.day, get_days_in_month(month, year)))


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    today = today or today_local()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def calculate_retirement_date(birth_date: date) -> Optional[date]:
    """None when the retirement year is past the last representable year."""
    if birth_date.year + RETIREMENT_AGE > date.max.year:
        return None
    return add_years(birth_date, RETIREMENT_AGE)


def is_valid_date_range(start: str, end: str) -> bool:
    start_date = parse_date(start)
    end_date = parse_date(end)
    if not start_date or not end_date:
        return False
    return start_date <= end_date


def get_date_range_in_days(start: str, end: str) -> int:
    """Inclusive number of calendar days between two dates (order-insensitive)."""
    start_date = parse_date(start)
    end_date = parse_date(end)
    if not start_date or not end_date:
        return 0
    return abs((end_date - start_date).days) + 1


def get_month_name(month: int) -> str:
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return ""


def get_month_year_string(month: int, year: int) -> str:
    return f"{get_month_name(month)} {year}"


def get_current_month_year(today: Optional[date] = None) -> tuple[int, int]:
    today = today or today_local()
    return today.month, today.year
