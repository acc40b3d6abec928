"""Sri Lankan National Identity Card (NIC) numbers.

Two layouts are in circulation:

* old: ``YY DDD SSS C`` followed by ``V`` or ``X`` (10 characters)
* new: ``YYYY DDD SSSS C`` (12 digits, no letter)

``DDD`` is the day of the year of birth. For women 500 is added to it, so a raw
value above 500 means Female and the real day is ``raw - 500``.

Nothing in this module raises on bad input: callers get ``is_valid=False`` or
``None`` and decide how to show it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import calculate_age, date_from_day_of_year, is_leap_year, today_local
from ..core.constants import NIC_FEMALE_DAY_OFFSET
from ..core.enums import Gender, NICFormat

OLD_NIC_RE = re.compile(r"^(\d{2})(\d{3})(\d{3})(\d)([VX])$")
NEW_NIC_RE = re.compile(r"^(\d{4})(\d{3})(\d{4})(\d)$")


@dataclass(frozen=True)
class NICInfo:
    is_valid: bool
    format: NICFormat
    birth_year: Optional[int] = None
    day_of_year: Optional[int] = None
    gender: Optional[Gender] = None
    serial_number: Optional[str] = None
    check_digit: Optional[str] = None


INVALID_NIC = NICInfo(is_valid=False, format=NICFormat.INVALID)


def clean_nic(nic: str) -> str:
    return re.sub(r"\s", "", nic or "").upper()


def resolve_century(two_digit_year: int, *, today: Optional[date] = None) -> int:
    """Map an old-format 2-digit year to a full year.

    Heuristic: years up to the current year's last two digits belong to this
    century, the rest to the previous one. Holders born more than ~100 years ago
    are misclassified.
    """
    current_year = (today or today_local()).year
    current_century = current_year // 100 * 100
    if two_digit_year <= current_year % 100:
        return current_century + two_digit_year
    return current_century - 100 + two_digit_year


def split_gender_offset(raw_day: int) -> tuple[Gender, int]:
    if raw_day > NIC_FEMALE_DAY_OFFSET:
        return Gender.FEMALE, raw_day - NIC_FEMALE_DAY_OFFSET
    return Gender.MALE, raw_day


def is_valid_day_of_year(day: int, year: int) -> bool:
    max_days = 366 if is_leap_year(year) else 365
    return 1 <= day <= max_days


def validate_nic(nic: str, *, today: Optional[date] = None) -> NICInfo:
    cleaned = clean_nic(nic)

    m = OLD_NIC_RE.match(cleaned)
    if m:
        yy, ddd, sss, check, _letter = m.groups()
        birth_year = resolve_century(int(yy), today=today)
        gender, day = split_gender_offset(int(ddd))
        return NICInfo(
            is_valid=is_valid_day_of_year(day, birth_year),
            format=NICFormat.OLD,
            birth_year=birth_year,
            day_of_year=day,
            gender=gender,
            serial_number=sss,
            check_digit=check,
        )

    m = NEW_NIC_RE.match(cleaned)
    if m:
        yyyy, ddd, ssss, check = m.groups()
        birth_year = int(yyyy)
        gender, day = split_gender_offset(int(ddd))
        return NICInfo(
            is_valid=is_valid_day_of_year(day, birth_year),
            format=NICFormat.NEW,
            birth_year=birth_year,
            day_of_year=day,
            gender=gender,
            serial_number=ssss[:3],
            check_digit=check,
        )

    return INVALID_NIC


def convert_old_to_new(nic: str, *, today: Optional[date] = None) -> Optional[str]:
    """Re-encode an old NIC as ``YYYY DDD 0SSS C``; the gender offset is kept in ``DDD``."""
    m = OLD_NIC_RE.match(clean_nic(nic))
    if not m:
        return None

    yy, ddd, sss, check, _letter = m.groups()
    birth_year = resolve_century(int(yy), today=today)
    return f"{birth_year}{ddd}0{sss}{check}"


def format_nic_for_display(nic: str) -> str:
    cleaned = re.sub(r"\s", "", nic or "")
    if len(cleaned) == 10:
        return f"{cleaned[:2]} {cleaned[2:5]} {cleaned[5:8]} {cleaned[8:]}"
    if len(cleaned) == 12:
        return f"{cleaned[:4]} {cleaned[4:7]} {cleaned[7:11]} {cleaned[11:]}"
    return nic


def extract_birth_date(nic: str, *, today: Optional[date] = None) -> Optional[date]:
    info = validate_nic(nic, today=today)
    if not info.is_valid or not info.birth_year or not info.day_of_year:
        return None
    return date_from_day_of_year(info.birth_year, info.day_of_year)


def extract_gender(nic: str) -> Optional[Gender]:
    return validate_nic(nic).gender


def extract_age(nic: str, *, today: Optional[date] = None) -> Optional[int]:
    birth_date = extract_birth_date(nic, today=today)
    if birth_date is None:
        return None
    return calculate_age(birth_date, today=today)
