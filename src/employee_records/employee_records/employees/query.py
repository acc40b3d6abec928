"""Search, filter, sort and paginate employee lists.

Pure functions over sequences of ``Employee``; list views call ``query_employees``
on every filter, sort or page change.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from functools import cmp_to_key
from typing import Any, Optional, Sequence, Union

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import SortDirection
from .model import Employee, EmployeeFilter

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}([T ].*)?$")

SEARCH_FIELDS = ("full_name", "employee_number", "nic_number", "designation", "ministry")


@dataclass(frozen=True)
class Page:
    items: list[Employee]
    total: int
    page: int
    page_size: int
    total_pages: int


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _contains(haystack: Any, needle: str) -> bool:
    return needle.lower() in _text(haystack).lower()


def _passes_age(age: Any, min_age: int, max_age: int) -> bool:
    # Employees without a usable age are not filtered out.
    if not isinstance(age, (int, float)) or isinstance(age, bool) or math.isnan(age):
        return True
    return min_age <= age <= max_age


def filter_employees(
    employees: Sequence[Employee],
    filters: Optional[EmployeeFilter] = None,
    search_term: str = "",
) -> list[Employee]:
    result = list(employees)

    term = (search_term or "").strip()
    if term:
        result = [e for e in result if any(_contains(getattr(e, f, None), term) for f in SEARCH_FIELDS)]

    if filters is None:
        return result

    if filters.employee_number:
        result = [e for e in result if _contains(e.employee_number, filters.employee_number)]
    if filters.full_name:
        result = [e for e in result if _contains(e.full_name, filters.full_name)]
    if filters.designation:
        result = [e for e in result if e.designation == filters.designation]
    if filters.ministry:
        result = [e for e in result if _contains(e.ministry, filters.ministry)]
    if filters.nic_number:
        result = [e for e in result if _contains(e.nic_number, filters.nic_number)]
    if filters.gender:
        result = [e for e in result if e.gender == filters.gender]
    if filters.salary_code:
        result = [e for e in result if e.salary_code == filters.salary_code]
    if filters.age_range:
        lo, hi = filters.age_range.min, filters.age_range.max
        result = [e for e in result if _passes_age(e.age, lo, hi)]

    return result


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and _ISO_DATE_RE.match(value):
        try:
            return datetime.fromisoformat(value).replace(tzinfo=None)
        except ValueError:
            return None
    return None


def _sign(diff: float) -> int:
    return (diff > 0) - (diff < 0)


def compare_values(a: Any, b: Any) -> int:
    """Ascending comparison of two non-null values: numbers, then dates, then text."""
    a_num, b_num = _as_number(a), _as_number(b)
    if a_num is not None and b_num is not None:
        return _sign(a_num - b_num)

    a_dt, b_dt = _as_datetime(a), _as_datetime(b)
    if a_dt is not None and b_dt is not None:
        return _sign((a_dt - b_dt).total_seconds())

    a_str, b_str = _text(a).lower(), _text(b).lower()
    if a_str < b_str:
        return -1
    if a_str > b_str:
        return 1
    return 0


def sort_employees(
    employees: Sequence[Employee],
    field: str = "full_name",
    direction: Union[SortDirection, str] = SortDirection.ASC,
) -> list[Employee]:
    """Stable sort; missing values go last ascending and first descending."""
    ascending = SortDirection(direction) == SortDirection.ASC
    factor = 1 if ascending else -1

    def cmp(x: Employee, y: Employee) -> int:
        a, b = getattr(x, field, None), getattr(y, field, None)
        if a is None and b is None:
            return 0
        if a is None:
            return factor
        if b is None:
            return -factor
        return factor * compare_values(a, b)

    return sorted(employees, key=cmp_to_key(cmp))


def paginate(employees: Sequence[Employee], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    page = max(1, int(page))
    page_size = max(1, int(page_size))
    start = (page - 1) * page_size

    return Page(
        items=list(employees[start : start + page_size]),
        total=len(employees),
        page=page,
        page_size=page_size,
        total_pages=max(1, math.ceil(len(employees) / page_size)),
    )


def query_employees(
    employees: Sequence[Employee],
    *,
    filters: Optional[EmployeeFilter] = None,
    search_term: str = "",
    sort_by: str = "full_name",
    direction: Union[SortDirection, str] = SortDirection.ASC,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    filtered = filter_employees(employees, filters, search_term)
    return paginate(sort_employees(filtered, sort_by, direction), page, page_size)
