from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

EMPLOYEE_NUMBER_RE = re.compile(r"^[A-Z0-9]+$")
MOBILE_NUMBER_RE = re.compile(r"^0\d{2}\s\d{3}\s\d{4}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def check_min_length(value: Optional[str], field_name: str, min_len: int, message: str) -> Optional[FieldError]:
    if value is None or len(value.strip()) < min_len:
        return FieldError(field_name, message)
    return None


def check_pattern(value: Optional[str], field_name: str, pattern: re.Pattern, message: str) -> Optional[FieldError]:
    if not value or not pattern.match(value):
        return FieldError(field_name, message)
    return None
