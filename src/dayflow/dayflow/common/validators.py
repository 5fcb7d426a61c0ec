from __future__ import annotations

import re
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import EMAIL_PATTERN
from ..core.exceptions import ValidationError
from .datetime_utils import parse_clock_time, parse_iso_date

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def require_non_empty(value: Any, field_name: str) -> str:
    # Blank means whitespace only; a non-blank value is kept as sent.
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def optional_str(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def str_or_default(value: Any, field_name: str, default: str) -> str:
    """Return ``value`` untouched, or ``default`` when it is missing or blank."""
    value = optional_str(value, field_name)
    if value is None or not value.strip():
        return default
    return value


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Any, field_name: str = "email") -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} is not a valid email address")
    return email


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; JSON true/false is never an id.
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return value


def require_iso_date(value: Any, field_name: str) -> date:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def optional_iso_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return require_iso_date(value, field_name)


def optional_clock_time(value: Any, field_name: str) -> Optional[time]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a time (HH:MM or HH:MM:SS)")
    try:
        return parse_clock_time(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a time (HH:MM or HH:MM:SS)")


def require_amount(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"{field_name} must be a non-negative number")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a non-negative number")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return amount


def optional_amount(value: Any, field_name: str) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return require_amount(value, field_name)
