"""Field validation helpers."""

import re
from datetime import date, datetime
from typing import Any

PHONE_PATTERN = re.compile(r"1[3-9]\d{9}", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def validate_phone(value: Any) -> bool:
    """Check an 11-digit mobile number starting with 1 and a 3-9 second digit."""
    return isinstance(value, str) and PHONE_PATTERN.fullmatch(value) is not None


def validate_date(value: Any) -> bool:
    """
    Check a ``yyyy-MM-dd`` date string.

    Both the literal shape and the calendar must agree: ``2024-02-30`` has
    the right shape but is rejected.
    """
    if not isinstance(value, str) or DATE_PATTERN.fullmatch(value) is None:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_iso_date(value: str) -> date:
    """
    Parse an ISO-8601 date or datetime and return its calendar date.

    Raises:
        ValueError: If the value is not ISO-8601
    """
    return datetime.fromisoformat(value.strip()).date()
