"""Input validation."""

from __future__ import annotations

import re
from datetime import datetime

from ..core.errors import EonetValidationError

_ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def is_valid_date(value: str) -> bool:
    """Return True for a real calendar date written as ``YYYY-MM-DD``."""

    if not isinstance(value, str) or _ISO_DATE_PATTERN.fullmatch(value) is None:
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def validate_date_range(start_date: str, end_date: str) -> None:
    if not is_valid_date(start_date):
        raise EonetValidationError("the starting date is invalid")
    if end_date and not is_valid_date(end_date):
        raise EonetValidationError("the ending date is invalid")


__all__ = [
    "is_valid_date",
    "validate_date_range",
]
