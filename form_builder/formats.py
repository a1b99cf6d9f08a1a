from __future__ import annotations

import re
from typing import Optional

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DATE_TIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(Z|[+-][0-9]{2}:[0-9]{2})?")
ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
US_DATE_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
EU_DATE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


def is_email(value: str) -> bool:
    return EMAIL_RE.fullmatch(value) is not None


def is_date_time(value: str) -> bool:
    """ISO 8601 date-time with seconds and an optional 'Z' or '+HH:MM' offset."""
    return DATE_TIME_RE.fullmatch(value) is not None


def is_date(value: str) -> bool:
    """Accept YYYY-MM-DD, MM/DD/YYYY or DD-MM-YYYY.

    Only the ISO form is range-checked, and only loosely: month 1-12 and
    day 1-31. Days per month and leap years are not considered.
    """
    match = ISO_DATE_RE.fullmatch(value)
    if match:
        month, day = int(match.group(2)), int(match.group(3))
        return 1 <= month <= 12 and 1 <= day <= 31

    if US_DATE_RE.fullmatch(value):
        return True
    if EU_DATE_RE.fullmatch(value):
        return True
    return False


def detect_format(value: str) -> Optional[str]:
    """Return the JSON Schema format for a string, or None.

    Checked in order: email, date-time, date. First match wins.
    """
    if is_email(value):
        return "email"
    if is_date_time(value):
        return "date-time"
    if is_date(value):
        return "date"
    return None
