"""Display formatting helpers for dates and phone numbers."""

import re
from typing import Any, List, Optional

import pandas as pd

MISSING_DISPLAY = "-"

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DIGITS = re.compile(r"^\d+$")
_PHONE_DIGITS = re.compile(r"^\d{10,11}$")
_HALF_WIDTH = re.compile(r"^[\x20-\x7E]*$")


def _to_timestamp(value: Any) -> Optional[pd.Timestamp]:
    if value is None or value == "":
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return None
    return ts


def format_date_time(value: Any) -> str:
    """Format an ISO timestamp as ``YYYY-MM-DD HH:MM``.

    The timestamp's own wall-clock time is kept. Missing or unparseable
    values render as ``"-"``.

    Example:
        "2025-07-19T10:57:15.819046+09:00" -> "2025-07-19 10:57"
    """
    ts = _to_timestamp(value)
    if ts is None:
        return MISSING_DISPLAY
    return ts.strftime("%Y-%m-%d %H:%M")


def format_date(value: Any) -> str:
    """Format a date or timestamp as ``YYYY-MM-DD``."""
    if isinstance(value, str) and _DATE_ONLY.match(value):
        return value if _to_timestamp(value) is not None else MISSING_DISPLAY
    ts = _to_timestamp(value)
    if ts is None:
        return MISSING_DISPLAY
    return ts.strftime("%Y-%m-%d")


# =============================================================================
# Phone numbers
# =============================================================================

def remove_phone_hyphens(phone_number: str) -> str:
    if not phone_number:
        return phone_number
    return phone_number.replace("-", "")


def is_valid_phone_format(phone_number: str) -> bool:
    """True when the input is digits once hyphens are removed."""
    if not phone_number:
        return False
    return bool(_DIGITS.match(remove_phone_hyphens(phone_number)))


def generate_phone_search_patterns(phone_number: str) -> List[str]:
    """Return the hyphen-free and hyphenated spellings of a phone number.

    Non-phone input comes back unchanged as a single pattern. Duplicates
    are removed, hyphen-free spelling first.
    """
    if not phone_number:
        return []
    if not is_valid_phone_format(phone_number):
        return [phone_number]

    cleaned = remove_phone_hyphens(phone_number)

    if len(cleaned) == 11 and cleaned.startswith("0"):
        # Mobile: 090-1234-5678
        with_hyphens = f"{cleaned[:3]}-{cleaned[3:7]}-{cleaned[7:]}"
    elif len(cleaned) == 10 and cleaned.startswith("0"):
        if cleaned.startswith(("03", "06")):
            # Two-digit area code: 03-1234-5678
            with_hyphens = f"{cleaned[:2]}-{cleaned[2:6]}-{cleaned[6:]}"
        else:
            with_hyphens = f"{cleaned[:3]}-{cleaned[3:6]}-{cleaned[6:]}"
    else:
        with_hyphens = phone_number

    return list(dict.fromkeys([cleaned, with_hyphens]))


def is_phone_number(value: str) -> bool:
    """True for 10 or 11 digits, hyphens ignored."""
    if not value:
        return False
    return bool(_PHONE_DIGITS.match(remove_phone_hyphens(value)))


def is_half_width(value: str) -> bool:
    """True when every character is printable ASCII. Empty input counts."""
    if not value:
        return True
    return bool(_HALF_WIDTH.match(value))
