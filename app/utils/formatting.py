# app/utils/formatting.py
from datetime import date, datetime
from typing import Optional, Union

MONTHS_FR_LOWER = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]


def _as_date(value: Union[date, datetime, str, None]) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def format_date_fr(value) -> str:
    """dd/mm/yyyy, or '' when the value is missing or unparsable."""
    d = _as_date(value)
    return d.strftime("%d/%m/%Y") if d else ""


def format_date_long_fr(value) -> str:
    """'19 octobre 2026'"""
    d = _as_date(value)
    if not d:
        return ""
    return f"{d.day} {MONTHS_FR_LOWER[d.month - 1]} {d.year}"
