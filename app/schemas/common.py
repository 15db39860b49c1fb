# app/schemas/common.py
from typing import Any


def blank_to_none(v: Any) -> Any:
    """HTML forms post "" for untouched optional inputs; treat those as missing."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def blank_to_zero(v: Any) -> Any:
    """Optional amounts default to 0 when empty, null or not a number."""
    if v is None or (isinstance(v, str) and not v.strip()):
        return 0
    return v
