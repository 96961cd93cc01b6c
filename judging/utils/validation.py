"""
Request field normalization helpers.

Pure functions shared by every resource repository: trim strings, enforce
required fields and numeric ranges, and fill in documented defaults.
Failures raise ``ValidationError`` so callers never reach the store.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

from judging.errors import ValidationError

DEFAULT_STATUS = "active"


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string, or None when absent or blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_text(message: str, *values: Any) -> Tuple[str, ...]:
    """Trim every value; raise ``ValidationError(message)`` if any is missing.

    A single message covers the whole group, matching how the API reports
    required pairs such as "Name and email are required".
    """
    cleaned = tuple(clean_text(v) for v in values)
    if any(v is None for v in cleaned):
        raise ValidationError(message)
    return cleaned


def with_default(value: Any, default: Any) -> Any:
    return default if value is None else value


def check_range(value, low, high, message: str):
    """Enforce ``low < value <= high``; an absent value passes through."""
    if value is not None and not (low < value <= high):
        raise ValidationError(message)
    return value
