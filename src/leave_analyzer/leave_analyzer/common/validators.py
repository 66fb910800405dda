from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_month_key


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_month_key(value: Optional[str]) -> str:
    """Validate a ``YYYY-MM`` query value and return it stripped."""
    value = require_non_empty(value or "", "Month parameter (format: YYYY-MM)")
    parse_month_key(value)
    return value
