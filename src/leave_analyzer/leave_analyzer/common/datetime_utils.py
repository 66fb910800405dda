from __future__ import annotations

import re
from datetime import date, time
from typing import Optional

from ..core.constants import MONTH_KEY_FORMAT
from ..core.exceptions import ValidationError

_MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def month_key(value: date) -> str:
    """Calendar month of a date as ``YYYY-MM``."""
    return value.strftime(MONTH_KEY_FORMAT)


def parse_month_key(value: str) -> tuple[int, int]:
    m = _MONTH_KEY_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Month must be in YYYY-MM format, got {value!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(f"Month out of range: {value!r}")
    return year, month


def format_time(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value is not None else None
