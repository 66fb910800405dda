from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from ...core.constants import TIME_ANCHOR_DATE
from .base import WorkedHoursCalculator


class StandardWorkedHoursCalculator(WorkedHoursCalculator):
    """Standard rule: out - in on a common day, in hours, not below 0."""

    def worked_hours(self, in_time: Optional[time], out_time: Optional[time]) -> float:
        if in_time is None or out_time is None:
            return 0.0
        start = datetime.combine(TIME_ANCHOR_DATE, in_time)
        end = datetime.combine(TIME_ANCHOR_DATE, out_time)
        hours = (end - start).total_seconds() / 3600
        return max(hours, 0.0)
