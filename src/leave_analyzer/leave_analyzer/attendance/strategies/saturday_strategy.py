from __future__ import annotations

from ...core.constants import SATURDAY_EXPECTED_HOURS
from .base import DayDecision, DayStrategy


class SaturdayStrategy(DayStrategy):
    """Saturday half day."""

    @property
    def expected_hours(self) -> float:
        return SATURDAY_EXPECTED_HOURS

    def decide(self, *, has_times: bool) -> DayDecision:
        return DayDecision(expected_hours=self.expected_hours, is_leave=not has_times, is_off=False)
