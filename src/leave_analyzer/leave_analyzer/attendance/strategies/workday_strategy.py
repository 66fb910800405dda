from __future__ import annotations

from ...core.constants import WEEKDAY_EXPECTED_HOURS
from .base import DayDecision, DayStrategy


class WorkdayStrategy(DayStrategy):
    """Monday to Friday: full day owed, missing times count as leave."""

    @property
    def expected_hours(self) -> float:
        return WEEKDAY_EXPECTED_HOURS

    def decide(self, *, has_times: bool) -> DayDecision:
        return DayDecision(expected_hours=self.expected_hours, is_leave=not has_times, is_off=False)
