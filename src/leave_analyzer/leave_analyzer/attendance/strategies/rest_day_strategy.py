from __future__ import annotations

from ...core.constants import REST_DAY_EXPECTED_HOURS
from .base import DayDecision, DayStrategy


class RestDayStrategy(DayStrategy):
    """Weekly rest day (Sunday). Never a leave, even with no times."""

    @property
    def expected_hours(self) -> float:
        return REST_DAY_EXPECTED_HOURS

    def decide(self, *, has_times: bool) -> DayDecision:
        return DayDecision(expected_hours=self.expected_hours, is_leave=False, is_off=True)
