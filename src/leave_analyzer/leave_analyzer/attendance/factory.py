from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .strategies.base import DayStrategy
from .strategies.rest_day_strategy import RestDayStrategy
from .strategies.saturday_strategy import SaturdayStrategy
from .strategies.workday_strategy import WorkdayStrategy

_SATURDAY = 5
_SUNDAY = 6


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose the day policy from the weekday of ``work_date``."""

    def for_day(self, work_date: date) -> DayStrategy:
        weekday = work_date.weekday()
        if weekday == _SUNDAY:
            return RestDayStrategy()
        if weekday == _SATURDAY:
            return SaturdayStrategy()
        return WorkdayStrategy()
