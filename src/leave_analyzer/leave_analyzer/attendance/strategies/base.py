from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DayDecision:
    expected_hours: float
    is_leave: bool
    is_off: bool


class DayStrategy(ABC):
    """Strategy Pattern: how many hours a weekday owes and how to classify it."""

    @property
    @abstractmethod
    def expected_hours(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def decide(self, *, has_times: bool) -> DayDecision:
        raise NotImplementedError
