from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time
from typing import Optional


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def worked_hours(self, in_time: Optional[time], out_time: Optional[time]) -> float:
        raise NotImplementedError
