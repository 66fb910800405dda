from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_time
from ..core.constants import LEAVES_PER_MONTH
from ..core.enums import DayStatus


def format_hours(value: float) -> str:
    """Two-decimal string used for hours and percentages in API output."""
    return f"{value:.2f}"


@dataclass(frozen=True)
class DayBreakdown:
    work_date: date
    in_time: Optional[time]
    out_time: Optional[time]
    expected_hours: float
    worked_hours: float
    is_leave: bool
    is_off: bool

    @property
    def status(self) -> DayStatus:
        if self.is_off:
            return DayStatus.OFF
        if self.is_leave:
            return DayStatus.LEAVE
        return DayStatus.PRESENT

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "weekday": self.work_date.strftime("%a"),
            "inTime": format_time(self.in_time),
            "outTime": format_time(self.out_time),
            "expectedHours": self.expected_hours,
            "workedHours": round(self.worked_hours, 2),
            "leave": self.is_leave,
            "off": self.is_off,
            "status": self.status.value,
        }


@dataclass
class MonthlyStats:
    employee_id: str
    employee_name: str
    year: int
    month: int
    expected_hours: float = 0.0
    actual_hours: float = 0.0
    working_days: int = 0
    leaves_used: int = 0
    daily: list[DayBreakdown] = field(default_factory=list)

    @property
    def month_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def productivity(self) -> float:
        if self.expected_hours <= 0:
            return 0.0
        return round(self.actual_hours / self.expected_hours * 100, 2)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "year": self.year,
            "month": self.month,
            "expectedHours": round(self.expected_hours, 2),
            "actualHours": round(self.actual_hours, 2),
            "workingDays": self.working_days,
            "leavesUsed": self.leaves_used,
            "leavesAllowed": LEAVES_PER_MONTH,
            "productivity": format_hours(self.productivity),
            "daily": [d.to_dict() for d in self.daily],
        }


@dataclass(frozen=True)
class MonthSummary:
    """Organisation-wide totals for one month."""

    month: str
    employees: int
    expected_hours: float
    actual_hours: float
    leaves: int

    @property
    def productivity(self) -> float:
        if self.expected_hours <= 0:
            return 0.0
        return round(self.actual_hours / self.expected_hours * 100, 2)

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "employees": self.employees,
            "expected": format_hours(self.expected_hours),
            "actual": format_hours(self.actual_hours),
            "leaves": self.leaves,
            "productivity": format_hours(self.productivity),
        }
