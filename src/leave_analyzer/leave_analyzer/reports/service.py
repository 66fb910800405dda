from __future__ import annotations

from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_month_key
from .aggregator import aggregate, summarize_month
from .calculator.base import WorkedHoursCalculator
from .calculator.standard_calculator import StandardWorkedHoursCalculator
from .model import MonthlyStats, MonthSummary


class MonthlyReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WorkedHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardWorkedHoursCalculator()

    def monthly_stats(
        self,
        *,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
    ) -> dict[str, dict[str, MonthlyStats]]:
        """Stats nested as ``{employee_id: {"YYYY-MM": MonthlyStats}}``.

        Recomputed from storage on every call; an empty filter match gives ``{}``.
        """
        if month is not None:
            month = require_month_key(month)

        records = self._attendance.list_records(employee_id=employee_id, month=month)
        stats = aggregate(records, employee_id=employee_id, month=month, calculator=self._calculator)

        nested: dict[str, dict[str, MonthlyStats]] = {}
        for (emp_id, key_month), s in sorted(stats.items()):
            nested.setdefault(emp_id, {})[key_month] = s
        return nested

    def employee_month(self, *, employee_id: str, month: str) -> Optional[MonthlyStats]:
        return self.monthly_stats(employee_id=employee_id, month=month).get(employee_id, {}).get(month)

    def month_summary(self, month: str) -> MonthSummary:
        month = require_month_key(month)
        records = self._attendance.list_records(month=month)
        stats = aggregate(records, month=month, calculator=self._calculator)
        return summarize_month(stats.values(), month)

    def list_employees(self) -> list[dict]:
        return [{"employeeId": emp_id, "employeeName": name} for emp_id, name in self._attendance.list_employees()]

    def periods_for(self, employee_id: str) -> dict[int, list[int]]:
        """Years (newest first) mapped to the months that have records."""
        periods: dict[int, set[int]] = {}
        for r in self._attendance.list_records(employee_id=employee_id):
            if r.employee_id != employee_id:
                continue
            periods.setdefault(r.work_date.year, set()).add(r.work_date.month)
        return {year: sorted(periods[year]) for year in sorted(periods, reverse=True)}
