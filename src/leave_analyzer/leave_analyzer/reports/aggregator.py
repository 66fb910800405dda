"""Canonical records -> per-employee monthly statistics.

Stateless and pure: the same batch always yields the same stats, whatever the
input order.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.factory import DayStrategyFactory
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_key
from .calculator.base import WorkedHoursCalculator
from .calculator.standard_calculator import StandardWorkedHoursCalculator
from .model import DayBreakdown, MonthlyStats, MonthSummary

StatsKey = tuple[str, str]

_default_factory = DayStrategyFactory()
_default_calculator = StandardWorkedHoursCalculator()


def classify_day(
    record: AttendanceRecord,
    *,
    factory: Optional[DayStrategyFactory] = None,
    calculator: Optional[WorkedHoursCalculator] = None,
) -> DayBreakdown:
    factory = factory or _default_factory
    calculator = calculator or _default_calculator

    decision = factory.for_day(record.work_date).decide(has_times=record.has_times)
    return DayBreakdown(
        work_date=record.work_date,
        in_time=record.in_time,
        out_time=record.out_time,
        expected_hours=decision.expected_hours,
        worked_hours=calculator.worked_hours(record.in_time, record.out_time),
        is_leave=decision.is_leave,
        is_off=decision.is_off,
    )


def _dedupe(records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    # Same (employee_id, work_date) twice behaves like an upsert: last one wins.
    by_key: dict[tuple, AttendanceRecord] = {}
    for r in records:
        by_key[r.key] = r
    return list(by_key.values())


def aggregate(
    records: Iterable[AttendanceRecord],
    *,
    employee_id: Optional[str] = None,
    month: Optional[str] = None,
    factory: Optional[DayStrategyFactory] = None,
    calculator: Optional[WorkedHoursCalculator] = None,
) -> dict[StatsKey, MonthlyStats]:
    """Group records by (employee_id, "YYYY-MM") and compute MonthlyStats.

    ``employee_id`` and ``month`` narrow the result; no match gives an empty dict.
    """
    result: dict[StatsKey, MonthlyStats] = {}

    for record in _dedupe(records):
        key_month = month_key(record.work_date)
        if employee_id is not None and record.employee_id != employee_id:
            continue
        if month is not None and key_month != month:
            continue

        key = (record.employee_id, key_month)
        stats = result.get(key)
        if stats is None:
            stats = MonthlyStats(
                employee_id=record.employee_id,
                employee_name=record.employee_name,
                year=record.work_date.year,
                month=record.work_date.month,
            )
            result[key] = stats

        day = classify_day(record, factory=factory, calculator=calculator)
        if day.expected_hours > 0:
            stats.expected_hours += day.expected_hours
            stats.working_days += 1
        if day.is_leave:
            stats.leaves_used += 1
        stats.actual_hours += day.worked_hours
        stats.daily.append(day)

    for stats in result.values():
        stats.daily.sort(key=lambda d: d.work_date)

    return result


def summarize_month(stats: Iterable[MonthlyStats], month: str) -> MonthSummary:
    """Roll monthly stats of several employees up into one organisation total."""
    expected = actual = 0.0
    leaves = 0
    employees: set[str] = set()

    for s in stats:
        if s.month_key != month:
            continue
        employees.add(s.employee_id)
        expected += s.expected_hours
        actual += s.actual_hours
        leaves += s.leaves_used

    return MonthSummary(
        month=month,
        employees=len(employees),
        expected_hours=expected,
        actual_hours=actual,
        leaves=leaves,
    )
