from __future__ import annotations

from datetime import date, time

import pytest

from src.leave_analyzer.leave_analyzer.attendance.model import AttendanceRecord
from src.leave_analyzer.leave_analyzer.core.exceptions import ValidationError
from src.leave_analyzer.leave_analyzer.reports.service import MonthlyReportService


class FakeAttendanceRepo:
    def __init__(self, records):
        self._records = records
        self.last_args = None

    def list_records(self, *, employee_id=None, month=None):
        self.last_args = {"employee_id": employee_id, "month": month}
        return self._records

    def list_employees(self):
        return [("E2", "Bao"), ("E1", "Chi")]


RECORDS = [
    AttendanceRecord("E1", "Chi", date(2024, 1, 1), time(10, 0), time(18, 30)),
    AttendanceRecord("E1", "Chi", date(2024, 1, 6)),
    AttendanceRecord("E1", "Chi", date(2024, 2, 1), time(10, 0), time(14, 15)),
    AttendanceRecord("E1", "Chi", date(2023, 12, 29), time(10, 0), time(18, 30)),
    AttendanceRecord("E2", "Bao", date(2024, 1, 2), time(9, 0), time(17, 30)),
]


def test_monthly_stats_nested_by_employee_then_month():
    svc = MonthlyReportService(FakeAttendanceRepo(RECORDS))

    nested = svc.monthly_stats()

    assert list(nested) == ["E1", "E2"]
    assert list(nested["E1"]) == ["2023-12", "2024-01", "2024-02"]
    assert nested["E1"]["2024-01"].leaves_used == 1


def test_monthly_stats_forwards_filters():
    repo = FakeAttendanceRepo(RECORDS)
    svc = MonthlyReportService(repo)

    nested = svc.monthly_stats(employee_id="E1", month="2024-01")

    assert repo.last_args == {"employee_id": "E1", "month": "2024-01"}
    # the aggregator applies the filters too, whatever storage returned
    assert list(nested) == ["E1"]
    assert list(nested["E1"]) == ["2024-01"]


def test_no_matching_records_is_empty_not_error():
    svc = MonthlyReportService(FakeAttendanceRepo([]))
    assert svc.monthly_stats(employee_id="E9", month="2024-01") == {}
    assert svc.employee_month(employee_id="E9", month="2024-01") is None


def test_bad_month_is_rejected():
    svc = MonthlyReportService(FakeAttendanceRepo(RECORDS))
    with pytest.raises(ValidationError):
        svc.monthly_stats(month="2024-1")
    with pytest.raises(ValidationError):
        svc.month_summary("2024-13")


def test_month_summary_uses_shared_policy():
    summary = MonthlyReportService(FakeAttendanceRepo(RECORDS)).month_summary("2024-01")

    assert summary.employees == 2
    assert summary.expected_hours == 8.5 + 4 + 8.5
    assert summary.actual_hours == 17
    assert summary.leaves == 1


def test_periods_newest_year_first():
    periods = MonthlyReportService(FakeAttendanceRepo(RECORDS)).periods_for("E1")
    assert list(periods.items()) == [(2024, [1, 2]), (2023, [12])]


def test_list_employees():
    assert MonthlyReportService(FakeAttendanceRepo(RECORDS)).list_employees() == [
        {"employeeId": "E2", "employeeName": "Bao"},
        {"employeeId": "E1", "employeeName": "Chi"},
    ]


def test_employee_month_returns_single_stats():
    svc = MonthlyReportService(FakeAttendanceRepo(RECORDS))

    stats = svc.employee_month(employee_id="E1", month="2024-01")

    assert stats is not None
    assert stats.month_key == "2024-01"
    assert stats.actual_hours == pytest.approx(8.5)
    assert stats.leaves_used == 1
