from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.leave_analyzer.leave_analyzer.attendance.model import AttendanceRecord
from src.leave_analyzer.leave_analyzer.container import build_services
from src.leave_analyzer.leave_analyzer.main import create_app


class InMemoryAttendance:
    """Upserts by (employee_id, work_date), like the MySQL unique key."""

    def __init__(self):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}

    def upsert(self, record: AttendanceRecord) -> None:
        self._by_key[record.key] = record

    def list_records(self, *, employee_id: Optional[str] = None, month: Optional[str] = None):
        items = [
            r
            for r in self._by_key.values()
            if (employee_id is None or r.employee_id == employee_id)
            and (month is None or r.work_date.strftime("%Y-%m") == month)
        ]
        items.sort(key=lambda r: r.key)
        return items

    def list_employees(self):
        names = {r.employee_id: r.employee_name for r in self._by_key.values()}
        return sorted(names.items(), key=lambda item: item[1])


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def app(monkeypatch, attendance_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(build_services(attendance_repo))


@pytest.fixture
def client(app):
    return app.test_client()
