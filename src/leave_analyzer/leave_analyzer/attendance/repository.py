from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def upsert(self, record: AttendanceRecord) -> None:
        """Insert the record or overwrite the one with the same (employee_id, work_date)."""

        raise NotImplementedError

    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_employees(self) -> Sequence[tuple[str, str]]:
        """(employee_id, employee_name) pairs ordered by name."""

        raise NotImplementedError
