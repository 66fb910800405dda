from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Canonical attendance record: one employee, one calendar day.

    A missing ``in_time`` or ``out_time`` means the day was not worked.
    """

    employee_id: str
    employee_name: str
    work_date: date
    in_time: Optional[time] = None
    out_time: Optional[time] = None

    @property
    def key(self) -> tuple[str, date]:
        return self.employee_id, self.work_date

    @property
    def has_times(self) -> bool:
        return self.in_time is not None and self.out_time is not None


@dataclass(frozen=True)
class RecordError:
    record_index: int
    reason: str

    def to_dict(self) -> dict:
        return {"record": self.record_index, "error": self.reason}


@dataclass
class IngestResult:
    success_count: int = 0
    errors: list[RecordError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def to_dict(self) -> dict:
        body = {
            "success": True,
            "count": self.success_count,
            "successCount": self.success_count,
            "errorCount": self.error_count,
            "errors": [e.to_dict() for e in self.errors],
        }
        if self.errors:
            body["message"] = "Partial success"
        return body
