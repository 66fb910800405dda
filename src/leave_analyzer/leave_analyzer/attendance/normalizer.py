"""Raw row -> canonical attendance record.

Rows come from spreadsheets or JSON payloads, so field names vary and dates and
times may arrive either as strings or as spreadsheet numbers (serial days for
dates, fractions of a day for times). Everything here is pure: no I/O, no
logging.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from ..core.constants import EXCEL_EPOCH_OFFSET_DAYS, MINUTES_PER_DAY, SECONDS_PER_DAY
from ..core.exceptions import InvalidDate, MissingEmployeeName, ValidationError
from .model import AttendanceRecord, RecordError

# Ordered candidate keys per logical field; first present value wins.
EMPLOYEE_ID_ALIASES = ("Employee ID", "EmployeeID", "EmployeeId", "employee_id", "Emp ID", "emp_id")
EMPLOYEE_NAME_ALIASES = ("Employee Name", "EmployeeName", "employee_name", "Name", "name")
DATE_ALIASES = ("Date", "date", "Work Date", "WorkDate", "work_date")
IN_TIME_ALIASES = ("In-Time", "In Time", "InTime", "in_time")
OUT_TIME_ALIASES = ("Out-Time", "Out Time", "OutTime", "out_time")

_UNIX_EPOCH = datetime(1970, 1, 1)

_DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%d.%m.%Y",
)

_TIME_FORMATS = (
    "%H:%M:%S",
    "%H:%M",
    "%I:%M:%S %p",
    "%I:%M %p",
)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if _is_number(value):
        return math.isnan(value)
    return False


def resolve_field(row: Mapping[str, Any], aliases: Sequence[str]) -> Any:
    """Return the value of the first alias present in ``row``, else None."""
    for key in aliases:
        value = row.get(key)
        if not _is_blank(value):
            return value
    return None


def decode_date(value: Any) -> date:
    """Decode a spreadsheet serial, native date or date string.

    Serials are converted with whole 86400-second days from the 1970 epoch and
    truncated to the day, so later serials never map to earlier dates.
    """
    if _is_blank(value):
        raise InvalidDate(value)

    if _is_number(value):
        if math.isinf(value):
            raise InvalidDate(value)
        try:
            moment = _UNIX_EPOCH + timedelta(seconds=(float(value) - EXCEL_EPOCH_OFFSET_DAYS) * SECONDS_PER_DAY)
        except OverflowError:
            raise InvalidDate(value) from None
        return moment.date()

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass

    raise InvalidDate(value)


def decode_time(value: Any) -> Optional[time]:
    """Decode a day fraction, ``HH:MM[:SS]`` string or native time.

    Anything unrecognised yields None, which marks the day as not worked.
    """
    if _is_blank(value):
        return None

    if _is_number(value):
        if not 0 <= value < 1:
            return None
        # half-up rounding; a fraction just under 1 would otherwise reach 24:00
        minutes = min(int(math.floor(float(value) * MINUTES_PER_DAY + 0.5)), MINUTES_PER_DAY - 1)
        return time(hour=minutes // 60, minute=minutes % 60)

    if isinstance(value, datetime):
        return value.time().replace(microsecond=0)
    if isinstance(value, time):
        return value.replace(microsecond=0, tzinfo=None)

    if isinstance(value, str) and ":" in value:
        text = value.strip().upper()
        for fmt in _TIME_FORMATS:
            try:
                return datetime.strptime(text, fmt).time()
            except ValueError:
                pass

    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if _is_number(value) and float(value).is_integer():
        return str(int(value))
    return str(value).strip()


def normalize(row: Mapping[str, Any]) -> AttendanceRecord:
    """Map one raw row to an AttendanceRecord.

    Raises MissingEmployeeName or InvalidDate. An unreadable time never
    rejects the row; it degrades to "no time".
    """
    if not isinstance(row, Mapping):
        raise ValidationError("Record must be an object of column -> value")

    employee_name = _as_text(resolve_field(row, EMPLOYEE_NAME_ALIASES))
    if not employee_name:
        raise MissingEmployeeName()

    work_date = decode_date(resolve_field(row, DATE_ALIASES))

    employee_id = _as_text(resolve_field(row, EMPLOYEE_ID_ALIASES)) or employee_name

    return AttendanceRecord(
        employee_id=employee_id,
        employee_name=employee_name,
        work_date=work_date,
        in_time=decode_time(resolve_field(row, IN_TIME_ALIASES)),
        out_time=decode_time(resolve_field(row, OUT_TIME_ALIASES)),
    )


def normalize_batch(rows: Iterable[Mapping[str, Any]]) -> tuple[list[AttendanceRecord], list[RecordError]]:
    """Normalize every row; failures are collected with their 1-based index."""
    records: list[AttendanceRecord] = []
    errors: list[RecordError] = []
    for index, row in enumerate(rows, start=1):
        try:
            records.append(normalize(row))
        except ValidationError as e:
            errors.append(RecordError(record_index=index, reason=str(e)))
    return records, errors


def as_row(record: AttendanceRecord) -> dict[str, Any]:
    """Canonical-key row for a record; ``normalize(as_row(r)) == r``."""
    return {
        "employee_id": record.employee_id,
        "employee_name": record.employee_name,
        "work_date": record.work_date,
        "in_time": record.in_time,
        "out_time": record.out_time,
    }
