from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.leave_analyzer.leave_analyzer.attendance.model import AttendanceRecord
from src.leave_analyzer.leave_analyzer.attendance.normalizer import (
    DATE_ALIASES,
    as_row,
    decode_date,
    decode_time,
    normalize,
    normalize_batch,
    resolve_field,
)
from src.leave_analyzer.leave_analyzer.core.enums import NormalizationErrorKind
from src.leave_analyzer.leave_analyzer.core.exceptions import InvalidDate, MissingEmployeeName


def test_serial_date_and_fractional_time():
    assert decode_date(45292) == date(2024, 1, 1)
    assert decode_time(0.4375) == time(10, 30)


def test_serial_date_ignores_time_fraction():
    assert decode_date(45292.99) == date(2024, 1, 1)
    assert decode_date(45293.0) == date(2024, 1, 2)


def test_serial_date_is_monotonic():
    serials = [0.5, 1, 25568.9, 25569, 25569.5, 45291.999, 45292, 45292.25, 60000]
    decoded = [decode_date(s) for s in serials]
    assert decoded == sorted(decoded)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-05", date(2024, 1, 5)),
        ("  2024-01-05 ", date(2024, 1, 5)),
        ("01/05/2024", date(2024, 1, 5)),
        ("25/01/2024", date(2024, 1, 25)),
        ("2024-01-05T00:00:00", date(2024, 1, 5)),
        (datetime(2024, 1, 5, 23, 59), date(2024, 1, 5)),
        (date(2024, 1, 5), date(2024, 1, 5)),
    ],
)
def test_decode_date_accepts_strings_and_native_dates(value, expected):
    assert decode_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", True, float("nan"), float("inf")])
def test_decode_date_rejects_garbage(value):
    with pytest.raises(InvalidDate):
        decode_date(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("10:00", time(10, 0)),
        ("9:05", time(9, 5)),
        ("18:30:15", time(18, 30, 15)),
        ("06:30 PM", time(18, 30)),
        (0, time(0, 0)),
        (0.75, time(18, 0)),
        (0.9999999, time(23, 59)),
        (time(8, 15, 0, 500), time(8, 15)),
        (datetime(1899, 12, 30, 17, 45), time(17, 45)),
    ],
)
def test_decode_time_shapes(value, expected):
    assert decode_time(value) == expected


@pytest.mark.parametrize("value", [None, "", "-", "late", "25:99", 1, 1.5, -0.1, False])
def test_decode_time_unrecognised_is_no_time(value):
    assert decode_time(value) is None


def test_resolve_field_prefers_first_present_alias():
    row = {"date": "2024-01-02", "Date": "2024-01-01"}
    assert resolve_field(row, DATE_ALIASES) == "2024-01-01"

    row = {"Date": "  ", "work_date": "2024-01-03"}
    assert resolve_field(row, DATE_ALIASES) == "2024-01-03"


@pytest.mark.parametrize(
    "row",
    [
        {"Employee Name": " A ", "Date": "2024-01-01", "In-Time": "10:00", "Out-Time": "18:30"},
        {"EmployeeName": "A", "date": "2024-01-01", "InTime": "10:00", "OutTime": "18:30"},
        {"employee_name": "A", "work_date": "2024-01-01", "in_time": "10:00:00", "out_time": "18:30:00"},
        {"Employee Name": "A", "Date": 45292, "In-Time": 0.4166666667, "Out-Time": 0.7708333333},
    ],
)
def test_normalize_field_variants(row):
    assert normalize(row) == AttendanceRecord(
        employee_id="A",
        employee_name="A",
        work_date=date(2024, 1, 1),
        in_time=time(10, 0),
        out_time=time(18, 30),
    )


def test_normalize_uses_explicit_employee_id():
    rec = normalize({"Employee ID": 101.0, "Employee Name": "Asha", "Date": "2024-01-01"})
    assert rec.employee_id == "101"
    assert rec.employee_name == "Asha"


def test_normalize_without_times_is_a_valid_non_worked_day():
    rec = normalize({"Employee Name": "A", "Date": "2024-01-06", "In-Time": "n/a"})
    assert rec.in_time is None
    assert rec.out_time is None
    assert not rec.has_times


def test_normalize_missing_name():
    with pytest.raises(MissingEmployeeName) as exc:
        normalize({"Employee Name": "  ", "Date": "2024-01-01"})
    assert exc.value.kind == NormalizationErrorKind.MISSING_EMPLOYEE_NAME


def test_normalize_missing_date():
    with pytest.raises(InvalidDate) as exc:
        normalize({"Employee Name": "A"})
    assert exc.value.kind == NormalizationErrorKind.INVALID_DATE


def test_renormalizing_canonical_row_is_a_no_op():
    rec = normalize({"Employee ID": "E1", "Employee Name": "A", "Date": 45293, "In-Time": 0.4375})
    assert normalize(as_row(rec)) == rec


def test_normalize_batch_keeps_going_after_bad_rows():
    rows = [
        {"Employee Name": "A", "Date": "2024-01-01"},
        {"Date": "2024-01-02"},
        "not a row",
        {"Employee Name": "A", "Date": "garbage"},
        {"Employee Name": "A", "Date": "2024-01-03"},
    ]
    records, errors = normalize_batch(rows)

    assert [r.work_date.day for r in records] == [1, 3]
    assert [e.record_index for e in errors] == [2, 3, 4]
    assert errors[0].reason == "Missing employee name"
    assert errors[2].reason.startswith("Invalid date")
