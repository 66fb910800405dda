from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Nhãn hiển thị cho một ngày trong bảng chấm công tháng."""

    PRESENT = "Present"
    LEAVE = "Leave"
    OFF = "Off"


class NormalizationErrorKind(str, Enum):
    """Lý do một dòng dữ liệu thô bị từ chối khi chuẩn hoá."""

    MISSING_EMPLOYEE_NAME = "MissingEmployeeName"
    INVALID_DATE = "InvalidDate"
