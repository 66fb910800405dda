"""Ví dụ: dùng service layer (không qua Flask).

Normalizes a few spreadsheet-style rows and prints the monthly stats, then
shows the same report read back through the MySQL-backed container.
"""

import importlib
import json

from config import get_settings_module

from src.leave_analyzer.leave_analyzer.attendance.normalizer import normalize_batch
from src.leave_analyzer.leave_analyzer.container import build_container
from src.leave_analyzer.leave_analyzer.reports.aggregator import aggregate

ROWS = [
    {"Employee Name": "Asha", "Date": 45292, "In-Time": 0.4166666667, "Out-Time": 0.7708333333},
    {"Employee Name": "Asha", "Date": "2024-01-06", "In-Time": None, "Out-Time": None},
    {"Employee Name": "Asha", "Date": "2024-01-07"},
    {"Date": "2024-01-08", "In-Time": "10:00"},
]


def main():
    records, errors = normalize_batch(ROWS)
    print("rejected:", [(e.record_index, e.reason) for e in errors])
    for key, stats in aggregate(records).items():
        print(key, json.dumps(stats.to_dict(), indent=2))

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.report_service.month_summary("2024-01").to_dict())


if __name__ == "__main__":
    main()
