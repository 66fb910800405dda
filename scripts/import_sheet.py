"""Import an attendance spreadsheet from the command line.

Usage: python scripts/import_sheet.py path/to/attendance.xlsx [--dry-run]

With --dry-run rows are only normalized and the monthly stats printed; nothing
is written to the database.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.leave_analyzer.leave_analyzer.attendance.normalizer import normalize_batch
from src.leave_analyzer.leave_analyzer.attendance.spreadsheet import read_rows
from src.leave_analyzer.leave_analyzer.container import build_container
from src.leave_analyzer.leave_analyzer.core.exceptions import DomainError
from src.leave_analyzer.leave_analyzer.reports.aggregator import aggregate


def _dry_run(path: Path) -> int:
    with path.open("rb") as f:
        rows = read_rows(f, path.name)
    records, errors = normalize_batch(rows)
    for e in errors:
        print(f"  record {e.record_index}: {e.reason}")
    for (emp_id, month), s in sorted(aggregate(records).items()):
        print(
            f"{emp_id:<20} {month}  expected={s.expected_hours:.2f} actual={s.actual_hours:.2f} "
            f"leaves={s.leaves_used} productivity={s.productivity:.2f}%"
        )
    print(f"OK: {len(records)} rows valid, {len(errors)} rejected")
    return 1 if errors else 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", type=Path)
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args()

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")

    try:
        if args.dry_run:
            return _dry_run(args.path)

        settings = importlib.import_module(get_settings_module())
        container = build_container(db_config=settings.DB_CONFIG)
        with args.path.open("rb") as f:
            result = container.ingest_service.ingest_file(f, args.path.name)
    except DomainError as e:
        raise SystemExit(f"Import failed: {e}")

    for e in result.errors:
        print(f"  record {e.record_index}: {e.reason}")
    print(f"OK: {result.success_count} rows imported, {result.error_count} rejected")
    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
