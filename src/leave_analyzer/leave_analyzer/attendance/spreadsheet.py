"""Read an uploaded spreadsheet into raw rows.

Cells are handed on as they come out of the sheet: numbers (serial dates, day
fractions), strings, native dates/times, or None for empty cells. Making sense
of them is the normalizer's job.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any, BinaryIO

import numpy as np
import pandas as pd

from ..core.exceptions import MalformedBatch

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}


def _cell(value: Any) -> Any:
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, float) and value != value:
        return None
    return value


def read_frame(stream: BinaryIO, filename: str) -> pd.DataFrame:
    suffix = Path(filename or "").suffix.lower()
    try:
        if suffix in EXCEL_SUFFIXES:
            # first sheet only, like the upload preview
            return pd.read_excel(stream, sheet_name=0, engine="openpyxl")
        if suffix in CSV_SUFFIXES:
            return pd.read_csv(stream)
    except (ValueError, OSError, KeyError, zipfile.BadZipFile, pd.errors.ParserError) as e:
        raise MalformedBatch(f"Cannot read spreadsheet {filename!r}: {e}") from e
    raise MalformedBatch(f"Unsupported file type {suffix or '(none)'!r}; expected .xlsx or .csv")


def read_rows(stream: BinaryIO, filename: str) -> list[dict[str, Any]]:
    """First sheet of ``filename`` as a list of column -> cell dicts."""
    df = read_frame(stream, filename)
    df = df.dropna(how="all")
    columns = [str(c).strip() for c in df.columns]
    return [
        {col: _cell(value) for col, value in zip(columns, row)}
        for row in df.itertuples(index=False, name=None)
    ]
