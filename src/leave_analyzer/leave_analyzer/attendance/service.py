from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, BinaryIO

from ..core.exceptions import MalformedBatch, ValidationError
from .model import IngestResult, RecordError
from .normalizer import normalize
from .repository import AttendanceRepository
from .spreadsheet import read_rows

log = logging.getLogger(__name__)


class AttendanceIngestService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def ingest(self, rows: Any) -> IngestResult:
        """Normalize and upsert every row of an upload.

        A bad row is reported and skipped; storage failures abort the batch.
        """
        if not isinstance(rows, Sequence) or isinstance(rows, (str, bytes)):
            raise MalformedBatch("Invalid data format - expected array")
        if not rows:
            raise MalformedBatch("No data to upload")

        log.info("ingesting %d attendance rows", len(rows))
        if isinstance(rows[0], Mapping):
            log.debug("columns: %s", list(rows[0].keys()))

        result = IngestResult()
        for index, row in enumerate(rows, start=1):
            try:
                record = normalize(row)
            except ValidationError as e:
                log.warning("record %d rejected: %s", index, e)
                result.errors.append(RecordError(record_index=index, reason=str(e)))
                continue

            self._attendance.upsert(record)
            result.success_count += 1

        log.info("upload summary: %d ok, %d errors", result.success_count, result.error_count)
        return result

    def ingest_file(self, stream: BinaryIO, filename: str) -> IngestResult:
        rows = read_rows(stream, filename)
        log.info("read %d rows from %s", len(rows), filename)
        return self.ingest(rows)
