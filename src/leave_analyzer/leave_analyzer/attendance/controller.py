from __future__ import annotations

from datetime import datetime

from flask import Flask, request

from ..common.http import fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return ok({"success": True, "message": "Server is running", "timestamp": datetime.now().isoformat()})

    def _upload_response(result):
        status = 207 if result.errors else 200
        return ok(result.to_dict(), status=status)

    @app.route("/api/upload", methods=["POST"], endpoint="upload")
    def upload():
        """Upload rows already parsed from a spreadsheet (JSON array of objects)."""
        rows = request.get_json(silent=True)
        if rows is None:
            return fail("Invalid data format - expected array", status=400)

        result = container.ingest_service.ingest(rows)
        if result.errors:
            app.logger.warning("upload partial success: %d ok, %d errors", result.success_count, result.error_count)
        return _upload_response(result)

    @app.route("/api/upload/file", methods=["POST"], endpoint="upload_file")
    def upload_file():
        f = request.files.get("file")
        if f is None or not f.filename:
            return fail("Attach a spreadsheet in the 'file' field", status=400)

        result = container.ingest_service.ingest_file(f.stream, f.filename)
        return _upload_response(result)
