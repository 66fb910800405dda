from __future__ import annotations

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import MalformedBatch, StorageUnavailable, ValidationError
from .http import fail


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), status=400)

    @app.errorhandler(MalformedBatch)
    def _malformed(e: MalformedBatch):
        return fail(str(e), status=400)

    @app.errorhandler(StorageUnavailable)
    def _storage(e: StorageUnavailable):
        app.logger.error("storage unavailable: %s", e)
        return fail("Attendance storage unavailable", status=503, details=str(e))

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        if e.code == 404:
            return fail("Route not found", status=404)
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(e)
        return fail("Something went wrong!", status=500)
