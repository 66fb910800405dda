from __future__ import annotations

from flask import jsonify


def ok(data=None, status: int = 200):
    return jsonify(data), status


def fail(message: str, status: int = 400, **extra):
    payload = {"success": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status
