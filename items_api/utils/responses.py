"""Helpers for consistent JSON responses."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200) -> Response:
    """Success response."""

    return jsonify(data), status_code


def no_content() -> Response:
    """Empty success response."""

    return Response(status=204)


def fail(message: str, status_code: int) -> Response:
    """Error response: ``{"error": message}``."""

    return jsonify({"error": message}), status_code
