"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from items_api.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness only; the database is not probed."""

    return ok({"status": "ok"})
