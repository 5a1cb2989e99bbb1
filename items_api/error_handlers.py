"""Centralized error handlers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from items_api.errors import AppError, StoreError, ValidationError
from items_api.utils.responses import fail

logger = logging.getLogger(__name__)


def _flatten_messages(messages: Any, prefix: str = "") -> list[str]:
    # marshmallow nests messages as field -> list[str] (or dict for nested/_schema)
    if isinstance(messages, dict):
        out: list[str] = []
        for key, value in messages.items():
            label = str(key) if not prefix else f"{prefix}.{key}"
            out.extend(_flatten_messages(value, label))
        return out
    if isinstance(messages, (list, tuple)):
        out = []
        for value in messages:
            out.extend(_flatten_messages(value, prefix))
        return out
    if prefix and prefix != "_schema":
        return [f"{prefix}: {messages}"]
    return [str(messages)]


def _store_error_response(exc: SQLAlchemyError):
    logger.error("Database error", exc_info=exc)
    orig = getattr(exc, "orig", None)
    wrapped = StoreError(str(orig) if orig is not None else str(exc))
    return fail(wrapped.message, wrapped.status_code)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return fail(exc.message, exc.status_code)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        wrapped = ValidationError("; ".join(_flatten_messages(exc.messages)))
        return fail(wrapped.message, wrapped.status_code)

    @app.errorhandler(SQLAlchemyError)
    def _handle_store_error(exc: SQLAlchemyError):
        return _store_error_response(exc)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        # Errors raised outside the view (the request commit) arrive wrapped in a 500
        original = getattr(exc, "original_exception", None)
        if isinstance(original, SQLAlchemyError):
            return _store_error_response(original)

        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("Not found", 404)

        return fail(getattr(exc, "description", None) or "HTTP error", status)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail("Internal server error", 500)
