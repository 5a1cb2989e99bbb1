"""SQLAlchemy engine + session management.

Uses a session-per-request pattern. The engine is owned by the Flask
application (``app.extensions``) rather than a module global, so several
apps (or tests) can run side by side with different databases.
"""

from __future__ import annotations

import logging

from flask import Flask, Response, g
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from items_api.errors import StoreError

logger = logging.getLogger(__name__)


def create_app_engine(database_url: str) -> Engine:
    return create_engine(database_url, pool_pre_ping=True)


def ping(engine: Engine) -> None:
    """Open one connection and run ``SELECT 1``.

    Raises:
        StoreError: the database cannot be reached.
    """

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise StoreError(f"Could not connect to database: {exc}") from exc


def init_db(app: Flask, engine: Engine | None = None) -> None:
    """Initialize database engine and per-request sessions.

    A failed ping is fatal: the exception propagates out of the app factory.
    """

    if engine is None:
        database_url = str(app.config["DATABASE_URL"])
        logger.info("Connecting to %s", make_url(database_url).render_as_string(hide_password=True))
        engine = create_app_engine(database_url)

    ping(engine)
    logger.info("Successfully connected to %s", engine.dialect.name)

    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.before_request
    def _open_session() -> None:
        g.db = session_factory()  # type: ignore[attr-defined]

    @app.after_request
    def _finish_session(response: Response) -> Response:
        # Commit before the response leaves so a failed commit still turns into a 500.
        session: Session | None = getattr(g, "db", None)
        if session is not None:
            if response.status_code < 400:
                session.commit()
            else:
                session.rollback()
        return response

    @app.teardown_request
    def _close_session(exc: BaseException | None) -> None:
        session: Session | None = g.pop("db", None)
        if session is None:
            return

        try:
            if exc is not None:
                session.rollback()
        finally:
            session.close()


def get_session() -> Session:
    """Get the current request's SQLAlchemy session."""

    session: Session | None = getattr(g, "db", None)
    if session is None:
        raise RuntimeError("Database session not initialized")
    return session
