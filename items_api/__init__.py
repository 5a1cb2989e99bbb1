"""Flask application package."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask
from sqlalchemy.engine import Engine


def create_app(engine: Engine | None = None) -> Flask:
    """Application factory.

    Args:
        engine: Pre-built SQLAlchemy engine. When omitted one is created
            from the configured ``DATABASE_URL``.

    Returns:
        Configured Flask application.

    Raises:
        StoreError: the database could not be reached at startup.
    """
    load_dotenv()

    from items_api.config import get_config
    from items_api.db import init_db
    from items_api.error_handlers import register_error_handlers
    from items_api.logging_config import configure_logging
    from items_api.routes.health import health_bp
    from items_api.routes.items import items_bp

    app = Flask(__name__)
    app.config.from_object(get_config())

    configure_logging(app)
    init_db(app, engine)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(items_bp)

    return app
