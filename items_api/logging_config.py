"""Logging configuration."""

from __future__ import annotations

import logging

from flask import Flask

logger = logging.getLogger(__name__)


def configure_logging(app: Flask) -> None:
    """Configure process-wide log level and format from ``LOG_LEVEL``."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    app.logger.setLevel(level)

    # Statement echo stays off unless explicitly enabled elsewhere
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def log_listener_settings(app: Flask, listen_host: str, listen_port: int) -> None:
    """Report the bound address and any configured host/port it overrides.

    ``GOPOS_HOST``/``GOPOS_PORT`` end up in the config but the listener
    address is fixed by the entrypoint.
    """

    logger.info("Serving on %s:%s", listen_host, listen_port)

    configured_port = str(app.config.get("SERVICE_PORT") or "")
    if configured_port and configured_port != str(listen_port):
        logger.warning("Configured service port %s is not applied; listening on %s", configured_port, listen_port)

    configured_host = str(app.config.get("SERVICE_HOST") or "")
    if configured_host and configured_host != listen_host:
        logger.warning("Configured service host %s is not applied; listening on %s", configured_host, listen_host)
