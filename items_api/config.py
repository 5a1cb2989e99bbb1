"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL, make_url

DEFAULT_SERVICE_PORT = "3000"
DEFAULT_DB_PORT = 5432


def _normalize_driver(database_url: str) -> str:
    url = make_url(database_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername="postgresql+psycopg2")
    return url.render_as_string(hide_password=False)


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DB_CONN_URL (explicit, overrides the individual components)
      2) Build from DB_USER / DB_PASSWORD / DB_HOST / DB_PORT / DB_NAME
    """

    explicit = os.getenv("DB_CONN_URL")
    if explicit:
        return _normalize_driver(explicit)

    port_raw = os.getenv("DB_PORT")
    try:
        port = int(port_raw) if port_raw else DEFAULT_DB_PORT
    except ValueError:
        port = DEFAULT_DB_PORT

    url = URL.create(
        drivername="postgresql+psycopg2",
        username=os.getenv("DB_USER") or None,
        password=os.getenv("DB_PASSWORD") or None,
        host=os.getenv("DB_HOST") or "localhost",
        port=port,
        database=os.getenv("DB_NAME") or None,
        query={"sslmode": "disable"},
    )
    return url.render_as_string(hide_password=False)


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    DATABASE_URL: str = resolve_database_url()

    # Parsed for parity with the deployment environment; the listener
    # itself is bound in main.py.
    SERVICE_HOST: str = os.getenv("GOPOS_HOST", "")
    SERVICE_PORT: str = os.getenv("GOPOS_PORT") or DEFAULT_SERVICE_PORT

    # Errors raised after a view (e.g. the request commit) still get a JSON body
    PROPAGATE_EXCEPTIONS: bool = False

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
