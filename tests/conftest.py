"""Shared pytest fixtures: a file-backed SQLite database per test."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from items_api import create_app
from items_api.models import Base


@pytest.fixture
def engine(tmp_path):
    """Engine with the items table created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'items.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def bare_engine(tmp_path):
    """Reachable engine without any tables."""
    engine = create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    app = create_app(engine=engine)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def create_item(client):
    """POST an item and return the decoded body."""

    def _create(name="Widget", price=100):
        response = client.post("/items", json={"name": name, "price": price})
        assert response.status_code == 201
        return response.get_json()

    return _create
