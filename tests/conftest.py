"""
Shared fixtures: an in-memory SQLite database staged with sample data.

Staged rows:
    moviedata:        1 Jaws, 2 The Ten Commandments, 3 Titanic
    movieratings:     (movie 1, average 4, total 3)
    usermovieratings: id 1 (user 1, movie 1, 10), id 2 (user 2, movie 1, 1),
                      id 3 (user 3, movie 1, 1)
"""

import pytest
from fastapi.testclient import TestClient

from movieratings.api.config import Settings
from movieratings.api.main import create_app
from movieratings.api.responses import JSONAPI_MEDIA_TYPE
from movieratings.database.connection import DatabaseManager
from movieratings.database.init_db import init_database, stage_database


@pytest.fixture
def db_manager():
    """Create an in-memory database with staged sample data."""
    manager = DatabaseManager("sqlite://")
    init_database(manager)
    stage_database(manager)
    yield manager
    manager.close()


@pytest.fixture
def session(db_manager):
    """Create a new database session for testing."""
    session = db_manager.get_session()
    yield session
    session.close()


@pytest.fixture
def app(db_manager):
    """Application bound to the in-memory database."""
    return create_app(Settings(database_url="sqlite://"), db_manager=db_manager)


@pytest.fixture
def client(app):
    """Test client sending the JSON:API Content-Type on every request."""
    with TestClient(app, headers={"Content-Type": JSONAPI_MEDIA_TYPE}) as test_client:
        yield test_client


@pytest.fixture
def bare_client(app):
    """Test client that sends no Content-Type header."""
    with TestClient(app) as test_client:
        yield test_client
