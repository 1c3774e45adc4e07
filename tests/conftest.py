# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures: settings pointing at a throwaway SQLite file, a database
# and repository on top of it, and TestClients with and without sample data.
# Entering the TestClient context runs the application lifespan, which is
# where the store is opened and seeded.
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from aws_demo_api.app.core.config import Settings
from aws_demo_api.app.core.db import Database
from aws_demo_api.app.main import create_app
from aws_demo_api.app.services.user_repository import UserRepository


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
def settings(db_url):
    """Settings for an app that seeds sample data on startup."""
    return Settings(database_url=db_url, seed_sample_data=True, log_level="WARNING")


@pytest.fixture
def empty_settings(db_url):
    """Settings for an app that starts with an empty store."""
    return Settings(database_url=db_url, seed_sample_data=False, log_level="WARNING")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(empty_settings):
    with TestClient(create_app(empty_settings)) as test_client:
        yield test_client


@pytest.fixture
def database(db_url):
    db = Database(db_url)
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def repository(database):
    return UserRepository(database)
