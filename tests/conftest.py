# File: tests/conftest.py

"""Shared fixtures: an app on in-memory SQLite with the default cities seeded."""

import pytest
from fastapi.testclient import TestClient

from funapp.core.config import Settings
from funapp.core.security import PasswordHasher, TokenIssuer
from funapp.db.init_db import seed_initial_data
from funapp.main import create_application

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"

CAIRO = {"name": "Cairo", "country": "Egypt", "latitude": 30.0444, "longitude": 31.2357}
NEW_YORK = {"latitude": 40.7128, "longitude": -74.006}


@pytest.fixture
def settings():
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite://",
        allowed_country="Egypt",
        access_token_expire_minutes=15,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    application = create_application(settings)
    db = application.state.session_factory()
    try:
        seed_initial_data(db)
    finally:
        db.close()
    yield application
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher():
    return PasswordHasher()


@pytest.fixture
def issuer():
    return TokenIssuer(TEST_SECRET, expires_minutes=15)


@pytest.fixture
def signup_payload():
    return {
        "email": "a@x.com",
        "name": "A",
        "password": "p",
        "latitude": CAIRO["latitude"],
        "longitude": CAIRO["longitude"],
    }
