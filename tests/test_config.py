# File: tests/test_config.py

import logging

import pytest

from funapp.core.config import ConfigurationError, Settings
from funapp.core.logging_config import HANDLER_NAME, configure_logging
from funapp.db.init_db import DEFAULT_CITIES, seed_initial_data
from funapp.main import create_application


def test_missing_secret_fails_fast():
    with pytest.raises(ConfigurationError):
        create_application(Settings(jwt_secret=None, database_url="sqlite://"))


def test_require_jwt_secret_returns_value():
    assert Settings(jwt_secret="s3cret").require_jwt_secret() == "s3cret"


def test_cors_origins_from_comma_separated_string():
    settings = Settings(backend_cors_origins="http://a.test, http://b.test,")

    assert settings.backend_cors_origins == ["http://a.test", "http://b.test"]


def test_seed_is_idempotent(db):
    # the app fixture already seeded once
    assert seed_initial_data(db) == 0
    assert seed_initial_data(db, [("Port Said", "Egypt", 31.2653, 32.3019)]) == 1
    assert seed_initial_data(db, DEFAULT_CITIES) == 0


def test_configure_logging_installs_one_handler():
    configure_logging("INFO")
    configure_logging("DEBUG")

    named = [h for h in logging.getLogger().handlers if h.name == HANDLER_NAME]
    assert len(named) == 1
    assert logging.getLogger().level == logging.DEBUG

    configure_logging("WARNING")
