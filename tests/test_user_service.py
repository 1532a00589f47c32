# File: tests/test_user_service.py

import pytest

from funapp.core.exceptions import NotFound
from funapp.models.user import User
from funapp.services.user_service import get_user


def test_get_user_returns_public_fields_only(db):
    db.add(
        User(
            id="1234",
            name="Test",
            city="Cairo",
            email="test@example.com",
            hashed_password="password",
        )
    )
    db.commit()

    profile = get_user(db, "1234")

    assert profile.model_dump() == {
        "name": "Test",
        "email": "test@example.com",
        "city": "Cairo",
    }


def test_get_user_with_unknown_id_raises_not_found(db):
    with pytest.raises(NotFound) as excinfo:
        get_user(db, "invalid_id")

    assert excinfo.value.message == "User not found"
    assert excinfo.value.status_code == 404
