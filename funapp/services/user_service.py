# File: funapp/services/user_service.py

from sqlalchemy import select
from sqlalchemy.orm import Session

from funapp.core.exceptions import NotFound
from funapp.models.user import User
from funapp.schemas.user import UserProfile


def get_user(db: Session, user_id: str) -> UserProfile:
    """Public profile (name, email, city) of a user, or NotFound."""
    row = db.execute(
        select(User.name, User.email, User.city).where(User.id == user_id)
    ).first()
    if row is None:
        raise NotFound("User not found")

    return UserProfile(name=row.name, email=row.email, city=row.city)
