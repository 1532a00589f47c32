# File: funapp/schemas/user.py

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """Public projection returned by GET /user/{id}."""
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str
    city: str


class CurrentUser(BaseModel):
    """The authenticated user as seen by handlers; never carries the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    city: str
    created_at: datetime
    updated_at: datetime
