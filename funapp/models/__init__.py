from funapp.models.base import Base
from funapp.models.city import City
from funapp.models.user import User

__all__ = ["Base", "City", "User"]
