# File: funapp/core/exceptions.py

"""
Domain errors with an HTTP status and a machine-readable code.

Services raise these; the handlers registered in funapp.main turn them into
{"detail": ..., "code": ...} JSON responses. Anything that is not an AppError
is treated as unexpected and answered with an opaque 500.
"""

from typing import Dict, Optional


class AppError(Exception):
    status_code: int = 500
    code: str = "UNEXPECTED_ERROR"
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class LocationNotAllowed(AppError):
    """403 - signup coordinates do not match a city in the allowed country."""

    status_code = 403
    code = "LOCATION_NOT_ALLOWED"
    message = "You can not sign up from this location."


class DuplicateEmail(AppError):
    """400 - the email address already belongs to a user."""

    status_code = 400
    code = "DUPLICATE_EMAIL"
    message = "Email address is already in use."


class NotFound(AppError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Not found"


class Unauthorized(AppError):
    """401 - missing, invalid or expired token, or the token's user is gone."""

    status_code = 401
    code = "UNAUTHORIZED"
    message = "Could not validate credentials"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}
