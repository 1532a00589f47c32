# File: funapp/api/deps.py

from collections.abc import Generator
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from funapp.core.config import Settings
from funapp.core.exceptions import Unauthorized
from funapp.core.security import PasswordHasher, TokenIssuer
from funapp.schemas.user import CurrentUser
from funapp.services.auth_service import AuthService

# auto_error=False so a missing header becomes our own 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Per-request authentication state handed to protected handlers."""

    user: CurrentUser

    @property
    def user_id(self) -> str:
        return self.user.id


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    The session factory is built by create_application() and kept on
    app.state.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(
        db,
        hasher=hasher,
        issuer=issuer,
        allowed_country=settings.allowed_country,
    )


def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthContext:
    """
    Validate the bearer token and reload its user on every request.

    Missing, invalid or expired tokens and tokens whose user no longer
    exists all end in 401.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Not authenticated")

    claims = issuer.decode(credentials.credentials)
    user = auth_service.resolve_user(claims)
    return AuthContext(user=user)
