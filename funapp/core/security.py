# File: funapp/core/security.py

"""
Security helpers for the Fun App API.

Two small building blocks live here:
  - PasswordHasher: Argon2id hashing via argon2-cffi
  - TokenIssuer: HS256 access tokens via PyJWT

Both are constructed once by the application factory and handed to the
request dependencies, so nothing here reads global configuration.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError
from jwt import InvalidTokenError

from funapp.core.exceptions import Unauthorized
from funapp.schemas.auth import Token, TokenClaims

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted, memory-hard password hashing (Argon2id, argon2-cffi default cost)."""

    def __init__(self, hasher: Optional[Argon2Hasher] = None):
        self._hasher = hasher or Argon2Hasher()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, hashed: str, password: str) -> bool:
        """
        Check a plain-text password against a stored hash.

        Returns False rather than raising when the stored value is not a
        valid Argon2 hash (e.g. a seeded placeholder).
        """
        try:
            return self._hasher.verify(hashed, password)
        except (VerificationError, InvalidHashError):
            return False


class TokenIssuer:
    """Creates and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 15):
        if not secret:
            raise ValueError("TokenIssuer requires a non-empty secret")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, user_id: str, email: str) -> Token:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        return Token(access_token=token)

    def decode(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the identity claims.

        Any failure (bad signature, expired, malformed, missing claims) is
        reported as Unauthorized.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except InvalidTokenError as e:
            logger.info("Rejected access token: %s", e)
            raise Unauthorized("Invalid or expired token") from e

        try:
            return TokenClaims(sub=payload["sub"], email=payload.get("email", ""))
        except ValueError as e:
            raise Unauthorized("Invalid token claims") from e
