# File: funapp/services/auth_service.py

"""
Authentication service.

This contains:
  - Signup (geo-gate, password hashing, user creation, token issue)
  - Resolving the user behind a verified access token
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from funapp.core.exceptions import DuplicateEmail, LocationNotAllowed, Unauthorized
from funapp.core.security import PasswordHasher, TokenIssuer
from funapp.models.user import User
from funapp.schemas.auth import SignupRequest, Token, TokenClaims
from funapp.schemas.user import CurrentUser
from funapp.services.geo_service import find_city_by_coordinates

logger = logging.getLogger(__name__)

EMAIL_CONSTRAINT_MARKERS = ("uq_users_email", "users.email")


def is_duplicate_email_error(exc: IntegrityError) -> bool:
    """True when the integrity error comes from the unique email constraint."""
    message = str(exc.orig)
    return any(marker in message for marker in EMAIL_CONSTRAINT_MARKERS)


class AuthService:
    def __init__(
        self,
        db: Session,
        *,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        allowed_country: str,
    ):
        self.db = db
        self.hasher = hasher
        self.issuer = issuer
        self.allowed_country = allowed_country

    def signup(self, payload: SignupRequest) -> Token:
        """
        Create a user whose coordinates match a city in the allowed country
        and return an access token for them.

        Raises LocationNotAllowed when no city matches and DuplicateEmail
        when the email is taken. Other store errors propagate.
        """
        email = str(payload.email)
        logger.info("Signup attempt for email: %s", email)

        hashed_password = self.hasher.hash(payload.password)

        city = find_city_by_coordinates(
            self.db,
            latitude=payload.latitude,
            longitude=payload.longitude,
            country=self.allowed_country,
        )
        if city is None:
            logger.warning(
                "Signup rejected - location (%s, %s) is not in %s",
                payload.latitude,
                payload.longitude,
                self.allowed_country,
            )
            raise LocationNotAllowed(
                f"You can not sign up from a place not in {self.allowed_country}."
            )

        user = User(
            email=email,
            name=payload.name,
            hashed_password=hashed_password,
            city=city.name,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_duplicate_email_error(e):
                logger.warning("Signup rejected - email already exists: %s", email)
                raise DuplicateEmail() from e
            raise

        self.db.refresh(user)
        logger.info("User signed up: %s (%s, %s)", user.id, email, user.city)
        return self.issuer.issue(user.id, user.email)

    def resolve_user(self, claims: TokenClaims) -> CurrentUser:
        """
        Reload the user named by the token's `sub` claim.

        A token for a user that no longer exists is rejected as Unauthorized.
        """
        user = self.db.get(User, claims.sub)
        if user is None:
            logger.warning("Token subject %s does not match any user", claims.sub)
            raise Unauthorized()

        return CurrentUser.model_validate(user)
