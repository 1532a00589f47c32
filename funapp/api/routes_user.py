# File: funapp/api/routes_user.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from funapp.api.deps import AuthContext, get_auth_context, get_auth_service, get_db
from funapp.schemas.auth import SignupRequest, Token
from funapp.schemas.user import UserProfile
from funapp.services import user_service
from funapp.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up from an allowed city",
    responses={
        403: {"description": "Forbidden. The location is not in the allowed country."},
        400: {"description": "Bad Request. Email address is already in use."},
    },
)
def signup(
    payload: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Create a user if the coordinates match a known city and return an
    access token.
    """
    return auth_service.signup(payload)


@router.get(
    "/{user_id}",
    response_model=UserProfile,
    summary="Public profile of a user",
    responses={404: {"description": "User not found"}},
)
def user_info(
    user_id: str,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    logger.debug("Profile %s requested by %s", user_id, auth.user_id)
    return user_service.get_user(db, user_id)
