"""
Authentication routes: login, token refresh and logout.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from ..config import settings
from ..database import get_db
from ..users.schemas import UserResponse
from .dependencies import get_current_claims
from .exceptions import InvalidRefreshTokenException, InvalidTokenException
from .schemas import (
    UserLogin, RefreshTokenRequest, LoginResponse, RefreshResponse,
    MessageResponse, TokenClaims
)
from .service import (
    login_user, issue_access_token, issue_refresh_token,
    validate_refresh_token, revoke_refresh_token, revoke_all_user_tokens
)

# Set up logging
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(tags=["Authentication"])

@router.post("/login", response_model=LoginResponse, summary="User Login")
def login_route(
    login_data: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Authenticate with email and password.

    Returns an access token valid for one hour and a refresh token valid
    for 90 days.
    """
    user = login_user(db=db, email=login_data.email, password=login_data.password)

    return LoginResponse(
        message="Login successful",
        access_token=issue_access_token(user),
        refresh_token=issue_refresh_token(db, user.id),
        expires_in=settings.access_token_expire_seconds,
        user=UserResponse.model_validate(user)
    )

@router.post("/refresh", response_model=RefreshResponse, summary="Refresh Access Token")
def refresh_token_route(
    token_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
):
    """
    Exchange a valid refresh token for a new access token.

    Unknown, revoked and expired refresh tokens all get the same 401.
    """
    try:
        user = validate_refresh_token(db, token_data.refresh_token)
    except InvalidRefreshTokenException as e:
        logger.warning(f"Token refresh rejected: {e.detail}")
        raise InvalidTokenException()

    return RefreshResponse(
        message="Token refreshed successfully",
        access_token=issue_access_token(user),
        expires_in=settings.access_token_expire_seconds
    )

@router.post("/logout", response_model=MessageResponse, status_code=status.HTTP_200_OK, summary="User Logout")
def logout_route(
    token_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
):
    """
    Revoke the given refresh token so it can no longer be used.
    """
    revoke_refresh_token(db, token_data.refresh_token)
    return {"message": "Logout successful"}

@router.post("/logout-all", response_model=MessageResponse, status_code=status.HTTP_200_OK, summary="Logout From All Devices")
def logout_all_route(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """
    Revoke every refresh token of the authenticated user.
    """
    revoke_all_user_tokens(db, claims.id)
    return {"message": "Logged out from all devices"}
