"""
Authentication service layer: credential checks and the refresh-token lifecycle.

Access tokens are signed and stateless. Refresh tokens are opaque strings
stored in the refresh_tokens table; each one is either active, revoked, or
expired. Revocation is a one-way flag flip and expiry is detected lazily when
a token is validated, so expired rows that the sweep has not yet deleted are
still rejected.
"""
import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from ..config import settings
from ..core.security import (
    hash_password,
    verify_password,
    create_access_token,
    generate_refresh_token,
    get_token_expiry_time,
    is_token_expired
)
from ..users.models import User
from ..users.service import get_user_by_email
from .models import RefreshToken
from .exceptions import (
    InvalidCredentialsException,
    RefreshTokenNotFoundException,
    RefreshTokenRevokedException,
    RefreshTokenExpiredException
)

# Set up logging
logger = logging.getLogger(__name__)

# Unknown emails are checked against this so both login failures cost one bcrypt verify
_DUMMY_PASSWORD_HASH = hash_password(generate_refresh_token()[:32])

def login_user(db: Session, email: str, password: str) -> User:
    """
    Authenticate a user by email and password.

    Unknown emails and wrong passwords raise the same exception.

    Args:
        db: Database session
        email: User's email address
        password: User's password

    Returns:
        User: The authenticated user

    Raises:
        InvalidCredentialsException: If credentials are invalid
    """
    user = get_user_by_email(db, email)
    password_hash = user.password_hash if user else _DUMMY_PASSWORD_HASH

    if not verify_password(password, password_hash) or not user:
        logger.warning(f"Login failed: Invalid credentials for {email}")
        raise InvalidCredentialsException()

    logger.info(f"Login successful: User {user.id} ({email})")
    return user

def issue_access_token(user: User) -> str:
    """
    Sign an access token for the user.

    Args:
        user: Authenticated user

    Returns:
        str: JWT embedding id, email and role
    """
    token_data = {
        "id": user.id,
        "email": user.email,
        "type": user.role.value
    }
    return create_access_token(token_data)

def issue_refresh_token(db: Session, user_id: int) -> str:
    """
    Create and persist a new refresh token.

    Args:
        db: Database session
        user_id: Owner of the token

    Returns:
        str: The refresh token string
    """
    refresh_token = RefreshToken(
        token=generate_refresh_token(),
        user_id=user_id,
        expires_at=get_token_expiry_time(days=settings.refresh_token_expire_days),
        revoked=False
    )
    db.add(refresh_token)
    db.commit()

    logger.info(f"Refresh token issued for user {user_id}")
    return refresh_token.token

def validate_refresh_token(db: Session, token: str) -> User:
    """
    Check that a refresh token is usable and return its owner.

    Args:
        db: Database session
        token: Refresh token string

    Returns:
        User: Owner of the token

    Raises:
        RefreshTokenNotFoundException: If no such token exists
        RefreshTokenRevokedException: If the token was revoked
        RefreshTokenExpiredException: If the token is past its expiry
    """
    refresh_token = db.query(RefreshToken).filter(RefreshToken.token == token).first()

    if not refresh_token:
        raise RefreshTokenNotFoundException()

    if refresh_token.revoked:
        logger.warning(f"Revoked refresh token presented for user {refresh_token.user_id}")
        raise RefreshTokenRevokedException()

    if is_token_expired(refresh_token.expires_at):
        raise RefreshTokenExpiredException()

    return refresh_token.user

def revoke_refresh_token(db: Session, token: str) -> int:
    """
    Revoke a single refresh token. Unknown tokens are ignored.

    Args:
        db: Database session
        token: Refresh token string

    Returns:
        int: Number of tokens revoked (0 or 1)
    """
    revoked = (
        db.query(RefreshToken)
        .filter(RefreshToken.token == token)
        .update({RefreshToken.revoked: True}, synchronize_session=False)
    )
    db.commit()
    return revoked

def revoke_all_user_tokens(db: Session, user_id: int) -> int:
    """
    Revoke every active refresh token of a user.

    Args:
        db: Database session
        user_id: Owner of the tokens

    Returns:
        int: Number of tokens revoked
    """
    revoked = (
        db.query(RefreshToken)
        .filter(RefreshToken.user_id == user_id, RefreshToken.revoked.is_(False))
        .update({RefreshToken.revoked: True}, synchronize_session=False)
    )
    db.commit()

    logger.info(f"Revoked {revoked} refresh token(s) for user {user_id}")
    return revoked

def sweep_expired_tokens(db: Session) -> int:
    """
    Delete refresh tokens whose expiry lies in the past.

    Args:
        db: Database session

    Returns:
        int: Number of rows deleted
    """
    deleted = (
        db.query(RefreshToken)
        .filter(RefreshToken.expires_at < datetime.now(timezone.utc))
        .delete(synchronize_session=False)
    )
    db.commit()

    logger.info(f"Swept {deleted} expired refresh token(s)")
    return deleted
