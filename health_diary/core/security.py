"""
Core security utilities for authentication and password handling.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import jwt, JWTError
from passlib.context import CryptContext
import secrets
import logging

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds)

# 64 random bytes, hex-encoded
REFRESH_TOKEN_BYTES = 64

def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        str: Hashed password
    """
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to compare against

    Returns:
        bool: True if password matches hash
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        # bcrypt refuses some inputs outright (NUL bytes); they can never match
        logger.debug(f"Password rejected by hasher: {str(e)}")
        return False

def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode in the token
        expires_delta: Token lifetime (default: settings.access_token_expire_seconds)

    Returns:
        str: Encoded JWT token
    """
    to_encode = data.copy()

    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(seconds=settings.access_token_expire_seconds))

    to_encode.update({"iat": issued_at, "exp": expire})

    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT access token.

    Signature and expiry are both checked.

    Args:
        token: JWT token string

    Returns:
        Dict containing token payload if valid, None if invalid
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.debug(f"Access token rejected: {str(e)}")
        return None

def generate_refresh_token() -> str:
    """
    Generate an opaque refresh token string.

    Returns:
        str: 128 hex characters drawn from a CSPRNG
    """
    return secrets.token_hex(REFRESH_TOKEN_BYTES)

def as_utc(moment: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment

def is_token_expired(expiry_time: datetime) -> bool:
    """
    Check if a token has expired.

    Args:
        expiry_time: Token expiration time

    Returns:
        bool: True if the expiration time lies strictly in the past
    """
    return as_utc(expiry_time) < datetime.now(timezone.utc)

def get_token_expiry_time(days: int) -> datetime:
    """
    Get token expiration time.

    Args:
        days: Days until expiration

    Returns:
        datetime: Expiration time
    """
    return datetime.now(timezone.utc) + timedelta(days=days)
