"""
User Service - Business logic for the user directory.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.pagination import MAX_PAGE, MAX_PAGE_SIZE
from ..core.security import hash_password
from ..auth.exceptions import EmailAlreadyExistsException
from .models import User, UserRole

# Set up logging
logger = logging.getLogger(__name__)

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """
    Get a user by ID.

    Args:
        db: Database session
        user_id: ID of the user

    Returns:
        User if found, None otherwise
    """
    return db.query(User).filter(User.id == user_id).first()

def create_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: UserRole
) -> User:
    """
    Register a new user.

    Args:
        db: Database session
        name: User's display name
        email: User's email address
        password: User's plain text password
        role: Doctor or patient

    Returns:
        User: The persisted user

    Raises:
        EmailAlreadyExistsException: If email already exists
    """
    logger.info(f"Registration attempt for email: {email}")

    # Check if email already exists
    if get_user_by_email(db, email):
        logger.warning(f"Registration failed: Email {email} already registered")
        raise EmailAlreadyExistsException()

    user_obj = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        created_at=datetime.now(timezone.utc)
    )

    # A concurrent registration can still win the race to the unique index
    db.add(user_obj)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Registration failed: Email {email} registered concurrently")
        raise EmailAlreadyExistsException()
    db.refresh(user_obj)

    logger.info(f"User account created: {user_obj.id} ({role.value})")
    return user_obj

def list_users(db: Session, page: int, limit: int) -> Tuple[List[User], int]:
    """
    Get one page of users, newest first.

    Args:
        db: Database session
        page: Page number (1-indexed)
        limit: Items per page (at most 100)

    Returns:
        Tuple of (users on the page, total number of users)

    Raises:
        ValueError: If page or limit is out of range
    """
    if not 1 <= page <= MAX_PAGE:
        raise ValueError(f"page must be between 1 and {MAX_PAGE}")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValueError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

    query = db.query(User)
    total = query.count()
    users = (
        query.order_by(User.created_at.desc(), User.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return users, total
