"""
FastAPI dependencies for authentication and authorization.

Authentication verifies the bearer access token and attaches its claims to the
request; authorization checks the claimed role against a route's allowed set.
"""
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from typing import Optional
import logging

from ..core.security import decode_access_token
from ..users.models import UserRole
from .exceptions import UnauthorizedException, ForbiddenException
from .schemas import TokenClaims

logger = logging.getLogger(__name__)

# Bearer scheme; missing headers are reported by get_current_claims itself
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> TokenClaims:
    """
    Verify the access token and return its claims.

    Args:
        request: Incoming request, receives the claims on request.state
        credentials: Bearer credentials from the Authorization header

    Returns:
        TokenClaims: Verified identity of the caller

    Raises:
        UnauthorizedException: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise UnauthorizedException()

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException()

    try:
        claims = TokenClaims.model_validate(payload)
    except ValidationError:
        logger.warning("Access token with malformed claims rejected")
        raise UnauthorizedException()

    request.state.claims = claims
    return claims

def require_roles(*allowed_roles: UserRole):
    """
    Dependency factory to require specific roles.

    Args:
        allowed_roles: Roles that are allowed access

    Returns:
        Function that checks if the caller has one of the roles
    """
    for role in allowed_roles:
        if not isinstance(role, UserRole):
            raise TypeError(f"Expected UserRole, got {role!r}")
    allowed = frozenset(allowed_roles)

    def role_checker(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
        if claims.role not in allowed:
            logger.warning(f"User {claims.id} with role {claims.role.value} denied access")
            raise ForbiddenException()
        return claims
    return role_checker

# Convenience dependencies for specific roles
require_doctor = require_roles(UserRole.DOCTOR)
require_patient = require_roles(UserRole.PATIENT)
