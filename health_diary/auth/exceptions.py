"""
Authentication-specific exceptions.
"""
from fastapi import status

from ..exceptions import AppException

class AuthException(AppException):
    """Base class for authentication exceptions."""
    def __init__(self, status_code: int, detail: str, headers=None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

class InvalidCredentialsException(AuthException):
    """Exception raised when credentials are invalid."""
    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class EmailAlreadyExistsException(AuthException):
    """Exception raised when email already exists."""
    def __init__(self, detail: str = "Email already registered"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class UnauthorizedException(AuthException):
    """Exception raised when the access token is missing, invalid or expired."""
    def __init__(self, detail: str = "Invalid or missing token"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )

class ForbiddenException(AuthException):
    """Exception raised when user doesn't have required role."""
    def __init__(self, detail: str = "Access denied. You do not have permission to access this resource."):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

class InvalidTokenException(AuthException):
    """Exception raised when a refresh token cannot be exchanged."""
    def __init__(self, detail: str = "Invalid or expired refresh token"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class InvalidRefreshTokenException(InvalidTokenException):
    """Base class for the reasons a refresh token fails validation."""

class RefreshTokenNotFoundException(InvalidRefreshTokenException):
    """Exception raised when no refresh token matches."""
    def __init__(self, detail: str = "Refresh token not found"):
        super().__init__(detail=detail)

class RefreshTokenRevokedException(InvalidRefreshTokenException):
    """Exception raised when the refresh token was revoked."""
    def __init__(self, detail: str = "Refresh token has been revoked"):
        super().__init__(detail=detail)

class RefreshTokenExpiredException(InvalidRefreshTokenException):
    """Exception raised when the refresh token is past its expiry."""
    def __init__(self, detail: str = "Refresh token has expired"):
        super().__init__(detail=detail)
