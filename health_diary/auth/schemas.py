"""
Authentication Schemas - Request bodies, responses and access token claims.
"""
from pydantic import BaseModel, EmailStr, Field

from ..users.models import UserRole
from ..users.schemas import UserResponse

class UserLogin(BaseModel):
    """
    User Login Schema - Used for authentication

    Fields:
    - email: User's email address
    - password: User's plain text password
    """
    email: EmailStr
    password: str = Field(..., min_length=6)

class RefreshTokenRequest(BaseModel):
    """
    Refresh Token Schema - Body of /refresh and /logout

    Fields:
    - refreshToken: Refresh token received at login
    """
    refresh_token: str = Field(..., alias="refreshToken", min_length=1)

    class Config:
        populate_by_name = True

class LoginResponse(BaseModel):
    """
    Login Response Schema - Returned after successful authentication

    Fields:
    - message: Human-readable result
    - accessToken: Signed JWT access token
    - refreshToken: Opaque refresh token
    - expiresIn: Access token lifetime in seconds
    - user: User information
    """
    message: str
    access_token: str = Field(alias="accessToken")
    refresh_token: str = Field(alias="refreshToken")
    expires_in: int = Field(alias="expiresIn")
    user: UserResponse

    class Config:
        populate_by_name = True

class RefreshResponse(BaseModel):
    """Response of /refresh: a new access token."""
    message: str
    access_token: str = Field(alias="accessToken")
    expires_in: int = Field(alias="expiresIn")

    class Config:
        populate_by_name = True

class MessageResponse(BaseModel):
    message: str

class TokenClaims(BaseModel):
    """
    Claims carried by an access token.

    Fields:
    - id: User ID
    - email: User's email address
    - type: User role
    """
    id: int
    email: str
    type: UserRole

    @property
    def role(self) -> UserRole:
        return self.type
