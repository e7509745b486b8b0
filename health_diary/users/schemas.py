"""
User Schemas - Pydantic models for user data validation and serialization.
"""
from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator
from datetime import datetime

from ..core.security import as_utc
from .models import UserRole

class UserCreate(BaseModel):
    """
    User Creation Schema - Used when registering a new user

    Fields:
    - name: User's display name (at least 3 characters)
    - email: User's email address
    - password: Plain text password (will be hashed before storage)
    - type: Role of the account, doctor or patient
    """
    name: str = Field(..., min_length=3, description="User's display name")
    email: EmailStr
    password: str = Field(..., min_length=6, description="Plain text password")
    type: UserRole = Field(..., description="Account type: doctor or patient")

    @field_validator("password")
    @classmethod
    def password_without_nul(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("Password must not contain NUL characters")
        return value

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "name": "Maria Souza",
                "email": "maria@example.com",
                "password": "secret123",
                "type": "patient"
            }
        }

class UserResponse(BaseModel):
    """
    User Response Schema - Public projection of a user, password hash excluded

    Fields:
    - id: User ID
    - name: Display name
    - email: Email address
    - type: User role (doctor, patient)
    - createdAt: When the account was created
    """
    id: int
    name: str
    email: EmailStr
    type: UserRole = Field(validation_alias=AliasChoices("type", "role"))
    created_at: datetime = Field(alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
        populate_by_name = True

class UserCreatedResponse(BaseModel):
    """Response returned after a successful registration."""
    message: str
    user: UserResponse
