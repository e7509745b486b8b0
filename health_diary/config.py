"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        environment: Deployment environment (development, production, test)
        database_url: SQLAlchemy connection string
        secret_key: Secret key for JWT token encoding
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_seconds: Access token lifetime in seconds
        refresh_token_expire_days: Refresh token lifetime in days
        bcrypt_rounds: Work factor for password hashing

        # HTTP settings
        cors_origins: Origins allowed by the CORS middleware
        host: Interface the server binds to
        port: Port the server listens on

        # Maintenance
        sweep_expired_tokens_on_startup: Delete expired refresh tokens at startup
    """
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite:///./health_diary.db"

    # JWT settings
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_seconds: int = 3600
    refresh_token_expire_days: int = 90

    # Password hashing
    bcrypt_rounds: int = 12

    # HTTP settings
    cors_origins: List[str] = ["http://localhost:3000"]
    host: str = "0.0.0.0"
    port: int = 3000

    # Maintenance
    sweep_expired_tokens_on_startup: bool = True

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

# Create settings instance
settings = Settings()
