"""
Refresh Token Model - Server-side store of long-lived session credentials.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from ..users.models import User

class RefreshToken(Base):
    """
    Refresh Token Model - One row per issued refresh token

    Fields:
    - token: Opaque random string, primary key
    - user_id: Owner of the token
    - expires_at: Moment after which the token no longer validates
    - revoked: Set once on logout, never cleared
    - created_at: Timestamp when the token was issued
    """
    __tablename__ = "refresh_tokens"

    token = Column(String(128), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    revoked = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship(User)

    def __repr__(self):
        return f"<RefreshToken(user_id={self.user_id}, expires_at='{self.expires_at}', revoked={self.revoked})>"
