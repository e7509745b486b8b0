"""
User Model - Stores the accounts of doctors and patients.
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.sql import func
import enum
from ..database import Base

class UserRole(str, enum.Enum):
    """
    Enumeration for user roles in the health diary system.

    Roles:
    - DOCTOR: Medical practitioners following their patients' diaries
    - PATIENT: Patients recording their health data
    """
    DOCTOR = "doctor"
    PATIENT = "patient"

class User(Base):
    """
    User Model - Stores all user information in the system

    Fields:
    - id: Primary key for user identification
    - name: User's display name
    - email: Unique email address for login
    - password_hash: Securely hashed password (never store raw passwords)
    - role: User role (doctor, patient)
    - created_at: Timestamp when user was created
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(UserRole, values_callable=lambda roles: [role.value for role in roles]), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
