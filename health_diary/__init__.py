"""
Health Diary API.

REST backend for a health-tracking application:
- User registration for doctors and patients
- Credential login with JWT access tokens and stored refresh tokens
- Refresh token revocation (single device and all devices)
- Role-restricted dashboards
"""
__version__ = "1.0.0"
