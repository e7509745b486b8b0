"""Authentication: login, refresh token lifecycle and access control."""
