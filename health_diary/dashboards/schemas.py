"""
Dashboard Schemas.
"""
from pydantic import BaseModel

from ..auth.schemas import TokenClaims

class DashboardResponse(BaseModel):
    """
    Dashboard Response Schema

    Fields:
    - message: Welcome message for the role
    - user: Claims of the authenticated caller (id, email, type)
    """
    message: str
    user: TokenClaims
