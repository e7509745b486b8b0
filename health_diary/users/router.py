"""
User Router - Registration, listing and the caller's own profile.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ResourceNotFoundException
from ..core.pagination import PageParams, PageResponse, paginate
from ..auth.dependencies import get_current_claims
from ..auth.schemas import TokenClaims
from .schemas import UserCreate, UserResponse, UserCreatedResponse
from .service import create_user, list_users, get_user_by_id

router = APIRouter(tags=["Users"])

@router.post("/users", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED, summary="Register User")
def create_user_route(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new doctor or patient.
    """
    user = create_user(
        db=db,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        role=user_data.type
    )
    return UserCreatedResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user)
    )

@router.get("/users", response_model=PageResponse[UserResponse], summary="List Users")
def list_users_route(
    page_params: PageParams = Depends(),
    db: Session = Depends(get_db)
):
    """
    Get a paginated list of users, newest first.
    """
    users, total = list_users(db, page_params.page, page_params.limit)
    return paginate(users, page_params, total, UserResponse)

@router.get("/profile", response_model=UserResponse, summary="Get Current User Profile")
def get_profile_route(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """
    Get the profile of the authenticated user.
    """
    user = get_user_by_id(db, claims.id)
    if not user:
        raise ResourceNotFoundException("User not found")
    return UserResponse.model_validate(user)
