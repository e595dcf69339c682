"""
User profile endpoints.

Sign-in is delegated to the external auth provider; these routes only keep
the recruiter profile captured during onboarding (company, role).
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_storage
from app.core.errors import DuplicateUsernameError
from app.db.repository import Storage
from app.schemas import UserCreate, UserResponse

router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, storage: Storage = Depends(get_storage)):
    """
    Create a user profile.

    The password is optional (OAuth accounts have none) and is stored
    hashed; it is never returned.
    """
    try:
        return storage.create_user(user_data)
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(username: str, storage: Storage = Depends(get_storage)):
    user = storage.get_user_by_username(username)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, storage: Storage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user
