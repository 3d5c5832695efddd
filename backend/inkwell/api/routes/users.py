from fastapi import APIRouter, Depends
from typing import List, Optional
from ...core.security import get_current_user
from ...models import User
from ...schemas import UserContact, UserProfile
from ...services import UserService
from ..dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/search", response_model=List[UserContact])
def search_users(
    q: Optional[str] = None,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Find other users by name or email (for mentions and sharing)"""
    return user_service.search_users(current_user.id, q)


@router.get("/{user_id}", response_model=UserProfile)
def get_user(
    user_id: str,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Get a user's public profile"""
    return user_service.get_profile(user_id)
