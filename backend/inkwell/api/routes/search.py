from fastapi import APIRouter, Depends
from typing import List, Optional
from ...core.security import get_current_user
from ...models import User
from ...schemas import SearchResult
from ...services import SearchService
from ..dependencies import get_search_service

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=List[SearchResult])
def search_documents(
    q: Optional[str] = None,
    current_user: User = Depends(get_current_user),
    search_service: SearchService = Depends(get_search_service)
):
    """Search the documents the current user can view"""
    return search_service.search(current_user.id, q)
