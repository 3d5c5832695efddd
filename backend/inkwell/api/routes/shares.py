from fastapi import APIRouter, Depends
from typing import List
from ...core.security import get_current_user
from ...models import User
from ...schemas import ShareCreate, ShareResult, ShareDetail, MessageResponse
from ...services import ShareService
from ..dependencies import get_share_service

router = APIRouter(prefix="/documents/{document_id}", tags=["shares"])


@router.post("/share", response_model=ShareResult)
def share_document(
    document_id: str,
    share_data: ShareCreate,
    current_user: User = Depends(get_current_user),
    share_service: ShareService = Depends(get_share_service)
):
    """Share a document with another user, or change their permission"""
    return share_service.share_document(current_user.id, document_id, share_data)


@router.get("/shares", response_model=List[ShareDetail])
def list_shares(
    document_id: str,
    current_user: User = Depends(get_current_user),
    share_service: ShareService = Depends(get_share_service)
):
    """List a document's shares (author only)"""
    return share_service.list_shares(current_user.id, document_id)


@router.delete("/shares/{user_id}", response_model=MessageResponse)
def revoke_share(
    document_id: str,
    user_id: str,
    current_user: User = Depends(get_current_user),
    share_service: ShareService = Depends(get_share_service)
):
    """Remove a user's access to a document"""
    share_service.revoke_share(current_user.id, document_id, user_id)
    return {"message": "Share removed successfully"}
