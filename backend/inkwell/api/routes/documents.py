from fastapi import APIRouter, Depends, status
from typing import List, Optional
from ...core.security import get_current_user, get_optional_user
from ...models import User
from ...schemas import (
    Document as DocumentSchema,
    DocumentCreate,
    DocumentUpdate,
    DocumentVersion as DocumentVersionSchema,
    MessageResponse,
)
from ...services import DocumentService, VersionService
from ..dependencies import get_document_service, get_version_service

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=List[DocumentSchema])
def list_documents(
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """List documents the current user owns or that were shared with them"""
    return document_service.list_documents(current_user.id)


@router.post("", response_model=DocumentSchema, status_code=status.HTTP_201_CREATED, response_model_exclude_none=True)
def create_document(
    document_data: DocumentCreate,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Create a new document"""
    return document_service.create_document(current_user.id, document_data)


@router.get("/{document_id}", response_model=DocumentSchema, response_model_exclude_none=True)
def get_document(
    document_id: str,
    current_user: Optional[User] = Depends(get_optional_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Get a document; public documents are readable without a token"""
    user_id = current_user.id if current_user else None
    return document_service.get_document(user_id, document_id)


@router.put("/{document_id}", response_model=DocumentSchema, response_model_exclude_none=True)
def update_document(
    document_id: str,
    document_data: DocumentUpdate,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Update a document"""
    return document_service.update_document(current_user.id, document_id, document_data)


@router.delete("/{document_id}", response_model=MessageResponse)
def delete_document(
    document_id: str,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Delete a document (cascades to shares and versions)"""
    document_service.delete_document(current_user.id, document_id)
    return {"message": "Document deleted successfully"}


@router.get("/{document_id}/versions", response_model=List[DocumentVersionSchema])
def list_versions(
    document_id: str,
    current_user: User = Depends(get_current_user),
    version_service: VersionService = Depends(get_version_service)
):
    """List a document's versions, newest first"""
    return version_service.list_versions(current_user.id, document_id)
