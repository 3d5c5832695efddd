from typing import List
from sqlalchemy.orm import Session
from ..repositories import DocumentRepository, ShareRepository, UserRepository
from ..core.access import AccessEvaluator
from ..core.events import EventBus, DocumentSharedEvent, ShareRevokedEvent
from ..models import Document
from ..schemas import ShareCreate, ShareResult, ShareDetail, Share as ShareSchema, UserContact
from ..exceptions import NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)


class ShareService:
    """Service for the per-document share registry"""

    def __init__(self, db: Session, event_bus: EventBus):
        self.document_repo = DocumentRepository(db)
        self.share_repo = ShareRepository(db)
        self.user_repo = UserRepository(db)
        self.access = AccessEvaluator(self.share_repo)
        self.event_bus = event_bus
        self.db = db

    def _get_managed_document(self, user_id: str, document_id: str, action: str) -> Document:
        document = self.document_repo.get(document_id)
        if not document:
            raise NotFoundError("Document")
        self.access.require_manage(user_id, document, action)
        return document

    def share_document(self, user_id: str, document_id: str, share_data: ShareCreate) -> ShareResult:
        """Grant or change a user's permission on a document"""
        logger.info(f"User {user_id} sharing document {document_id} with {share_data.user_email} ({share_data.permission.value})")

        try:
            document = self._get_managed_document(user_id, document_id, "share this document")

            target_user = self.user_repo.get_by_email(share_data.user_email)
            if not target_user:
                raise NotFoundError("User")
            if target_user.id == document.author_id:
                raise ValidationError("Cannot share a document with its author")

            share = self.share_repo.upsert(
                document_id=document.id,
                user_id=target_user.id,
                permission=share_data.permission,
                shared_by=user_id
            )
            self.share_repo.commit()
            logger.info(f"Document {document_id} shared with user {target_user.id}")
        except Exception as e:
            logger.error(f"Error sharing document: {e}")
            self.share_repo.rollback()
            raise

        self.event_bus.publish(DocumentSharedEvent(
            document_id=document_id,
            shared_by=user_id,
            user_id=target_user.id,
            permission=share_data.permission.value
        ))

        return ShareResult(
            share=ShareSchema.model_validate(share),
            user=UserContact(id=target_user.id, name=target_user.full_name, email=target_user.email)
        )

    def list_shares(self, user_id: str, document_id: str) -> List[ShareDetail]:
        """List every share on a document with grantee and granter"""
        logger.debug(f"Listing shares of document {document_id} for user {user_id}")
        self._get_managed_document(user_id, document_id, "view shares")
        return [ShareDetail.model_validate(share) for share in self.share_repo.get_by_document_id(document_id)]

    def revoke_share(self, user_id: str, document_id: str, target_user_id: str) -> None:
        """Remove a user's share; removing a share that does not exist is not an error"""
        logger.info(f"User {user_id} revoking share of document {document_id} for user {target_user_id}")

        try:
            self._get_managed_document(user_id, document_id, "remove shares")
            existed = self.share_repo.delete_by_document_and_user(document_id, target_user_id)
            self.share_repo.commit()
        except Exception as e:
            logger.error(f"Error removing share: {e}")
            self.share_repo.rollback()
            raise

        self.event_bus.publish(ShareRevokedEvent(
            document_id=document_id,
            revoked_by=user_id,
            user_id=target_user_id,
            existed=existed
        ))
