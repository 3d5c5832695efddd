from typing import List, Optional
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, joinedload
from ..models.share import DocumentShare, Permission
from ..utils import generate_id, get_current_timestamp
from .base import BaseRepository
import logging

logger = logging.getLogger(__name__)


class ShareRepository(BaseRepository[DocumentShare]):
    """Repository for DocumentShare model"""
    
    def __init__(self, db: Session):
        super().__init__(DocumentShare, db)
    
    def get_by_document_and_user(self, document_id: str, user_id: str) -> Optional[DocumentShare]:
        """Get the share granted to a user on a document"""
        return self.db.query(DocumentShare).filter(
            DocumentShare.document_id == document_id,
            DocumentShare.user_id == user_id
        ).first()
    
    def get_by_document_id(self, document_id: str) -> List[DocumentShare]:
        """Get all shares for a document with grantee and granter loaded"""
        return self.db.query(DocumentShare).options(
            joinedload(DocumentShare.user),
            joinedload(DocumentShare.shared_by_user),
        ).filter(
            DocumentShare.document_id == document_id
        ).order_by(DocumentShare.created_at).all()
    
    def upsert(self, document_id: str, user_id: str, permission: Permission, shared_by: str) -> DocumentShare:
        """Create the share or overwrite the existing one for (document, user)

        Runs as a single INSERT ... ON CONFLICT DO UPDATE, so concurrent
        shares to the same user end with one row holding the last permission.
        """
        dialect = self.db.get_bind().dialect.name
        insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
        stmt = insert(DocumentShare).values(
            id=generate_id(),
            document_id=document_id,
            user_id=user_id,
            permission=permission,
            shared_by=shared_by,
            created_at=get_current_timestamp()
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["document_id", "user_id"],
            set_={
                "permission": stmt.excluded.permission,
                "shared_by": stmt.excluded.shared_by,
            }
        )
        self.db.execute(stmt)
        logger.debug(f"Upserted share of document {document_id} for user {user_id} ({permission.value})")

        # Reload so an instance already in the session reflects the new permission
        return self.db.query(DocumentShare).filter(
            DocumentShare.document_id == document_id,
            DocumentShare.user_id == user_id
        ).populate_existing().one()
    
    def delete_by_document_and_user(self, document_id: str, user_id: str) -> bool:
        """Delete the share for (document, user) if present"""
        deleted = self.db.query(DocumentShare).filter(
            DocumentShare.document_id == document_id,
            DocumentShare.user_id == user_id
        ).delete(synchronize_session="fetch")
        self.db.flush()
        return deleted > 0
