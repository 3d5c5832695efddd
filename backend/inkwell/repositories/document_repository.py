from typing import List, Optional
from sqlalchemy import or_, select
from sqlalchemy.orm import Session, joinedload
from ..models.document import Document
from ..models.share import DocumentShare
from ..utils import get_current_timestamp
from .base import BaseRepository, escape_like


class DocumentRepository(BaseRepository[Document]):
    """Repository for Document model"""
    
    def __init__(self, db: Session):
        super().__init__(Document, db)
    
    def get_with_author(self, document_id: str) -> Optional[Document]:
        """Get a document with its author loaded"""
        return self.db.query(Document).options(joinedload(Document.author)).filter(
            Document.id == document_id
        ).first()
    
    def get_accessible_by_user(self, user_id: str) -> List[Document]:
        """Get documents the user authored or has been shared, newest first"""
        shared_ids = select(DocumentShare.document_id).where(DocumentShare.user_id == user_id)
        return self.db.query(Document).options(joinedload(Document.author)).filter(
            or_(
                Document.author_id == user_id,
                Document.id.in_(shared_ids),
            )
        ).order_by(Document.updated_at.desc()).all()
    
    def search_visible(self, user_id: str, query: str, limit: int) -> List[Document]:
        """Get documents visible to the user whose title or content contains the query"""
        pattern = f"%{escape_like(query)}%"
        shared_ids = select(DocumentShare.document_id).where(DocumentShare.user_id == user_id)
        return self.db.query(Document).options(joinedload(Document.author)).filter(
            or_(
                Document.title.ilike(pattern, escape="\\"),
                Document.content.ilike(pattern, escape="\\"),
            ),
            or_(
                Document.is_public.is_(True),
                Document.author_id == user_id,
                Document.id.in_(shared_ids),
            ),
        ).order_by(Document.updated_at.desc()).limit(limit).all()
    
    def bump_version(self, document: Document) -> Document:
        """Increment the version counter in SQL and touch updated_at"""
        document.version = Document.version + 1
        document.updated_at = get_current_timestamp()
        self.db.flush()
        self.db.refresh(document, attribute_names=["version"])
        return document
