from typing import List
from sqlalchemy.orm import Session, joinedload
from ..models.version import DocumentVersion
from .base import BaseRepository


class VersionRepository(BaseRepository[DocumentVersion]):
    """Repository for DocumentVersion model (append-only)"""
    
    def __init__(self, db: Session):
        super().__init__(DocumentVersion, db)
    
    def get_by_document_id(self, document_id: str) -> List[DocumentVersion]:
        """Get all versions of a document, newest first"""
        return self.db.query(DocumentVersion).options(
            joinedload(DocumentVersion.created_by_user)
        ).filter(
            DocumentVersion.document_id == document_id
        ).order_by(DocumentVersion.version_number.desc()).all()
