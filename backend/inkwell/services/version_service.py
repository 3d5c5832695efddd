from typing import List
from sqlalchemy.orm import Session
from ..repositories import DocumentRepository, ShareRepository, VersionRepository
from ..core.access import AccessEvaluator
from ..models import DocumentVersion
from ..exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)


class VersionService:
    """Read access to the version ledger"""

    def __init__(self, db: Session):
        self.document_repo = DocumentRepository(db)
        self.version_repo = VersionRepository(db)
        self.access = AccessEvaluator(ShareRepository(db))
        self.db = db

    def list_versions(self, user_id: str, document_id: str) -> List[DocumentVersion]:
        """List snapshots of a document the caller may view, newest first"""
        logger.debug(f"Listing versions of document {document_id} for user {user_id}")
        document = self.document_repo.get(document_id)
        if not document:
            raise NotFoundError("Document")
        self.access.require_view(user_id, document)
        return self.version_repo.get_by_document_id(document_id)
