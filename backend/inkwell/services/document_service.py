from typing import List, Optional
from sqlalchemy.orm import Session
from ..repositories import DocumentRepository, ShareRepository, VersionRepository
from ..core.access import AccessEvaluator
from ..core.events import EventBus, DocumentCreatedEvent, DocumentUpdatedEvent, DocumentDeletedEvent
from ..models import Document
from ..schemas import DocumentCreate, DocumentUpdate, Document as DocumentSchema, to_document_schema
from ..exceptions import NotFoundError
from ..core.telemetry import get_tracer
from opentelemetry import trace
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

INITIAL_VERSION_SUMMARY = "Initial version"
CONTENT_UPDATED_SUMMARY = "Content updated"


class DocumentService:
    """Service for document operations"""

    def __init__(self, db: Session, event_bus: EventBus):
        self.document_repo = DocumentRepository(db)
        self.share_repo = ShareRepository(db)
        self.version_repo = VersionRepository(db)
        self.access = AccessEvaluator(self.share_repo)
        self.event_bus = event_bus
        self.db = db

    def get_existing(self, document_id: str) -> Document:
        """Load a document or raise NotFoundError"""
        document = self.document_repo.get_with_author(document_id)
        if not document:
            raise NotFoundError("Document")
        return document

    def list_documents(self, user_id: str) -> List[DocumentSchema]:
        """List documents the user authored or that were shared with them"""
        logger.debug(f"Listing documents for user: {user_id}")
        documents = self.document_repo.get_accessible_by_user(user_id)
        return [
            to_document_schema(document, self.access.permission_for(user_id, document))
            for document in documents
        ]

    def get_document(self, user_id: Optional[str], document_id: str) -> DocumentSchema:
        """Get a document the caller may view; anonymous callers only reach public ones"""
        logger.debug(f"Getting document {document_id} for user {user_id or 'anonymous'}")
        document = self.get_existing(document_id)
        self.access.require_view(user_id, document)
        permission = None
        if not self.access.is_author(user_id, document):
            permission = self.access.permission_for(user_id, document)
        return to_document_schema(document, permission)

    def create_document(self, user_id: str, document_data: DocumentCreate) -> DocumentSchema:
        """Create a document together with its first snapshot"""
        logger.info(f"Creating document '{document_data.title}' for user {user_id}")

        try:
            document = self.document_repo.create(
                title=document_data.title,
                content=document_data.content,
                is_public=document_data.is_public,
                author_id=user_id,
                version=1
            )
            self.version_repo.create(
                document_id=document.id,
                version_number=1,
                title=document.title,
                content=document.content,
                created_by=user_id,
                change_summary=INITIAL_VERSION_SUMMARY
            )
            self.document_repo.commit()
            logger.info(f"Document created successfully: {document.id}")
        except Exception as e:
            logger.error(f"Error creating document: {e}")
            self.document_repo.rollback()
            raise

        self.event_bus.publish(DocumentCreatedEvent(
            document_id=document.id,
            user_id=user_id,
            title=document.title
        ))

        return to_document_schema(self.get_existing(document.id))

    def update_document(self, user_id: str, document_id: str, document_data: DocumentUpdate) -> DocumentSchema:
        """Apply a partial update

        Every accepted update bumps the version. Only a change of content
        appends a snapshot; title or visibility changes alone do not.
        """
        logger.info(f"Updating document {document_id} for user {user_id}")

        with tracer.start_as_current_span("document.update") as span:
            span.set_attribute("document.id", document_id)
            span.set_attribute("document.user_id", user_id)
            try:
                document = self.get_existing(document_id)
                self.access.require_edit(user_id, document)

                update_data = {}
                if document_data.title is not None:
                    update_data["title"] = document_data.title
                if document_data.content is not None:
                    update_data["content"] = document_data.content
                if document_data.is_public is not None:
                    update_data["is_public"] = document_data.is_public

                content_changed = "content" in update_data and update_data["content"] != document.content

                for key, value in update_data.items():
                    setattr(document, key, value)
                self.document_repo.bump_version(document)

                if content_changed:
                    # document.title already holds the incoming title when one was sent
                    self.version_repo.create(
                        document_id=document.id,
                        version_number=document.version,
                        title=document.title,
                        content=document.content,
                        created_by=user_id,
                        change_summary=CONTENT_UPDATED_SUMMARY
                    )

                self.document_repo.commit()
                span.set_attribute("document.version", document.version)
                span.set_attribute("document.snapshot_created", content_changed)
                logger.info(f"Document updated successfully: {document_id} (version {document.version})")
            except Exception as e:
                logger.error(f"Error updating document: {e}")
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                self.document_repo.rollback()
                raise

        self.event_bus.publish(DocumentUpdatedEvent(
            document_id=document_id,
            user_id=user_id,
            version=document.version,
            changes=update_data,
            snapshot_created=content_changed
        ))

        permission = None
        if not self.access.is_author(user_id, document):
            permission = self.access.permission_for(user_id, document)
        return to_document_schema(document, permission)

    def delete_document(self, user_id: str, document_id: str) -> None:
        """Delete a document (cascades to shares and versions)"""
        logger.info(f"Deleting document {document_id} for user {user_id}")

        try:
            document = self.get_existing(document_id)
            self.access.require_manage(user_id, document, "delete this document")

            title = document.title
            self.db.delete(document)
            self.document_repo.commit()
            logger.info(f"Document deleted successfully: {document_id}")
        except Exception as e:
            logger.error(f"Error deleting document: {e}")
            self.document_repo.rollback()
            raise

        self.event_bus.publish(DocumentDeletedEvent(
            document_id=document_id,
            user_id=user_id,
            title=title
        ))
