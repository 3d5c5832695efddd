"""
Document Event Handler

Handles all document-related events:
- DocumentCreatedEvent
- DocumentUpdatedEvent
- DocumentDeletedEvent
- DocumentSharedEvent
- ShareRevokedEvent
"""
from ..events import (
    DocumentCreatedEvent,
    DocumentUpdatedEvent,
    DocumentDeletedEvent,
    DocumentSharedEvent,
    ShareRevokedEvent,
)
import logging

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


class DocumentEventHandler:
    """Handler for document-related events"""
    
    def handle_created(self, event: DocumentCreatedEvent):
        """Handle document created event"""
        logger.info(
            f"Document created: '{event.title}' (id: {event.document_id}) "
            f"by user {event.user_id} at {event.timestamp}"
        )
    
    def handle_updated(self, event: DocumentUpdatedEvent):
        """Log document update with change details"""
        changed_fields = ", ".join(event.changes.keys()) or "none"
        
        change_details = []
        for field, value in event.changes.items():
            value_str = str(value)
            if len(value_str) > PREVIEW_LENGTH:
                value_str = value_str[:PREVIEW_LENGTH] + "..."
            change_details.append(f"{field}={value_str!r}")
        
        logger.info(
            f"Document updated: {event.document_id} to version {event.version} by user {event.user_id} "
            f"(changed fields: {changed_fields}, snapshot: {event.snapshot_created}) at {event.timestamp}"
        )
        if change_details:
            logger.debug(f"  Changes: {'; '.join(change_details)}")
    
    def handle_deleted(self, event: DocumentDeletedEvent):
        """Handle document deleted event"""
        logger.info(
            f"Document deleted: '{event.title}' (id: {event.document_id}) "
            f"by user {event.user_id} at {event.timestamp}"
        )
    
    def handle_shared(self, event: DocumentSharedEvent):
        logger.info(
            f"Document {event.document_id} shared with user {event.user_id} "
            f"({event.permission}) by user {event.shared_by}"
        )
    
    def handle_share_revoked(self, event: ShareRevokedEvent):
        if event.existed:
            logger.info(f"Share revoked: user {event.user_id} on document {event.document_id} by user {event.revoked_by}")
        else:
            logger.debug(f"Share revoke was a no-op: user {event.user_id} on document {event.document_id}")
