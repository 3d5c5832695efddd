"""
Event Handler Classes and Registration

Each event type has a dedicated handler class that processes the event.
"""
from .document_handler import DocumentEventHandler
from .auth_handler import AuthEventHandler
from ..bus import EventBus
from ..events import (
    DocumentCreatedEvent,
    DocumentUpdatedEvent,
    DocumentDeletedEvent,
    DocumentSharedEvent,
    ShareRevokedEvent,
    PasswordResetRequestedEvent,
)
from ....clients import EmailClient
import logging

logger = logging.getLogger(__name__)


def register_event_handlers(event_bus: EventBus, email_client: EmailClient):
    """Register all event handlers with the event bus"""
    document_handler = DocumentEventHandler()
    auth_handler = AuthEventHandler(email_client)

    event_bus.subscribe(DocumentCreatedEvent, document_handler.handle_created)
    event_bus.subscribe(DocumentUpdatedEvent, document_handler.handle_updated)
    event_bus.subscribe(DocumentDeletedEvent, document_handler.handle_deleted)
    event_bus.subscribe(DocumentSharedEvent, document_handler.handle_shared)
    event_bus.subscribe(ShareRevokedEvent, document_handler.handle_share_revoked)
    event_bus.subscribe(PasswordResetRequestedEvent, auth_handler.handle_password_reset_requested)
    logger.info("Event handlers registered successfully")


__all__ = [
    "DocumentEventHandler",
    "AuthEventHandler",
    "register_event_handlers",
]
