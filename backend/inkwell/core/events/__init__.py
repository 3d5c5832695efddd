from .bus import Event, EventBus
from .events import (
    DocumentCreatedEvent,
    DocumentUpdatedEvent,
    DocumentDeletedEvent,
    DocumentSharedEvent,
    ShareRevokedEvent,
    PasswordResetRequestedEvent,
)

__all__ = [
    "Event",
    "EventBus",
    "DocumentCreatedEvent",
    "DocumentUpdatedEvent",
    "DocumentDeletedEvent",
    "DocumentSharedEvent",
    "ShareRevokedEvent",
    "PasswordResetRequestedEvent",
]
