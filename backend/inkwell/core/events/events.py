"""
Event Definitions

Events are used for side effects of core operations:
- Activity logs
- Outgoing email
- Audit trails

Core business logic (anything the caller needs in the response) uses direct service calls.
"""
from .bus import Event
from typing import Dict, Any
from ...utils import get_current_timestamp


class DocumentCreatedEvent(Event):
    """Event fired when a document is created"""
    
    def __init__(self, document_id: str, user_id: str, title: str):
        self.document_id = document_id
        self.user_id = user_id
        self.title = title
        self.timestamp = get_current_timestamp()
    
    def __repr__(self):
        return f"DocumentCreatedEvent(document_id={self.document_id}, user_id={self.user_id}, title='{self.title}')"


class DocumentUpdatedEvent(Event):
    """Event fired when a document is updated"""
    
    def __init__(self, document_id: str, user_id: str, version: int, changes: Dict[str, Any], snapshot_created: bool):
        self.document_id = document_id
        self.user_id = user_id
        self.version = version
        self.changes = changes  # Dictionary of changed fields
        self.snapshot_created = snapshot_created
        self.timestamp = get_current_timestamp()
    
    def __repr__(self):
        return f"DocumentUpdatedEvent(document_id={self.document_id}, user_id={self.user_id}, version={self.version}, changes={list(self.changes.keys())})"


class DocumentDeletedEvent(Event):
    """Event fired when a document is deleted"""
    
    def __init__(self, document_id: str, user_id: str, title: str):
        self.document_id = document_id
        self.user_id = user_id
        self.title = title
        self.timestamp = get_current_timestamp()
    
    def __repr__(self):
        return f"DocumentDeletedEvent(document_id={self.document_id}, user_id={self.user_id}, title='{self.title}')"


class DocumentSharedEvent(Event):
    """Event fired when a share is created or its permission changed"""
    
    def __init__(self, document_id: str, shared_by: str, user_id: str, permission: str):
        self.document_id = document_id
        self.shared_by = shared_by
        self.user_id = user_id
        self.permission = permission
        self.timestamp = get_current_timestamp()
    
    def __repr__(self):
        return f"DocumentSharedEvent(document_id={self.document_id}, user_id={self.user_id}, permission={self.permission})"


class ShareRevokedEvent(Event):
    """Event fired when a share is removed"""
    
    def __init__(self, document_id: str, revoked_by: str, user_id: str, existed: bool):
        self.document_id = document_id
        self.revoked_by = revoked_by
        self.user_id = user_id
        self.existed = existed
        self.timestamp = get_current_timestamp()
    
    def __repr__(self):
        return f"ShareRevokedEvent(document_id={self.document_id}, user_id={self.user_id}, existed={self.existed})"


class PasswordResetRequestedEvent(Event):
    """Event fired when a reset token was issued for an existing account"""
    
    def __init__(self, user_id: str, email: str, first_name: str, token: str):
        self.user_id = user_id
        self.email = email
        self.first_name = first_name
        self.token = token
        self.timestamp = get_current_timestamp()
    
    def __repr__(self):
        # Never render the token
        return f"PasswordResetRequestedEvent(user_id={self.user_id}, email='{self.email}')"
