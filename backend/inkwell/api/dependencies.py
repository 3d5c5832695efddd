"""
Dependency Injection for API Routes

Services are built per request from the request's database session and the
application-scoped objects stored on ``app.state`` by ``create_app``.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from ..config import Settings
from ..core.database import get_db
from ..core.events import EventBus
from ..core.security import get_settings
from ..services import (
    AuthService,
    DocumentService,
    ShareService,
    VersionService,
    SearchService,
    UserService,
)


def get_event_bus(request: Request) -> EventBus:
    """Get the application's EventBus"""
    return request.app.state.event_bus


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    event_bus: EventBus = Depends(get_event_bus)
) -> AuthService:
    """
    Get AuthService instance
    
    Args:
        db: Database session (injected by FastAPI)
        settings: Application settings
        event_bus: Application event bus
    
    Returns:
        AuthService instance
    """
    return AuthService(db, settings, event_bus)


def get_document_service(
    db: Session = Depends(get_db),
    event_bus: EventBus = Depends(get_event_bus)
) -> DocumentService:
    """Get DocumentService instance"""
    return DocumentService(db, event_bus)


def get_share_service(
    db: Session = Depends(get_db),
    event_bus: EventBus = Depends(get_event_bus)
) -> ShareService:
    """Get ShareService instance"""
    return ShareService(db, event_bus)


def get_version_service(db: Session = Depends(get_db)) -> VersionService:
    """Get VersionService instance"""
    return VersionService(db)


def get_search_service(db: Session = Depends(get_db)) -> SearchService:
    """Get SearchService instance"""
    return SearchService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Get UserService instance"""
    return UserService(db)
