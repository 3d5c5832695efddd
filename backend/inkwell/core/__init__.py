from .database import Base, Database, get_db
from .logging_config import setup_logging
from .events import EventBus, Event

__all__ = [
    "Base",
    "Database",
    "get_db",
    "setup_logging",
    "EventBus",
    "Event",
]
