from typing import Generic, TypeVar, Type, Optional
from sqlalchemy.orm import Session
from ..core.database import Base
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations"""
    
    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db
    
    def get(self, id: str) -> Optional[ModelType]:
        """Get a record by ID"""
        return self.db.query(self.model).filter(self.model.id == id).first()
    
    def create(self, **kwargs) -> ModelType:
        """Create a new record"""
        instance = self.model(**kwargs)
        self.db.add(instance)
        self.db.flush()  # Flush instead of commit to allow rollback
        logger.debug(f"Created {self.model.__name__} with id: {instance.id}")
        return instance
    
    def commit(self) -> None:
        """Commit the current transaction"""
        self.db.commit()
    
    def rollback(self) -> None:
        """Rollback the current transaction"""
        self.db.rollback()


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally"""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
