from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from ..models.user import User
from .base import BaseRepository, escape_like


class UserRepository(BaseRepository[User]):
    """Repository for User model"""
    
    def __init__(self, db: Session):
        super().__init__(User, db)
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, ignoring case"""
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()
    
    def search(self, query: str, exclude_id: Optional[str] = None, limit: int = 10) -> List[User]:
        """Case-insensitive match on first name, last name or email"""
        pattern = f"%{escape_like(query)}%"
        q = self.db.query(User).filter(
            or_(
                User.first_name.ilike(pattern, escape="\\"),
                User.last_name.ilike(pattern, escape="\\"),
                User.email.ilike(pattern, escape="\\"),
            )
        )
        if exclude_id:
            q = q.filter(User.id != exclude_id)
        return q.order_by(User.first_name, User.last_name).limit(limit).all()
