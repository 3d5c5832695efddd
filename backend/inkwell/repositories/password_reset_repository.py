from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from ..models.password_reset import PasswordReset
from .base import BaseRepository


class PasswordResetRepository(BaseRepository[PasswordReset]):
    """Repository for PasswordReset model"""
    
    def __init__(self, db: Session):
        super().__init__(PasswordReset, db)
    
    def get_active(self, token: str, user_id: str, now: datetime) -> Optional[PasswordReset]:
        """Get an unexpired reset request matching token and user"""
        return self.db.query(PasswordReset).filter(
            PasswordReset.token == token,
            PasswordReset.user_id == user_id,
            PasswordReset.expires_at >= now
        ).first()
    
    def delete_by_token(self, token: str) -> int:
        deleted = self.db.query(PasswordReset).filter(PasswordReset.token == token).delete(synchronize_session="fetch")
        self.db.flush()
        return deleted
