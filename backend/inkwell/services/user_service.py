from typing import List
from sqlalchemy.orm import Session
from ..repositories import UserRepository
from ..schemas import UserContact, UserProfile
from ..exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 10


class UserService:
    """Service for looking up other users"""

    def __init__(self, db: Session):
        self.user_repo = UserRepository(db)
        self.db = db

    def search_users(self, user_id: str, query: str) -> List[UserContact]:
        """Find users to mention or share with, excluding the caller"""
        if not query or len(query) < MIN_QUERY_LENGTH:
            return []
        users = self.user_repo.search(query, exclude_id=user_id, limit=MAX_RESULTS)
        return [UserContact(id=user.id, name=user.full_name, email=user.email) for user in users]

    def get_profile(self, user_id: str) -> UserProfile:
        user = self.user_repo.get(user_id)
        if not user:
            raise NotFoundError("User")
        return UserProfile(id=user.id, name=user.full_name, email=user.email, created_at=user.created_at)
