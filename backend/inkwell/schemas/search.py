from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from .user import UserSummary


class SearchResult(BaseModel):
    id: str
    title: str
    content: str
    is_public: bool
    created_at: datetime
    updated_at: datetime
    author: Optional[UserSummary] = None
    title_match: bool
    content_match: bool
    snippet: str
