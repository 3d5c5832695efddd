from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from .user import UserSummary


class DocumentVersion(BaseModel):
    id: str
    document_id: str
    version_number: int
    title: str
    content: str
    created_by: str
    created_at: datetime
    change_summary: Optional[str] = None
    created_by_user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
