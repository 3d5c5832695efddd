from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from ..models.share import Permission
from .user import UserSummary, UserContact


class ShareCreate(BaseModel):
    user_email: EmailStr = Field(alias="userEmail")
    permission: Permission

    class Config:
        populate_by_name = True


class Share(BaseModel):
    id: str
    document_id: str
    user_id: str
    permission: Permission
    shared_by: str
    created_at: datetime

    class Config:
        from_attributes = True


class ShareResult(BaseModel):
    share: Share
    user: UserContact


class ShareDetail(Share):
    user: UserSummary
    shared_by_user: UserSummary
