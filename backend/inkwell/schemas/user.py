from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserBase(BaseModel):
    email: str
    first_name: str
    last_name: str


class User(UserBase):
    id: str
    created_at: datetime
    last_login: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    """Display fields joined onto documents, shares and versions"""
    id: str
    first_name: str
    last_name: str
    email: str

    class Config:
        from_attributes = True


class UserContact(BaseModel):
    """Compact user card used by sharing and mention lookup"""
    id: str
    name: str
    email: str


class UserProfile(UserContact):
    created_at: datetime
